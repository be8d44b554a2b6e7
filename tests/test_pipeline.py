"""
변환 파이프라인 테스트
"""

from pathlib import Path

import pytest
import docx
from docconv import convert, UnsupportedFormatError, ReadError, WriteError
from docconv.utils import detect_format, output_path_for, conversion_label


class TestOutputPath:
    """출력 경로 규칙"""

    @pytest.mark.parametrize('name, expected', [
        ('notes.md', 'notes.docx'),
        ('report.docx', 'report.md'),
        ('book.xlsx', 'book.md'),
        ('archive.v2.md', 'archive.v2.docx'),
    ])
    def test_remap(self, name, expected):
        assert output_path_for(Path('/in') / name, '/out') == Path('/out') / expected

    @pytest.mark.parametrize('name', ['notes.txt', 'old.doc', 'noext'])
    def test_unsupported(self, name):
        with pytest.raises(UnsupportedFormatError):
            output_path_for(name, '/out')

    def test_detect_format(self):
        assert detect_format('a.MD') == 'md'
        assert detect_format('a.Docx') == 'docx'
        assert detect_format('a.xlsx') == 'xlsx'
        assert detect_format('a.csv') == 'unknown'

    def test_conversion_label(self):
        assert conversion_label('a.md') == 'Markdown to Word'
        assert conversion_label('a.docx') == 'Word to Markdown'
        assert conversion_label('a.xlsx') == 'Excel to Markdown'
        assert conversion_label('a.txt') == '[None Selected]'


class TestConvert:
    """convert() 테스트"""

    def test_markdown_to_docx(self, tmp_path):
        source = tmp_path / 'notes.md'
        source.write_text('# Title\n\nBody\n- a\n- b', encoding='utf-8')
        out_dir = tmp_path / 'out'
        out_dir.mkdir()
        values = []

        output = convert(source, out_dir, values.append)

        assert output == out_dir / 'notes.docx'
        document = docx.Document(str(output))
        assert [p.style.style_id for p in document.paragraphs] == [
            'Heading1', 'Normal', 'Normal', 'ListParagraph', 'ListParagraph',
        ]
        assert values == sorted(values)
        assert values[-1] == 100

    def test_markdown_to_docx_reports_100_after_write(self, tmp_path):
        source = tmp_path / 'notes.md'
        source.write_text('a', encoding='utf-8')
        expected = tmp_path / 'notes.docx'
        seen = []

        convert(source, tmp_path, lambda v: seen.append((v, expected.exists())))

        assert seen[-1] == (100, True)

    def test_docx_to_markdown(self, make_docx, tmp_path):
        def build(document):
            document.add_heading('Report', level=2)
            p = document.add_paragraph()
            p.add_run('Key').bold = True
            p.add_run(' point')

        source = make_docx(build, name='report.docx')
        values = []

        output = convert(source, tmp_path, values.append)

        assert output == tmp_path / 'report.md'
        assert output.read_text(encoding='utf-8') == '## Report\n\n**Key** point\n\n'
        assert values == [0, 50, 100]

    def test_xlsx_to_markdown(self, make_xlsx, tmp_path):
        source = make_xlsx([('Sheet1', [['A', 'B'], ['1', '2'], ['3', '4']])], name='book.xlsx')
        out_dir = tmp_path / 'out'
        out_dir.mkdir()
        values = []

        output = convert(source, out_dir, values.append)

        assert output.read_text(encoding='utf-8') == (
            '# Sheet1\n\n| A | B |\n| --- | --- |\n| 1 | 2 |\n| 3 | 4 |\n\n'
        )
        assert values[-1] == 100

    def test_existing_output_is_overwritten(self, tmp_path):
        source = tmp_path / 'doc.md'
        source.write_text('new', encoding='utf-8')
        out_dir = tmp_path / 'out'
        out_dir.mkdir()
        (out_dir / 'doc.docx').write_text('stale', encoding='utf-8')

        output = convert(source, out_dir)

        assert docx.Document(str(output)).paragraphs[0].text == 'new'

    def test_unsupported_format(self, tmp_path):
        source = tmp_path / 'notes.txt'
        source.write_text('hello', encoding='utf-8')
        values = []

        with pytest.raises(UnsupportedFormatError):
            convert(source, tmp_path, values.append)

        assert values == []
        assert sorted(p.name for p in tmp_path.iterdir()) == ['home', 'notes.txt']

    def test_missing_source(self, tmp_path):
        with pytest.raises(ReadError):
            convert(tmp_path / 'missing.docx', tmp_path)

    def test_missing_output_dir(self, tmp_path):
        """원본 파싱을 끝낸 뒤 WriteError, 출력 파일 없음"""
        source = tmp_path / 'doc.md'
        source.write_text('# A\nb', encoding='utf-8')
        out_dir = tmp_path / 'missing'
        values = []

        with pytest.raises(WriteError):
            convert(source, out_dir, values.append)

        assert values[-1] == 100
        assert not (out_dir / 'doc.docx').exists()
        assert not out_dir.exists()

    def test_missing_output_dir_for_markdown_output(self, make_xlsx, tmp_path):
        source = make_xlsx([('S', [['x']])])
        values = []

        with pytest.raises(WriteError):
            convert(source, tmp_path / 'missing', values.append)

        assert 100 not in values
