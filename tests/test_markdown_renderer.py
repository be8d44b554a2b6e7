"""
Markdown 변환기 테스트
"""

import pytest
from docconv import (
    MarkdownRenderer, MarkdownParser, DocxBuilder, DocxReader,
    WordParagraph, StyledRun, WriteError,
)


def para(text='', style_name='', is_numbered=False, level=0, **flags):
    return WordParagraph(
        style_name=style_name, is_numbered=is_numbered, numbering_level=level,
        runs=[StyledRun(text, **flags)],
    )


@pytest.fixture
def renderer():
    return MarkdownRenderer()


class TestMarkdownRenderer:
    """WordParagraph → Markdown 테스트"""

    def test_headings(self, renderer):
        md = renderer.convert([
            para('One', 'Heading1'),
            para('Two', 'Heading2'),
            para('Three', 'Heading3'),
        ])
        assert md == '# One\n\n## Two\n\n### Three\n\n'

    def test_unrecognized_heading_level_is_body(self, renderer):
        assert renderer.convert([para('Four', 'Heading4')]) == 'Four\n\n'

    def test_body(self, renderer):
        assert renderer.convert([para('text', 'Normal'), para('', '')]) == 'text\n\n\n\n'

    def test_bullet_list(self, renderer):
        md = renderer.convert([para('a', 'ListParagraph'), para('b', 'ListParagraph', level=3)])
        assert md == '- a\n- b\n'

    def test_numbered_list_always_uses_one(self, renderer):
        md = renderer.convert([
            para('first', 'ListParagraph', is_numbered=True),
            para('second', 'ListParagraph', is_numbered=True),
            para('nested', 'ListParagraph', is_numbered=True, level=2),
        ])
        assert md == '1. first\n1. second\n    1. nested\n'

    def test_emphasis(self, renderer):
        paragraph = WordParagraph(runs=[
            StyledRun('plain '),
            StyledRun('bold', bold=True),
            StyledRun(' '),
            StyledRun('italic', italic=True),
        ])
        assert renderer.convert([paragraph]) == 'plain **bold** _italic_\n\n'

    def test_bold_and_italic_renders_bold_only(self, renderer):
        md = renderer.convert([para('text', bold=True, italic=True)])
        assert md == '**text**\n\n'
        assert '_' not in md

    def test_empty_styled_run(self, renderer):
        assert renderer.convert([para('', bold=True)]) == '\n\n'

    def test_progress(self, renderer):
        values = []
        renderer.convert([para('a'), para('b'), para('c'), para('d')], values.append)
        assert values == [0, 25, 50, 75]

    def test_save_to_missing_directory(self, renderer, tmp_path):
        with pytest.raises(WriteError):
            renderer.save([para('x')], str(tmp_path / 'missing' / 'out.md'))


class TestRoundTrip:
    """Markdown → DOCX → Markdown"""

    def _round_trip(self, text, tmp_path):
        path = tmp_path / 'round.docx'
        DocxBuilder().save(MarkdownParser().parse(text), str(path))
        return MarkdownRenderer().convert(DocxReader().read(str(path)))

    def test_headings(self, tmp_path):
        assert self._round_trip('# A\n## B\n### C', tmp_path) == '# A\n\n## B\n\n### C\n\n'

    def test_deep_headings_lose_level(self, tmp_path):
        assert self._round_trip('#### D', tmp_path) == 'D\n\n'

    def test_list_becomes_unordered(self, tmp_path):
        """순서 정보는 보존되지 않음"""
        assert self._round_trip('- item one\n- item two', tmp_path) == '- item one\n- item two\n'
        assert self._round_trip('1. first', tmp_path) == '- first\n'
