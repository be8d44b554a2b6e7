"""
DOCX 변환기

Markdown 블록 목록을 Word 문서(.docx)의 문단/런 구조로 변환
"""

import logging
from typing import List

import docx
from docx.document import Document as DocxDocument

from ..errors import WriteError
from ..models import Block, Blank, Heading, ListItem, Paragraph

logger = logging.getLogger(__name__)

LIST_STYLE = 'List Paragraph'
# python-docx 기본 템플릿의 제목 스타일은 Heading 1 ~ Heading 9
MAX_HEADING_LEVEL = 9


class DocxBuilder:
    """Block → DOCX 변환기"""

    def build(self, blocks: List[Block]) -> DocxDocument:
        """블록 목록으로 새 Word 문서 생성

        Args:
            blocks: Markdown 파서가 만든 블록 목록

        Returns:
            docx.document.Document: 저장 전 문서 객체
        """
        document = docx.Document()

        for block in blocks:
            if isinstance(block, Heading):
                self._add_heading(document, block)
            elif isinstance(block, ListItem):
                self._add_list_item(document, block)
            elif isinstance(block, Paragraph):
                document.add_paragraph(block.text)
            elif isinstance(block, Blank):
                document.add_paragraph()

        return document

    def save(self, blocks: List[Block], output_path: str) -> None:
        """블록 목록을 DOCX 파일로 저장

        Raises:
            WriteError: 출력 파일을 만들거나 쓸 수 없는 경우
        """
        document = self.build(blocks)
        try:
            document.save(str(output_path))
        except OSError as e:
            raise WriteError(f'Cannot write {output_path}: {e}') from e
        logger.debug('DOCX 저장: %s (%d블록)', output_path, len(blocks))

    def _add_heading(self, document: DocxDocument, block: Heading) -> None:
        """제목 → 'Heading N' 스타일 문단"""
        level = min(max(block.level, 1), MAX_HEADING_LEVEL)
        paragraph = document.add_paragraph(style=f'Heading {level}')
        paragraph.add_run(block.text)

    def _add_list_item(self, document: DocxDocument, block: ListItem) -> None:
        """목록 항목 → 'List Paragraph' 스타일 문단 + 번호 수준(ilvl)

        번호 정의(numId)는 붙이지 않으므로 순서/비순서 목록이 같은 모양으로 저장된다.
        """
        paragraph = document.add_paragraph(style=LIST_STYLE)
        paragraph.add_run(block.text)

        numPr = paragraph._p.get_or_add_pPr().get_or_add_numPr()
        numPr.get_or_add_ilvl().val = block.level
