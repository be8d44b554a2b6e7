"""
DOCX 파서

Word 문서(.docx)의 문단을 스타일 ID, 번호 매기기 정보, 런 서식과 함께 읽는 모듈
"""

import logging
from typing import List, Set, Tuple

import docx
from docx.text.hyperlink import Hyperlink

from .base import BaseParser
from ..errors import ReadError
from ..models import StyledRun, WordParagraph

logger = logging.getLogger(__name__)


class DocxReader(BaseParser):
    """DOCX 문단 리더"""

    SUPPORTED_EXTENSIONS: Set[str] = {'.docx'}

    def parse_file(self, file_path: str) -> List[WordParagraph]:
        return self.read(file_path)

    def read(self, file_path: str) -> List[WordParagraph]:
        """DOCX 파일의 본문 문단을 문서 순서대로 반환

        Args:
            file_path: DOCX 파일 경로

        Returns:
            List[WordParagraph]: 문단 목록

        Raises:
            ReadError: 파일이 없거나 DOCX 패키지로 해석할 수 없는 경우
        """
        try:
            document = docx.Document(file_path)
            paragraphs = [self._read_paragraph(p) for p in document.paragraphs]
        except Exception as e:
            # python-docx는 손상된 패키지에 대해 다양한 예외를 던짐
            raise ReadError(f'Cannot open {file_path}: {e}') from e

        logger.debug('DOCX 읽기 완료: %s (%d문단)', file_path, len(paragraphs))
        return paragraphs

    def _read_paragraph(self, paragraph) -> WordParagraph:
        """python-docx 문단 → WordParagraph"""
        style = paragraph.style
        style_name = style.style_id if style is not None and style.style_id else ''
        is_numbered, level = self._numbering(paragraph)

        runs = [
            StyledRun(text=run.text, bold=bool(run.bold), italic=bool(run.italic))
            for run in self._iter_runs(paragraph)
        ]
        return WordParagraph(
            style_name=style_name,
            is_numbered=is_numbered,
            numbering_level=level,
            runs=runs,
        )

    @staticmethod
    def _iter_runs(paragraph):
        """문단의 런을 문서 순서대로 (하이퍼링크 안의 런 포함)"""
        for item in paragraph.iter_inner_content():
            if isinstance(item, Hyperlink):
                yield from item.runs
            else:
                yield item

    @staticmethod
    def _numbering(paragraph) -> Tuple[bool, int]:
        """문단의 w:numPr 해석 → (번호 정의 참조 여부, ilvl)"""
        pPr = paragraph._p.pPr
        numPr = pPr.numPr if pPr is not None else None
        if numPr is None:
            return False, 0

        level = numPr.ilvl.val if numPr.ilvl is not None else 0
        return numPr.numId is not None, int(level)
