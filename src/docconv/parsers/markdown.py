"""
Markdown 파서

Markdown 텍스트를 줄 단위로 읽어 블록 목록으로 변환
"""

import logging
from pathlib import Path
from typing import List, Optional, Set

from .base import BaseParser
from ..errors import ReadError
from ..models import Block, Blank, Heading, ListItem, Paragraph
from ..progress import ProgressCallback, percent, report

logger = logging.getLogger(__name__)

ASCII_DIGITS = '0123456789'
BULLET_MARKERS = '-*+'


class MarkdownParser(BaseParser):
    """줄 단위 Markdown 파서

    인라인 서식은 해석하지 않고 문단/목록 텍스트에 그대로 남긴다.
    """

    SUPPORTED_EXTENSIONS: Set[str] = {'.md'}

    def parse_file(self, file_path: str,
                   on_progress: Optional[ProgressCallback] = None) -> List[Block]:
        """Markdown 파일 파싱 (UTF-8, BOM 허용)

        Args:
            file_path: Markdown 파일 경로
            on_progress: 진행률 콜백

        Returns:
            List[Block]: 블록 목록

        Raises:
            ReadError: 파일을 읽을 수 없거나 UTF-8이 아닌 경우
        """
        try:
            text = Path(file_path).read_text(encoding='utf-8-sig')
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f'Cannot read {file_path}: {e}') from e
        return self.parse(text, on_progress)

    def parse(self, text: str,
              on_progress: Optional[ProgressCallback] = None) -> List[Block]:
        """Markdown 텍스트 파싱

        Args:
            text: 원본 텍스트
            on_progress: 진행률 콜백 (줄마다 호출, 마지막에 100)

        Returns:
            List[Block]: 블록 목록
        """
        lines = text.split('\n')
        total = len(lines)
        blocks: List[Block] = []
        in_list = False

        for i, raw in enumerate(lines):
            block = self._parse_line(raw.strip(), in_list)
            if block is not None:
                blocks.append(block)
                in_list = isinstance(block, ListItem)
            report(on_progress, percent(i, total))

        logger.debug('Markdown 파싱 완료: %d줄 → %d블록', total, len(blocks))
        report(on_progress, 100)
        return blocks

    def _parse_line(self, line: str, in_list: bool) -> Optional[Block]:
        """한 줄 → 블록 (목록 안의 빈 줄은 None)"""
        if not line:
            # 목록 항목 사이의 빈 줄은 문단 구분을 만들지 않음
            return None if in_list else Blank()

        if line.startswith('#'):
            level = len(line) - len(line.lstrip('#'))
            return Heading(level=level, text=line[level:].strip())

        if line[0] in BULLET_MARKERS and line[1:2] == ' ':
            return ListItem(ordered=False, level=0, text=line[2:])

        if line[0] in ASCII_DIGITS and '.' in line:
            # "3.14 is pi" 같은 줄도 번호 목록으로 분류됨
            return ListItem(ordered=True, level=0, text=line.split('.', 1)[1].strip())

        return Paragraph(text=line)
