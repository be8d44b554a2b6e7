"""
Markdown 변환기

DOCX 문단 목록을 Markdown 텍스트로 변환
"""

from typing import List, Optional

from .base import BaseConverter
from ..models import HeadingStyle, ListStyle, StyledRun, WordParagraph
from ..progress import ProgressCallback, percent, report


class MarkdownRenderer(BaseConverter):
    """WordParagraph → Markdown 변환기"""

    def convert(self, paragraphs: List[WordParagraph],
                on_progress: Optional[ProgressCallback] = None) -> str:
        """문단 목록을 Markdown으로 변환

        Args:
            paragraphs: 문서 순서의 문단 목록
            on_progress: 진행률 콜백 (문단마다 호출)

        Returns:
            str: Markdown 문자열
        """
        total = len(paragraphs)
        parts = []

        for i, para in enumerate(paragraphs):
            parts.append(self._convert_paragraph(para))
            report(on_progress, percent(i, total))

        return ''.join(parts)

    render = convert

    def _convert_paragraph(self, para: WordParagraph) -> str:
        """문단 → Markdown"""
        text = ''.join(self._convert_run(run) for run in para.runs)
        style = para.style

        if isinstance(style, HeadingStyle):
            return f"{'#' * style.level} {text}\n\n"

        if isinstance(style, ListStyle):
            if style.numbered:
                # 실제 순번은 추적하지 않음 (항상 1.)
                return f"{'  ' * style.level}1. {text}\n"
            return f'- {text}\n'

        # BodyStyle
        return f'{text}\n\n'

    @staticmethod
    def _convert_run(run: StyledRun) -> str:
        """런 → 인라인 Markdown (굵게 우선, 조합하지 않음)"""
        # 빈 텍스트에는 스타일을 적용하지 않음
        if not run.text:
            return ''
        if run.bold:
            return f'**{run.text}**'
        if run.italic:
            return f'_{run.text}_'
        return run.text
