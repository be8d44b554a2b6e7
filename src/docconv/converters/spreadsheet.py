"""
스프레드시트 변환기

Workbook의 시트마다 Markdown 표를 만든다
"""

from typing import List, Optional

from .base import BaseConverter
from ..models import Row, Sheet, Workbook
from ..progress import ProgressCallback, percent, report


class SpreadsheetRenderer(BaseConverter):
    """Workbook → Markdown 변환기 (시트당 제목 + 표 하나)"""

    def convert(self, workbook: Workbook,
                on_progress: Optional[ProgressCallback] = None) -> str:
        """Workbook을 Markdown으로 변환

        진행률 분모는 전체 행 수가 아니라 현재 시트의 행 수를 기준으로 하므로
        시트 크기와 관계없이 시트마다 같은 구간을 차지한다 (행 수 대비 부정확).

        Args:
            workbook: 변환할 통합 문서
            on_progress: 진행률 콜백 (행마다 호출)

        Returns:
            str: Markdown 문자열
        """
        sheet_count = workbook.sheet_count
        parts = []

        for sheet_index, sheet in enumerate(workbook.sheets):
            parts.append(self._convert_sheet(sheet, sheet_index, sheet_count, on_progress))

        return ''.join(parts)

    render = convert

    def _convert_sheet(self, sheet: Sheet, sheet_index: int, sheet_count: int,
                       on_progress: Optional[ProgressCallback]) -> str:
        """시트 → Markdown 섹션"""
        lines = [f'# {sheet.name}', '']
        rows = sheet.row_count
        header_done = False

        for row_index, row in enumerate(sheet.rows):
            if not row.is_empty():
                lines.append(self._convert_row(row))
                # 첫 행은 항상 헤더로 취급
                if not header_done:
                    lines.append('| ' + ' | '.join(['---'] * row.cell_count) + ' |')
                    header_done = True

            report(on_progress, percent(sheet_index * rows + row_index, sheet_count * rows))

        lines.append('')
        return '\n'.join(lines) + '\n'

    @staticmethod
    def _convert_row(row: Row) -> str:
        """행 → 표 한 줄"""
        cells: List[str] = []
        for cell in row.cells:
            # 줄바꿈은 공백으로, 파이프는 이스케이프
            cells.append(cell.text.replace('\n', ' ').replace('|', '\\|'))
        return '| ' + ' | '.join(cells) + ' |'
