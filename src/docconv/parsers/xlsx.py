"""
XLSX 파서

스프레드시트(.xlsx)를 시트/행/셀 문자열 구조로 읽는 모듈
"""

import datetime
import logging
from typing import Any, List, Set

from openpyxl import load_workbook

from .base import BaseParser
from ..errors import ReadError
from ..models import Cell, Row, Sheet, Workbook

logger = logging.getLogger(__name__)


class XlsxReader(BaseParser):
    """XLSX 통합 문서 리더 (전체를 메모리에 적재)"""

    SUPPORTED_EXTENSIONS: Set[str] = {'.xlsx'}

    def parse_file(self, file_path: str) -> Workbook:
        return self.read(file_path)

    def read(self, file_path: str) -> Workbook:
        """XLSX 파일 읽기

        Args:
            file_path: XLSX 파일 경로

        Returns:
            Workbook: 시트 순서를 유지한 통합 문서

        Raises:
            ReadError: 파일이 없거나 XLSX로 해석할 수 없는 경우
        """
        try:
            # 수식은 마지막으로 계산된 값을 사용
            wb = load_workbook(file_path, data_only=True)
        except Exception as e:
            raise ReadError(f'Cannot open {file_path}: {e}') from e

        try:
            sheets = [
                Sheet(name=ws.title, rows=[self._read_row(r) for r in ws.iter_rows(values_only=True)])
                for ws in wb.worksheets
            ]
        finally:
            wb.close()

        logger.debug('XLSX 읽기 완료: %s (%d시트)', file_path, len(sheets))
        return Workbook(sheets=sheets)

    @staticmethod
    def _read_row(values) -> Row:
        """셀 값 → 문자열 셀 (뒤쪽 빈 셀 제거)"""
        values = list(values)
        while values and values[-1] is None:
            values.pop()
        return Row(cells=[Cell(text=cell_text(v)) for v in values])


def cell_text(value: Any) -> str:
    """셀 값을 Excel 화면에 가까운 표시용 문자열로 변환

    - None → 빈 문자열
    - bool → TRUE / FALSE
    - 자정 datetime, date → YYYY-MM-DD
    - float → 유효숫자 15자리 (0.1+0.2 → 0.3, 3.0 → 3)
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'TRUE' if value else 'FALSE'
    if isinstance(value, datetime.datetime):
        if value.time() == datetime.time(0):
            return value.date().isoformat()
        return str(value)
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, float):
        return format(value, '.15g')
    return str(value)
