"""
공용 테스트 픽스처
"""

import logging

import pytest
import docx
from openpyxl import Workbook as XlsxWorkbook


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """설정/로그 파일을 임시 폴더에 기록"""
    home = tmp_path / 'home'
    home.mkdir()
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.setenv('APPDATA', str(home))
    yield home

    # setup_logging이 붙인 핸들러 정리
    logger = logging.getLogger('docconv')
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.fixture
def make_docx(tmp_path):
    """python-docx로 샘플 DOCX 생성

    build(document) 콜백으로 문단을 추가한 뒤 저장된 경로 반환
    """
    def _make(build, name='sample.docx'):
        document = docx.Document()
        build(document)
        path = tmp_path / name
        document.save(str(path))
        return path
    return _make


@pytest.fixture
def make_xlsx(tmp_path):
    """openpyxl로 샘플 XLSX 생성

    sheets: [(시트 이름, 행 목록), ...]
    """
    def _make(sheets, name='sample.xlsx'):
        wb = XlsxWorkbook()
        wb.remove(wb.active)
        for title, rows in sheets:
            ws = wb.create_sheet(title)
            for row in rows:
                ws.append(row)
        path = tmp_path / name
        wb.save(str(path))
        return path
    return _make
