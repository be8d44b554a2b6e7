"""
변환 파이프라인

입력 확장자에 따라 세 가지 변환 경로 중 하나를 실행
- .md   → MarkdownParser → DocxBuilder        → .docx
- .docx → DocxReader     → MarkdownRenderer   → .md
- .xlsx → XlsxReader     → SpreadsheetRenderer → .md
"""

import logging
import time
from pathlib import Path
from typing import Optional, Union

from .converters.docx import DocxBuilder
from .converters.markdown import MarkdownRenderer
from .converters.spreadsheet import SpreadsheetRenderer
from .errors import ConversionError
from .parsers.docx import DocxReader
from .parsers.markdown import MarkdownParser
from .parsers.xlsx import XlsxReader
from .progress import ProgressCallback, report
from .utils import output_path_for

logger = logging.getLogger(__name__)


def convert(input_path: Union[str, Path], output_dir: Union[str, Path],
            on_progress: Optional[ProgressCallback] = None) -> Path:
    """파일 하나를 변환하여 출력 폴더에 저장

    같은 이름의 출력 파일이 있으면 덮어쓰며, 출력 폴더는 만들지 않는다.

    Args:
        input_path: 원본 파일 (.md, .docx, .xlsx)
        output_dir: 출력 폴더
        on_progress: 진행률 콜백 (0~100)

    Returns:
        Path: 저장된 출력 파일 경로

    Raises:
        UnsupportedFormatError: 지원하지 않는 확장자 (진행률/파일 기록 없음)
        ReadError: 원본을 읽을 수 없는 경우
        WriteError: 출력 파일을 쓸 수 없는 경우
    """
    output_path = output_path_for(input_path, output_dir)
    source = str(input_path)

    logger.info('변환 시작: %s → %s', Path(source).name, output_path)
    start_time = time.time()

    try:
        if MarkdownParser.can_parse(source):
            blocks = MarkdownParser().parse_file(source, on_progress)
            DocxBuilder().save(blocks, output_path)
            report(on_progress, 100)
        elif DocxReader.can_parse(source):
            paragraphs = DocxReader().parse_file(source)
            MarkdownRenderer().save(paragraphs, output_path, on_progress)
            report(on_progress, 100)
        else:  # XlsxReader.can_parse(source)
            workbook = XlsxReader().parse_file(source)
            SpreadsheetRenderer().save(workbook, output_path, on_progress)
            report(on_progress, 100)
    except ConversionError as e:
        elapsed = time.time() - start_time
        logger.error('변환 실패: %s (%.2f초) - %s', Path(source).name, elapsed, e)
        raise

    elapsed = time.time() - start_time
    logger.info('변환 완료: %s (%.2f초)', output_path.name, elapsed)
    return output_path
