"""
유틸리티 함수
"""

from pathlib import Path
from typing import Union

from .errors import UnsupportedFormatError


# 입력 형식 → 출력 확장자
OUTPUT_EXTENSIONS = {
    'md': '.docx',
    'docx': '.md',
    'xlsx': '.md',
}

CONVERSION_LABELS = {
    'md': 'Markdown to Word',
    'docx': 'Word to Markdown',
    'xlsx': 'Excel to Markdown',
}


def detect_format(file_path: Union[str, Path]) -> str:
    """파일 형식 감지

    Args:
        file_path: 파일 경로

    Returns:
        str: 'md', 'docx', 'xlsx', 또는 'unknown'
    """
    ext = Path(file_path).suffix.lower().lstrip('.')
    if ext in OUTPUT_EXTENSIONS:
        return ext
    return 'unknown'


def output_path_for(input_path: Union[str, Path], output_dir: Union[str, Path]) -> Path:
    """출력 파일 경로 계산 (출력 폴더 / 원본 이름 + 바뀐 확장자)

    Args:
        input_path: 원본 파일 경로
        output_dir: 출력 폴더

    Returns:
        Path: 출력 파일 경로

    Raises:
        UnsupportedFormatError: 지원하지 않는 확장자인 경우
    """
    fmt = detect_format(input_path)
    if fmt == 'unknown':
        raise UnsupportedFormatError(f'Unsupported format: {Path(input_path).suffix or "(none)"}')
    return Path(output_dir) / (Path(input_path).stem + OUTPUT_EXTENSIONS[fmt])


def conversion_label(file_path: Union[str, Path]) -> str:
    """변환 방향 표시 문자열"""
    return CONVERSION_LABELS.get(detect_format(file_path), '[None Selected]')
