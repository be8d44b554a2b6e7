"""
파서 모듈

Markdown, DOCX, XLSX 파일을 중간 모델로 읽는 모듈
"""

from .base import BaseParser
from .markdown import MarkdownParser
from .docx import DocxReader
from .xlsx import XlsxReader

__all__ = ["BaseParser", "MarkdownParser", "DocxReader", "XlsxReader"]
