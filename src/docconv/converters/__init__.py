"""
변환기 모듈

중간 모델을 DOCX 문서 또는 Markdown 텍스트로 변환하는 모듈
"""

from .base import BaseConverter
from .docx import DocxBuilder
from .markdown import MarkdownRenderer
from .spreadsheet import SpreadsheetRenderer

__all__ = ["BaseConverter", "DocxBuilder", "MarkdownRenderer", "SpreadsheetRenderer"]
