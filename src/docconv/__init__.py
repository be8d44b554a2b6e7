"""
docconv - Markdown ↔ Word, Excel → Markdown 변환기

Markdown(.md), Word 문서(.docx), 스프레드시트(.xlsx)를 중간 구조 모델을 거쳐
서로 변환하는 Python 라이브러리 및 CLI

Example:
    >>> from docconv import convert
    >>> convert('notes.md', 'out/', on_progress=print)
    PosixPath('out/notes.docx')
"""

__version__ = "0.1.0"

from .models import (
    Block,
    Heading,
    Paragraph,
    ListItem,
    Blank,
    StyledRun,
    WordParagraph,
    HeadingStyle,
    ListStyle,
    BodyStyle,
    Cell,
    Row,
    Sheet,
    Workbook,
)
from .errors import ConversionError, UnsupportedFormatError, ReadError, WriteError
from .parsers.markdown import MarkdownParser
from .parsers.docx import DocxReader
from .parsers.xlsx import XlsxReader
from .converters.docx import DocxBuilder
from .converters.markdown import MarkdownRenderer
from .converters.spreadsheet import SpreadsheetRenderer
from .pipeline import convert
from .job import ConversionJob

__all__ = [
    # Version
    "__version__",
    # Models
    "Block",
    "Heading",
    "Paragraph",
    "ListItem",
    "Blank",
    "StyledRun",
    "WordParagraph",
    "HeadingStyle",
    "ListStyle",
    "BodyStyle",
    "Cell",
    "Row",
    "Sheet",
    "Workbook",
    # Errors
    "ConversionError",
    "UnsupportedFormatError",
    "ReadError",
    "WriteError",
    # Parsers
    "MarkdownParser",
    "DocxReader",
    "XlsxReader",
    # Converters
    "DocxBuilder",
    "MarkdownRenderer",
    "SpreadsheetRenderer",
    # Pipeline
    "convert",
    "ConversionJob",
]
