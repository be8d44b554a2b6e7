"""
데이터 모델 정의

Markdown 블록, Word 문단/런, 스프레드시트 Workbook 등 핵심 데이터 구조
"""

from dataclasses import dataclass, field
from typing import List, Union


# --- Markdown 블록 ---

@dataclass
class Heading:
    """제목 (레벨 = 선두 '#' 개수)"""
    level: int
    text: str


@dataclass
class Paragraph:
    """일반 문단"""
    text: str


@dataclass
class ListItem:
    """목록 항목

    level은 현재 항상 0 (중첩 깊이는 출력에 반영되지 않음)
    """
    ordered: bool
    text: str
    level: int = 0


@dataclass
class Blank:
    """내용 없는 문단 구분"""


Block = Union[Heading, Paragraph, ListItem, Blank]


# --- Word 문서 ---

@dataclass
class StyledRun:
    """텍스트 런 (굵게/기울임 플래그를 가진 텍스트 조각)"""
    text: str
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True)
class HeadingStyle:
    level: int


@dataclass(frozen=True)
class ListStyle:
    numbered: bool
    level: int = 0


@dataclass(frozen=True)
class BodyStyle:
    pass


ParagraphStyle = Union[HeadingStyle, ListStyle, BodyStyle]

# 읽기 시 인식하는 스타일 ID
HEADING_STYLE_IDS = {'Heading1': 1, 'Heading2': 2, 'Heading3': 3}
LIST_STYLE_ID = 'ListParagraph'


@dataclass
class WordParagraph:
    """Word 문단 (스타일 ID, 번호 매기기 정보, 런 목록)"""
    style_name: str = ''
    is_numbered: bool = False
    numbering_level: int = 0
    runs: List[StyledRun] = field(default_factory=list)

    @property
    def text(self) -> str:
        """모든 런의 텍스트를 합친 전체 텍스트"""
        return ''.join(r.text for r in self.runs)

    @property
    def style(self) -> ParagraphStyle:
        """스타일 문자열을 닫힌 유니온으로 변환 (미인식 스타일은 본문)"""
        if self.style_name in HEADING_STYLE_IDS:
            return HeadingStyle(HEADING_STYLE_IDS[self.style_name])
        if self.style_name == LIST_STYLE_ID:
            return ListStyle(self.is_numbered, self.numbering_level)
        return BodyStyle()


# --- 스프레드시트 ---

@dataclass
class Cell:
    """셀 (표시용 문자열)"""
    text: str = ''


@dataclass
class Row:
    """행"""
    cells: List[Cell] = field(default_factory=list)

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def is_empty(self) -> bool:
        """셀이 하나도 없는 행인지 확인"""
        return not self.cells


@dataclass
class Sheet:
    """시트"""
    name: str
    rows: List[Row] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)


@dataclass
class Workbook:
    """통합 문서"""
    sheets: List[Sheet] = field(default_factory=list)

    @property
    def sheet_count(self) -> int:
        return len(self.sheets)
