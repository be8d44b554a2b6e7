"""
진행률 보고

모든 변환기가 공유하는 0~100 진행률 콜백 규약과 이벤트 정의
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .errors import ConversionError


ProgressCallback = Callable[[int], None]


def percent(done: int, total: int) -> int:
    """완료 비율을 0~100 정수로 변환

    Args:
        done: 처리한 항목 수 (0부터 시작하는 인덱스)
        total: 전체 항목 수

    Returns:
        int: 반올림한 백분율 (total이 0이면 100)
    """
    if total <= 0:
        return 100
    return round(done / total * 100)


def report(on_progress: Optional[ProgressCallback], value: int) -> None:
    """콜백이 있으면 진행률 전달"""
    if on_progress is not None:
        on_progress(value)


# --- 작업 이벤트 (백그라운드 변환 → 호출 스레드) ---

@dataclass(frozen=True)
class Started:
    """변환 시작"""


@dataclass(frozen=True)
class Progress:
    percent: int


@dataclass(frozen=True)
class Done:
    output_path: Path


@dataclass(frozen=True)
class Failed:
    error: ConversionError


Event = Union[Started, Progress, Done, Failed]
