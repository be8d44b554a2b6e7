"""
백그라운드 변환 작업

변환 한 건을 별도 스레드에서 실행하고 진행률/결과를 큐로 호출 스레드에 전달한다.
호출 측은 자기 스레드(예: UI 이벤트 루프)에서 큐를 비우며 화면을 갱신한다.
'Started'와 첫 'Progress' 사이의 순서에 의존하지 말 것.
"""

import logging
import queue
import threading
from pathlib import Path
from typing import Iterator, Optional, Union

from .errors import ConversionError
from .pipeline import convert
from .progress import Done, Event, Failed, Progress, Started

logger = logging.getLogger(__name__)


class ConversionJob:
    """변환 작업 한 건 (취소/타임아웃 없음)"""

    def __init__(self, input_path: Union[str, Path], output_dir: Union[str, Path]):
        self.input_path = Path(input_path)
        self.output_dir = Path(output_dir)
        self._events: "queue.Queue[Event]" = queue.Queue()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> 'ConversionJob':
        """작업 스레드 시작"""
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return self

    def _run(self):
        self._events.put(Started())
        try:
            output_path = convert(
                self.input_path, self.output_dir,
                on_progress=lambda p: self._events.put(Progress(p)),
            )
        except ConversionError as e:
            self._events.put(Failed(e))
        except Exception as e:
            # 예상하지 못한 오류도 호출 측에 전달 (대기 중인 소비자가 멈추지 않도록)
            logger.exception('변환 중 예외: %s', self.input_path.name)
            error = ConversionError(f'Unexpected error: {e}')
            error.__cause__ = e
            self._events.put(Failed(error))
        else:
            self._events.put(Done(output_path))

    def poll(self) -> Optional[Event]:
        """대기 없이 다음 이벤트 반환 (없으면 None)

        UI 타이머(after 등)에서 주기적으로 호출하는 용도
        """
        try:
            return self._events.get_nowait()
        except queue.Empty:
            return None

    def events(self, timeout: Optional[float] = None) -> Iterator[Event]:
        """Done 또는 Failed가 나올 때까지 이벤트를 차례로 반환

        Args:
            timeout: 이벤트 하나를 기다리는 최대 시간 (None = 무제한)

        Raises:
            queue.Empty: timeout 안에 이벤트가 오지 않은 경우
        """
        while True:
            event = self._events.get(timeout=timeout)
            yield event
            if isinstance(event, (Done, Failed)):
                return

    def wait(self, timeout: Optional[float] = None) -> Path:
        """작업 종료까지 대기 후 출력 경로 반환

        Raises:
            ConversionError: 변환이 실패한 경우
        """
        for event in self.events(timeout):
            if isinstance(event, Failed):
                raise event.error
            if isinstance(event, Done):
                return event.output_path
