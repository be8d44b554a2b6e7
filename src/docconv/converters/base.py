"""
변환기 베이스 클래스
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from ..errors import WriteError
from ..progress import ProgressCallback


class BaseConverter(ABC):
    """텍스트(Markdown) 출력 변환기 베이스 클래스"""
    
    @abstractmethod
    def convert(self, source: Any, on_progress: Optional[ProgressCallback] = None) -> str:
        """중간 모델을 문자열로 변환
        
        Args:
            source: 변환할 중간 모델
            on_progress: 진행률 콜백
            
        Returns:
            str: 변환된 문자열
        """
        pass
    
    def save(self, source: Any, output_path: str,
             on_progress: Optional[ProgressCallback] = None) -> None:
        """중간 모델을 파일로 저장
        
        전체 문자열을 만든 뒤 한 번에 기록하므로 변환 도중 실패하면 파일이 생기지 않는다.
        
        Args:
            source: 변환할 중간 모델
            output_path: 출력 파일 경로
            on_progress: 진행률 콜백
            
        Raises:
            WriteError: 출력 파일을 쓸 수 없는 경우
        """
        content = self.convert(source, on_progress)
        try:
            Path(output_path).write_text(content, encoding='utf-8')
        except OSError as e:
            raise WriteError(f'Cannot write {output_path}: {e}') from e
