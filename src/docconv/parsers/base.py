"""
파서 베이스 클래스
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Set


class BaseParser(ABC):
    """파서 베이스 클래스"""
    
    SUPPORTED_EXTENSIONS: Set[str] = set()
    
    @abstractmethod
    def parse_file(self, file_path: str) -> Any:
        """파일을 읽어 중간 모델로 변환
        
        Args:
            file_path: 파싱할 파일 경로
            
        Returns:
            중간 모델 (블록 목록, 문단 목록 또는 Workbook)
            
        Raises:
            ReadError: 파일을 열거나 해석할 수 없는 경우
        """
        pass
    
    @classmethod
    def can_parse(cls, file_path: str) -> bool:
        """파싱 가능 여부 확인
        
        Args:
            file_path: 파일 경로
            
        Returns:
            bool: 파싱 가능 여부
        """
        return Path(file_path).suffix.lower() in cls.SUPPORTED_EXTENSIONS
