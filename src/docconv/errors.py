"""
변환 오류 정의
"""


class ConversionError(Exception):
    """변환 실패 (모든 변환 오류의 베이스)"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnsupportedFormatError(ConversionError):
    """지원하지 않는 확장자"""


class ReadError(ConversionError):
    """원본 파일을 열거나 해석할 수 없음"""


class WriteError(ConversionError):
    """출력 파일을 만들거나 쓸 수 없음"""
