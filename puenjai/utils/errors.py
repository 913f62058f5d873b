"""
AI 제공자 오류 타입
"""

from typing import Optional

# 일시적 과부하 (Service Unavailable)
TRANSIENT_OVERLOAD_STATUS = 503


class AIProviderError(Exception):
    """AI 제공자 호출 실패 - status_code로 재시도 여부를 판단"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_transient(self) -> bool:
        return self.status_code == TRANSIENT_OVERLOAD_STATUS

    def __repr__(self) -> str:
        return f"AIProviderError(status_code={self.status_code!r}, message={str(self)!r})"
