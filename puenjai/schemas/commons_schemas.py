"""
공통 스키마 - 여러 API에서 공유하는 스키마들
"""

from pydantic import BaseModel

# 오류 응답 스키마
class ErrorResponse(BaseModel):
    error: str
