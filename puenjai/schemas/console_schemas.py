# puenjai/schemas/console_schemas.py
"""
상담(console) 대화 관련 스키마
"""

from pydantic import BaseModel

class ConsoleRequest(BaseModel):
    name: str
    message: str

class ConsoleResponse(BaseModel):
    reply: str

class ConversationRecordSchema(BaseModel):
    id: str
    name: str
    message: str
    aiReply: str
    timestamp: str
