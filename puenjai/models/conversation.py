"""
대화 기록 모델
"""

import uuid
from datetime import datetime, timezone
from typing import Dict

from sqlalchemy import Column, String, Text, DateTime

from .base import Base

# 답장이 채워지기 전 기본값
PLACEHOLDER_REPLY = "..."


def now_utc():
    return datetime.now(timezone.utc)


class ConversationRecord(Base):
    __tablename__ = "messages"

    ID = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    NAME = Column(Text, nullable=False)
    MESSAGE = Column(Text, nullable=False)
    AI_REPLY = Column(Text, nullable=False, default=PLACEHOLDER_REPLY)
    TIMESTAMP = Column(DateTime(timezone=True), default=now_utc, nullable=False, index=True)

    def to_dict(self) -> Dict:
        return {
            "id": self.ID,
            "name": self.NAME,
            "message": self.MESSAGE,
            "aiReply": self.AI_REPLY,
            "timestamp": self.TIMESTAMP.isoformat(),
        }
