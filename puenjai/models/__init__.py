from .base import Base
from .conversation import ConversationRecord, PLACEHOLDER_REPLY

__all__ = ["Base", "ConversationRecord", "PLACEHOLDER_REPLY"]
