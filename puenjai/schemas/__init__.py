# puenjai/schemas/__init__.py
"""
스키마 패키지
"""

from .commons_schemas import ErrorResponse
from .console_schemas import ConsoleRequest, ConsoleResponse, ConversationRecordSchema
