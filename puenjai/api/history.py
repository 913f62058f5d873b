# puenjai/api/history.py
"""
대화 기록 조회 API
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from typing import List

from puenjai.api.deps import get_database_service
from puenjai.schemas.console_schemas import ConversationRecordSchema
from puenjai.services.database_service import DatabaseService

router = APIRouter(tags=["history"])


@router.get("/history", response_model=List[ConversationRecordSchema])
async def get_history(database_service: DatabaseService = Depends(get_database_service)):
    """대화 기록 최신순 조회"""
    try:
        return await database_service.list_history()
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to fetch history")
