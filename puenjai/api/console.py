# puenjai/api/console.py
"""
상담 대화 API
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError

from puenjai.api.deps import get_database_service, get_reply_service, read_json_model
from puenjai.config import settings
from puenjai.schemas.console_schemas import ConsoleRequest, ConsoleResponse
from puenjai.services.database_service import DatabaseService
from puenjai.services.reply_service import ReplyService
from puenjai.utils.logger import logger

router = APIRouter(tags=["console"])

AI_FAILURE_MESSAGE = "Sorry, there was an error with the AI server after multiple attempts."


@router.post("/console", response_model=ConsoleResponse)
async def create_console_reply(
    request: Request,
    database_service: DatabaseService = Depends(get_database_service),
    reply_service: ReplyService = Depends(get_reply_service),
):
    """메시지 저장 → AI 답장 생성(재시도) → 답장 갱신"""
    payload = await read_json_model(request, ConsoleRequest, settings.max_body_bytes)

    try:
        record_id = await database_service.insert_pending(payload.name, payload.message)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to save message")

    try:
        ai_reply = await reply_service.get_reply_with_retry(payload.name, payload.message)
    except Exception as e:
        # 답장은 자리표시자로 남음
        logger.error(f" 여러 번 재시도 후 AI 호출 실패: {e!r} (id={record_id})")
        raise HTTPException(status_code=500, detail=AI_FAILURE_MESSAGE)

    try:
        await database_service.update_reply(record_id, ai_reply)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to save AI reply")

    return ConsoleResponse(reply=ai_reply)
