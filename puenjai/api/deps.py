# puenjai/api/deps.py
"""
라우터 공용 의존성 - 서비스 주입 및 요청 본문 읽기
"""

from fastapi import HTTPException, Request
from pydantic import BaseModel, ValidationError
from typing import Type, TypeVar

from puenjai.services.database_service import DatabaseService
from puenjai.services.reply_service import ReplyService
from puenjai.utils.logger import logger

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_database_service(request: Request) -> DatabaseService:
    return request.app.state.database_service


def get_reply_service(request: Request) -> ReplyService:
    return request.app.state.reply_service


async def read_body(request: Request, limit: int) -> bytes:
    """limit 바이트까지만 본문을 읽음"""
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            logger.warning(f" 요청 본문 크기 초과: limit={limit}")
            raise HTTPException(status_code=413, detail="Request body too large")
    return bytes(body)


async def read_json_model(request: Request, model: Type[ModelT], limit: int) -> ModelT:
    body = await read_body(request, limit)
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f" 잘못된 요청 본문: {e.errors()[:1]}")
        raise HTTPException(status_code=400, detail="Invalid JSON body")
