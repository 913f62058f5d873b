# puenjai/services/database_service.py
"""
대화 기록 데이터베이스 서비스
SQLAlchemy 기반 비동기 DB 연결
"""

from typing import Dict, List, Optional
import uuid

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy import update
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from puenjai.models import Base, ConversationRecord, PLACEHOLDER_REPLY
from puenjai.utils.logger import logger


class DatabaseService:
    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = create_async_engine(self.database_url, echo=echo, pool_pre_ping=True, pool_recycle=3600)
        self.async_session = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)
        logger.info(" DatabaseService 초기화 완료")

    async def create_tables(self):
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info(" 데이터베이스 테이블 생성 완료")
        except SQLAlchemyError as e:
            logger.error(f" 테이블 생성 실패: {e}")
            raise

    async def insert_pending(self, name: str, message: str) -> str:
        """답장 자리표시자와 함께 사용자 메시지 저장"""
        try:
            async with self.async_session() as session:
                record = ConversationRecord(
                    ID=str(uuid.uuid4()),
                    NAME=name,
                    MESSAGE=message,
                    AI_REPLY=PLACEHOLDER_REPLY,
                )
                session.add(record)
                await session.commit()
                logger.info(f" 사용자 메시지 저장 완료: id={record.ID}")
                return record.ID
        except SQLAlchemyError as e:
            logger.error(f" 사용자 메시지 저장 실패: {e}")
            raise

    async def update_reply(self, record_id: str, reply_text: str) -> bool:
        """자리표시자인 경우에만 AI 답장으로 한 번 갱신"""
        try:
            async with self.async_session() as session:
                result = await session.execute(
                    update(ConversationRecord)
                    .where(
                        ConversationRecord.ID == record_id,
                        ConversationRecord.AI_REPLY == PLACEHOLDER_REPLY,
                    )
                    .values(AI_REPLY=reply_text)
                )
                await session.commit()

                if result.rowcount == 0:
                    logger.warning(f" 갱신할 대화를 찾을 수 없음 (이미 답장됨?): id={record_id}")
                    return False

                logger.info(f" AI 답장 갱신 완료: id={record_id}")
                return True
        except SQLAlchemyError as e:
            logger.error(f" AI 답장 갱신 실패: {e}")
            raise

    async def get_record(self, record_id: str) -> Optional[Dict]:
        try:
            async with self.async_session() as session:
                query = select(ConversationRecord).where(ConversationRecord.ID == record_id)
                result = await session.execute(query)
                record = result.scalar_one_or_none()
                return record.to_dict() if record else None
        except SQLAlchemyError as e:
            logger.error(f" 대화 조회 실패: {e}")
            raise

    async def list_history(self) -> List[Dict]:
        """전체 대화 기록 (최신순)"""
        try:
            async with self.async_session() as session:
                query = select(ConversationRecord).order_by(ConversationRecord.TIMESTAMP.desc())
                result = await session.execute(query)
                return [record.to_dict() for record in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f" 대화 기록 조회 실패: {e}")
            raise

    async def close(self):
        await self.engine.dispose()
        logger.info("🔌 데이터베이스 연결 종료")
