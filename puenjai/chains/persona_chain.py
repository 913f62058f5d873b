"""
Puen-Jai 답장 생성 체인
한 번 호출에 정확히 한 번의 AI 요청 (재시도는 RetryOrchestrator 담당)
"""

import os
from typing import Optional

import openai
from langchain_openai import ChatOpenAI
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable
from langsmith import traceable

from puenjai.config import Settings
from puenjai.prompts.persona_prompt import PersonaPrompts
from puenjai.utils.errors import AIProviderError
from puenjai.utils.logger import logger


def configure_tracing(settings: Settings) -> None:
    """LangSmith 트래킹 환경변수 설정"""
    if not settings.langsmith_tracing:
        return
    os.environ["LANGCHAIN_TRACING_V2"] = "true"
    os.environ["LANGCHAIN_API_KEY"] = settings.langsmith_api_key or ""
    os.environ["LANGCHAIN_ENDPOINT"] = settings.langsmith_endpoint
    os.environ["LANGCHAIN_PROJECT"] = settings.langsmith_project
    logger.info(f" LangSmith 트래킹 활성화: project={settings.langsmith_project}")


def to_provider_error(error: Exception) -> AIProviderError:
    """openai 예외를 status_code가 있는 AIProviderError로 변환"""
    if isinstance(error, openai.APIStatusError):
        return AIProviderError(str(error), status_code=error.status_code)
    # 연결 실패 / 타임아웃은 상태 코드 없음
    return AIProviderError(str(error), status_code=None)


class PersonaChain:
    """Puen-Jai 위로 답장 체인"""

    def __init__(self, settings: Settings, llm: Optional[Runnable] = None):
        # SDK 내부 재시도는 끄고 한 번만 호출
        self.llm = llm or ChatOpenAI(
            model=settings.llm_model,
            temperature=settings.llm_temperature,
            api_key=settings.api_key,
            base_url=settings.llm_base_url,
            max_retries=0,
        )
        self.prompt_template = ChatPromptTemplate.from_messages([
            ("human", PersonaPrompts.COMFORT_REPLY)
        ])
        self.chain = self._build_chain()
        logger.info(f" PersonaChain 초기화 완료: model={settings.llm_model}")

    def _build_chain(self) -> Runnable:
        return self.prompt_template | self.llm | StrOutputParser()

    def build_prompt(self, name: str, message: str) -> str:
        """입력값 검증 없이 템플릿에 그대로 삽입"""
        return PersonaPrompts.COMFORT_REPLY.format(name=name, message=message)

    @traceable(name="generate_reply")
    async def generate_reply(self, name: str, message: str) -> str:
        """AI 답장 한 번 생성"""
        try:
            return await self.chain.ainvoke({"name": name, "message": message})
        except openai.APIError as e:
            raise to_provider_error(e) from e
