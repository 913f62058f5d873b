"""
답장 서비스 - PersonaChain 호출을 RetryOrchestrator로 감쌈
"""

from puenjai.chains.persona_chain import PersonaChain
from puenjai.config import Settings
from puenjai.services.retry_service import RetryOrchestrator


class ReplyService:
    def __init__(self, chain: PersonaChain, orchestrator: RetryOrchestrator):
        self.chain = chain
        self.orchestrator = orchestrator

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReplyService":
        orchestrator = RetryOrchestrator(
            max_retries=settings.max_retries,
            base_delay=settings.retry_base_delay,
            max_jitter=settings.retry_max_jitter,
        )
        return cls(PersonaChain(settings), orchestrator)

    async def get_reply_with_retry(self, name: str, message: str) -> str:
        return await self.orchestrator.execute(self.chain.generate_reply, name, message)
