# puenjai/services/retry_service.py
"""
AI 호출 Retry 서비스
서버 과부하(503)일 때만 지수 백오프 + 지터로 재시도
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Optional

from puenjai.utils.errors import TRANSIENT_OVERLOAD_STATUS
from puenjai.utils.logger import logger
from puenjai.utils.timing import delay


class RetryState(str, Enum):
    IDLE = "idle"
    ATTEMPTING = "attempting"
    WAITING = "waiting"
    SUCCEEDED = "succeeded"
    FAILED_PERMANENTLY = "failed_permanently"


@dataclass(frozen=True)
class RetryAttempt:
    """한 번의 재시도 정보 (저장하지 않음)"""
    attempt_index: int
    max_attempts: int
    wait_seconds: float


def status_of(error: BaseException) -> Optional[int]:
    status = getattr(error, "status_code", None)
    if status is None:
        status = getattr(error, "status", None)
    return status


class RetryOrchestrator:
    """과부하 오류만 재시도하는 오케스트레이터"""

    def __init__(
        self,
        max_retries: int = 5,
        base_delay: float = 1.0,
        max_jitter: float = 1.0,
        sleep: Callable[[float], Awaitable[None]] = delay,
        rand: Callable[[], float] = random.random,
    ):
        if max_retries < 1:
            raise ValueError(f"max_retries must be >= 1, got {max_retries}")
        self.max_retries = max_retries
        self.base_delay = base_delay
        self.max_jitter = max_jitter
        self.sleep = sleep
        self.rand = rand

    def compute_wait(self, attempt: int) -> float:
        """base_delay * 2^attempt + [0, max_jitter) 지터"""
        return self.base_delay * (2 ** attempt) + self.rand() * self.max_jitter

    def is_transient(self, error: BaseException) -> bool:
        return status_of(error) == TRANSIENT_OVERLOAD_STATUS

    async def execute(self, fn: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        """fn 호출, 503이면 예산 안에서 재시도하고 그 외에는 원래 예외를 그대로 전달"""
        state = RetryState.IDLE
        last_error: Optional[BaseException] = None
        attempt = 0

        while attempt < self.max_retries:
            state = RetryState.ATTEMPTING
            try:
                logger.info(f" [Attempt {attempt + 1}/{self.max_retries}] AI 호출 중...")
                result = await fn(*args, **kwargs)
                state = RetryState.SUCCEEDED
                logger.info(f" AI 호출 성공 (attempt {attempt + 1}, state={state.value})")
                return result

            except Exception as e:
                last_error = e
                if self.is_transient(e) and attempt < self.max_retries - 1:
                    retry = RetryAttempt(
                        attempt_index=attempt,
                        max_attempts=self.max_retries,
                        wait_seconds=self.compute_wait(attempt),
                    )
                    state = RetryState.WAITING
                    logger.warning(
                        f" [Attempt {retry.attempt_index + 1}] 503 과부하 - "
                        f"{retry.wait_seconds:.2f}s 후 재시도"
                    )
                    await self.sleep(retry.wait_seconds)
                    attempt += 1
                else:
                    state = RetryState.FAILED_PERMANENTLY
                    logger.error(
                        f" [Attempt {attempt + 1}] 실패, 더 이상 재시도 없음 "
                        f"(status={status_of(e)}, state={state.value})"
                    )
                    raise

        # 루프가 반환/예외 없이 끝나면 마지막 오류를 그대로 전달
        logger.error(f" 재시도 예산 소진 (state={RetryState.FAILED_PERMANENTLY.value})")
        raise last_error
