"""
대기(delay) 유틸리티
"""

import asyncio


async def delay(seconds: float) -> None:
    """이벤트 루프를 막지 않고 seconds 만큼 대기"""
    await asyncio.sleep(max(seconds, 0.0))
