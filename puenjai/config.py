# puenjai/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="allow")

    # AI 제공자 (OpenAI 호환 엔드포인트)
    api_key: str
    llm_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    llm_model: str = "gemini-1.5-flash"
    llm_temperature: float = 0.7

    # 데이터베이스 (예: mysql+aiomysql://..., sqlite+aiosqlite:///./heartbreak.db)
    database_url: str

    # Retry 설정 (초 단위)
    max_retries: int = 5
    retry_base_delay: float = 1.0
    retry_max_jitter: float = 1.0

    # 요청 본문 최대 크기
    max_body_bytes: int = 64 * 1024

    # LangChain LangSmith 트래킹 관련
    langsmith_tracing: Optional[bool] = False
    langsmith_endpoint: Optional[str] = "https://api.smith.langchain.com"
    langsmith_api_key: Optional[str] = None
    langsmith_project: Optional[str] = "default"

    # App Settings
    host: str = "0.0.0.0"
    port: int = 3001
    debug: bool = False
    log_level: str = "INFO"

settings = Settings()
