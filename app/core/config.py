from __future__ import annotations

import os

from dotenv import load_dotenv

# 로컬 개발에서 .env 사용
load_dotenv()


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def _list(name: str, default: str) -> list[str]:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]


class Settings:
    # 생성 파라미터 (요청마다 고정)
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
    OPENAI_TEMPERATURE: float = _float("OPENAI_TEMPERATURE", 0.7)
    OPENAI_MAX_TOKENS: int = _int("OPENAI_MAX_TOKENS", 250)

    # 호환 게이트웨이 사용 시에만 지정 (없으면 SDK 기본값)
    OPENAI_BASE_URL: str | None = os.getenv("OPENAI_BASE_URL") or None

    # 에러 메시지 앞에 붙는 provider 이름
    PROVIDER_LABEL: str = os.getenv("PROVIDER_LABEL", "OpenAI API")

    # 입력 상한 (MVP 안전장치)
    MAX_FIELD_LEN: int = _int("MAX_FIELD_LEN", 1000)

    # 폼 UI가 다른 origin에서 호출하는 경우
    CORS_ORIGINS: list[str] = _list("CORS_ORIGINS", "http://localhost:3000")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
