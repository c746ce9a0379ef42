from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from openai import APIStatusError, AsyncOpenAI

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationParams:
    model: str
    temperature: float
    max_tokens: int


# ============================================
# 호출 결과 (tagged result)
# ============================================
@dataclass(frozen=True)
class CompletionOk:
    text: str


@dataclass(frozen=True)
class ProviderError:
    http_status: int
    provider_message: str


@dataclass(frozen=True)
class EmptyCompletion:
    pass


@dataclass(frozen=True)
class UnknownError:
    message: str


CompletionResult = Union[CompletionOk, ProviderError, EmptyCompletion, UnknownError]


def _provider_message(exc: APIStatusError) -> str:
    # SDK는 응답의 "error" 객체를 body로 넘겨줌
    body = exc.body
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return exc.message


def _first_choice_text(completion: Any) -> Optional[str]:
    choices = completion.choices or []
    if not choices:
        return None
    message = choices[0].message
    content = message.content if message is not None else None
    # 공백만 온 응답도 빈 결과로 취급
    if not content or not content.strip():
        return None
    return content


class CompletionClient:
    """provider에 chat completion 1회 호출.

    호출마다 caller의 키로 provider client를 새로 만들고 끝나면 닫는다.
    키를 가진 객체는 complete() 밖으로 남지 않는다.

    SDK/transport 기본값 외에 timeout은 두지 않음. 응답 시간 상한이 필요하면
    호출하는 쪽에서 감싸야 한다.
    """

    def __init__(
        self,
        client_factory: Callable[..., Any] = AsyncOpenAI,
        base_url: Optional[str] = None,
    ) -> None:
        self._client_factory = client_factory
        self._base_url = base_url

    def _new_client(self, credential: str) -> Any:
        kwargs: dict[str, Any] = {"api_key": credential}
        if self._base_url:
            kwargs["base_url"] = self._base_url
        return self._client_factory(**kwargs)

    async def complete(
        self, credential: str, prompt: str, params: GenerationParams
    ) -> CompletionResult:
        try:
            client = self._new_client(credential)
            try:
                completion = await client.chat.completions.create(
                    model=params.model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=params.temperature,
                    max_tokens=params.max_tokens,
                )
            finally:
                await client.close()
        except APIStatusError as exc:
            return ProviderError(
                http_status=exc.status_code or 500,
                provider_message=_provider_message(exc),
            )
        except Exception as exc:
            logger.exception("completion call failed: %s", type(exc).__name__)
            return UnknownError(message=str(exc) or type(exc).__name__)

        try:
            text = _first_choice_text(completion)
        except (AttributeError, TypeError) as exc:
            logger.exception("unexpected completion shape")
            return UnknownError(message=str(exc))

        if text is None:
            return EmptyCompletion()
        return CompletionOk(text=text)
