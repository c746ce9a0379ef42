from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import HTTPException
from pydantic import ValidationError

from app.core.config import settings
from app.domains.review_generator.client import (
    CompletionClient,
    CompletionOk,
    EmptyCompletion,
    GenerationParams,
    ProviderError,
    UnknownError,
)
from app.domains.review_generator.prompt import build_review_prompt
from app.domains.review_generator.schema import (
    GenerateReviewRequest,
    GenerateReviewResponse,
    ReviewFormData,
)

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("serviceType", "staffName", "specific", "improvement")
_REDACTED = "***"

_RETRY_MESSAGE = "Failed to generate review. Please try again."
_EMPTY_MESSAGE = "No review was generated. Please try again."


def redact_payload(body: Any) -> Any:
    """로그용 사본. apiKey 값은 절대 남기지 않는다."""
    if not isinstance(body, dict):
        return body
    out = dict(body)
    if "apiKey" in out:
        out["apiKey"] = _REDACTED
    return out


def _blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


class ReviewGeneratorService:
    def __init__(
        self,
        client: Optional[CompletionClient] = None,
        params: Optional[GenerationParams] = None,
        provider_label: str = settings.PROVIDER_LABEL,
    ) -> None:
        self._client = client or CompletionClient(base_url=settings.OPENAI_BASE_URL)
        self._params = params or GenerationParams(
            model=settings.OPENAI_MODEL,
            temperature=settings.OPENAI_TEMPERATURE,
            max_tokens=settings.OPENAI_MAX_TOKENS,
        )
        self._provider_label = provider_label

    # ---------- Parse ----------
    def _parse(self, body: Any) -> GenerateReviewRequest:
        try:
            return GenerateReviewRequest.model_validate(body)
        except ValidationError:
            raise HTTPException(status_code=400, detail="invalid body")

    # ---------- Validation ----------
    def _validate(self, req: GenerateReviewRequest) -> tuple[str, ReviewFormData]:
        if _blank(req.apiKey):
            raise HTTPException(status_code=400, detail="API key is required")

        form = req.formData
        if form is None or any(_blank(getattr(form, f)) for f in _REQUIRED_FIELDS):
            raise HTTPException(status_code=400, detail="Missing required form fields")

        for f in _REQUIRED_FIELDS:
            if len(getattr(form, f).strip()) > settings.MAX_FIELD_LEN:
                raise HTTPException(
                    status_code=400,
                    detail=f"{f} too long (max {settings.MAX_FIELD_LEN})",
                )

        return req.apiKey.strip(), form

    # ---------- Core ----------
    async def generate(self, body: Any) -> GenerateReviewResponse:
        logger.info("generate-review payload: %s", redact_payload(body))

        # 1) parse + validate (외부 호출 전에 모두 거름)
        req = self._parse(body)
        credential, form = self._validate(req)

        # 2) prompt
        prompt = build_review_prompt(form)

        # 3) provider 호출 (요청당 유일한 await 지점)
        result = await self._client.complete(credential, prompt, self._params)

        # 4) 결과 매핑
        match result:
            case CompletionOk(text=text):
                return GenerateReviewResponse(review=text)
            case ProviderError(http_status=status, provider_message=message):
                logger.warning("provider error status=%s message=%s", status, message)
                raise HTTPException(
                    status_code=status,
                    detail=f"{self._provider_label} error: {message}",
                )
            case EmptyCompletion():
                logger.error("provider returned no review content")
                raise HTTPException(status_code=500, detail=_EMPTY_MESSAGE)
            case UnknownError(message=message):
                logger.error("review generation failed: %s", message)
                raise HTTPException(status_code=500, detail=_RETRY_MESSAGE)
            case _:
                raise TypeError(f"unexpected completion result: {result!r}")
