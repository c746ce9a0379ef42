from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from app.domains.review_generator.client import CompletionResult, GenerationParams
from app.domains.review_generator.router import get_review_service
from app.domains.review_generator.service import ReviewGeneratorService
from app.main import app

API_KEY = "sk-test-secret-key-1234"


def valid_body(**form_overrides: Any) -> dict:
    form = {
        "serviceType": "Carpet Cleaning",
        "staffName": "Mike Smith",
        "specific": "They were very thorough",
        "improvement": "Arrived early",
    }
    form.update(form_overrides)
    return {"apiKey": API_KEY, "formData": form}


class StubCompletionClient:
    """provider 대신 고정 결과를 돌려주고 호출 기록을 남김. 예외를 넘기면 그대로 raise."""

    def __init__(self, result: CompletionResult | BaseException) -> None:
        self.result = result
        self.calls: list[tuple[str, str, GenerationParams]] = []

    async def complete(self, credential: str, prompt: str, params: GenerationParams) -> CompletionResult:
        self.calls.append((credential, prompt, params))
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


class FakeCompletions:
    def __init__(self, outcome: Any) -> None:
        self.outcome = outcome
        self.kwargs: dict | None = None

    async def create(self, **kwargs: Any) -> Any:
        self.kwargs = kwargs
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


class FakeProviderClient:
    """adapter가 쓰는 AsyncOpenAI 일부만 흉내냄."""

    def __init__(self, outcome: Any, **kwargs: Any) -> None:
        self.init_kwargs = kwargs
        self.completions = FakeCompletions(outcome)
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def completion_with(*contents: Any) -> SimpleNamespace:
    choices = [SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    return SimpleNamespace(choices=choices)


@pytest.fixture
def make_provider_factory() -> Callable[[Any], Callable[..., FakeProviderClient]]:
    def _make(outcome: Any):
        created: list[FakeProviderClient] = []

        def factory(**kwargs: Any) -> FakeProviderClient:
            client = FakeProviderClient(outcome, **kwargs)
            created.append(client)
            return client

        factory.created = created  # type: ignore[attr-defined]
        return factory

    return _make


@pytest.fixture
def make_client():
    """stub adapter를 쓰는 review service로 TestClient 생성."""

    def _make(result: CompletionResult | BaseException) -> tuple[TestClient, StubCompletionClient]:
        stub = StubCompletionClient(result)
        service = ReviewGeneratorService(client=stub)  # type: ignore[arg-type]
        app.dependency_overrides[get_review_service] = lambda: service
        return TestClient(app, raise_server_exceptions=False), stub

    yield _make
    app.dependency_overrides.clear()
