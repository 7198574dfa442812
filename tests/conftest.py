"""Pytest configuration and shared fixtures."""
import asyncio
import json
import os
from typing import Any

import pytest

from aura.checklist import ChecklistGenerator, StructuredChecklistResponse
from aura.llm import ChatMessage, LLMProvider, LLMResponse


class FakeLLMProvider(LLMProvider):
    """LLM provider that returns canned content instead of calling a service.

    Each entry in `replies` is a string (returned as content), a ready
    LLMResponse (returned as-is) or an exception (raised). When `gate` is
    set, calls wait on it before replying.
    """

    def __init__(self, *replies: str | LLMResponse | Exception, gate: asyncio.Event | None = None):
        self._replies = list(replies)
        self.gate = gate
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            **kwargs,
        })
        if self.gate is not None:
            await self.gate.wait()
        reply = self._replies.pop(0) if len(self._replies) > 1 else self._replies[0]
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, LLMResponse):
            return reply
        return LLMResponse(content=reply, model=model or self.model)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {"gemini": os.getenv("GEMINI_API_KEY")}


@pytest.fixture
def beach_trip_payload() -> dict[str, Any]:
    """A complete structured reply for a beach trip."""
    return {
        "greeting": "A beach weekend in Miami sounds wonderful!",
        "weather": {
            "summary": "Sunny with a light sea breeze",
            "temperature": "29°C",
            "items": ["sunscreen", "sunglasses"],
        },
        "checklist": [
            {"category": "Clothing", "items": ["swimsuit", "flip-flops", "hat"]},
            {"category": "Electronics", "items": ["phone charger"]},
        ],
        "suggestions": ["reusable water bottle", "beach towel"],
        "closing": "Anything else you'd like to add?",
    }


@pytest.fixture
def grocery_payload() -> dict[str, Any]:
    """Reply with no inferable location: weather fields are empty."""
    return {
        "greeting": "Sure thing!",
        "weather": {"summary": "", "temperature": "", "items": []},
        "checklist": [{"category": "Groceries", "items": ["reusable bags"]}],
        "suggestions": ["wallet"],
        "closing": "Anything else?",
    }


@pytest.fixture
def beach_trip_response(beach_trip_payload) -> StructuredChecklistResponse:
    return StructuredChecklistResponse.model_validate(beach_trip_payload)


@pytest.fixture
def grocery_json(grocery_payload) -> str:
    return json.dumps(grocery_payload)


@pytest.fixture
def make_generator():
    """Build a ChecklistGenerator around a FakeLLMProvider."""
    def _make(*replies: str | Exception, gate: asyncio.Event | None = None):
        llm = FakeLLMProvider(*replies, gate=gate)
        return ChecklistGenerator(llm, system_prompt="You are Aura."), llm
    return _make
