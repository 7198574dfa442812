from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """A hosted model that answers checklist requests.

    The checklist generator only needs one thing from a provider: send a
    system instruction and a user turn, get text back. Structured output is
    requested through provider-specific keyword options such as
    response_mime_type and response_schema.

    Providers are async context managers:
        async with create_llm_provider("gemini", api_key=key) as llm:
            reply = await llm.chat_completion(messages)
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Model used when a request does not name one."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Run one completion.

        Implementations make exactly one service call and let its errors
        propagate; callers decide how failures are reported.
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the SDK client."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        try:
            await self.close()
        except RuntimeError as e:
            # httpx transports can outlive the loop at interpreter shutdown
            if "Event loop is closed" not in str(e):
                raise
