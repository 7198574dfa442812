from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """One turn of a provider request."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class LLMResponse(BaseModel):
    """Text returned by a provider plus what it reported about the call."""

    model_config = ConfigDict(frozen=True)

    content: str
    model: str
    usage: dict[str, int] | None = None
    finish_reason: str | None = Field(
        default=None,
        description="Why generation stopped, e.g. STOP, MAX_TOKENS or SAFETY"
    )

    @property
    def total_tokens(self) -> int | None:
        if self.usage is None:
            return None
        return self.usage.get("total_tokens")
