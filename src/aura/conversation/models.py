"""Data models for the conversation.

Hides the internal representation of chat messages.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4

from ..checklist import CheckableChecklistState, StructuredChecklistResponse


class Sender(str, Enum):
    """Who produced a message."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """A chat message in the conversation.

    Messages never change once created. An assistant message that carries
    response data also owns the checkable state derived from it; that state
    is built exactly once, here, and is the only part that mutates (through
    its toggle operations).
    """

    text: str
    sender: Sender
    data: StructuredChecklistResponse | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)
    checklist: CheckableChecklistState | None = field(init=False, default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.data is not None:
            object.__setattr__(self, "checklist", CheckableChecklistState.from_response(self.data))

    @property
    def is_user(self) -> bool:
        return self.sender == Sender.USER
