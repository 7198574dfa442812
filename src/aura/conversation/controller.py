"""Conversation state and submission flow.

Owns the append-only message list, the awaiting-response flag and the last
error. The rendering layer observes changes through callbacks and never
mutates this state directly.
"""

from typing import Any, Protocol

from ..checklist import StructuredChecklistResponse
from .models import Message, Sender

WELCOME_MESSAGE = (
    "Hello! I'm Aura, your personal reminder assistant. Tell me about your plans, "
    "and I'll help you create a checklist of things to bring. For example, "
    "'I'm going on a weekend beach trip to Miami.'"
)
APOLOGY_PREFIX = "I'm sorry, I seem to have encountered a problem."
UNKNOWN_ERROR = "An unknown error occurred."


class ChecklistSource(Protocol):
    """Anything that can turn a prompt into a structured checklist."""

    async def generate_checklist(self, user_prompt: str) -> StructuredChecklistResponse: ...


class ConversationController:
    """Single-session conversation controller.

    At most one generation is in flight at a time. Submissions made while
    one is pending are dropped, not queued.

    Example:
        controller = ConversationController(generator)
        controller.set_message_callback(render_message)
        reply = await controller.submit("I'm going on a beach trip")
    """

    def __init__(self, generator: ChecklistSource, intro_text: str | None = WELCOME_MESSAGE) -> None:
        self._generator = generator
        self._messages: list[Message] = []
        self._awaiting_response = False
        self._error: str | None = None
        self._closed = False
        self._message_callback: Any | None = None
        self._status_callback: Any | None = None
        self._debug_callback: Any | None = None
        self.draft = ""

        if intro_text:
            self._messages.append(Message(text=intro_text, sender=Sender.ASSISTANT, id="aura-intro"))

    @property
    def messages(self) -> tuple[Message, ...]:
        """Messages in the order they were added."""
        return tuple(self._messages)

    @property
    def awaiting_response(self) -> bool:
        return self._awaiting_response

    @property
    def error(self) -> str | None:
        """Detail of the last failed generation, cleared on the next submission."""
        return self._error

    @property
    def closed(self) -> bool:
        return self._closed

    def set_message_callback(self, callback: Any) -> None:
        """Set the callback fired after each message is appended.

        Args:
            callback: Callable(message: Message)
        """
        self._message_callback = callback

    def set_status_callback(self, callback: Any) -> None:
        """Set the callback fired when the awaiting flag or error changes.

        Args:
            callback: Callable(awaiting_response: bool, error: str | None)
        """
        self._status_callback = callback

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        if self._message_callback:
            self._message_callback(message)

    def _notify_status(self) -> None:
        if self._status_callback:
            self._status_callback(self._awaiting_response, self._error)

    def can_submit(self, text: str | None = None) -> bool:
        """Whether submit() would start a generation for this text."""
        value = self.draft if text is None else text
        return bool(value.strip()) and not self._awaiting_response and not self._closed

    async def submit(self, text: str | None = None) -> Message | None:
        """Submit user text and wait for the assistant reply.

        Args:
            text: Text to send; defaults to the current draft

        Returns:
            The assistant message that was appended, or None if the
            submission was ignored (blank text, request pending, or
            controller closed) or its result was discarded after close().
        """
        value = self.draft if text is None else text
        if not self.can_submit(value):
            if self._awaiting_response:
                self._debug("debug", "Conversation", "Submission ignored: awaiting response")
            return None

        self._append(Message(text=value, sender=Sender.USER))
        self.draft = ""
        self._awaiting_response = True
        self._error = None
        self._notify_status()

        try:
            reply = await self._generate_reply(value)
            if self._closed:
                self._debug("debug", "Conversation", "Discarding reply that arrived after close")
                return None
            self._append(reply)
            return reply
        finally:
            self._awaiting_response = False
            if not self._closed:
                self._notify_status()

    async def _generate_reply(self, text: str) -> Message:
        try:
            data = await self._generator.generate_checklist(text)
        except Exception as e:
            detail = str(e) or UNKNOWN_ERROR
            self._error = detail
            self._debug("error", "Conversation", detail)
            return Message(text=f"{APOLOGY_PREFIX} {detail}", sender=Sender.ASSISTANT)

        self._debug("info", "Conversation", "Checklist reply added")
        return Message(text="", sender=Sender.ASSISTANT, data=data)

    def close(self) -> None:
        """Detach from the rendering layer.

        Results of a generation still in flight are dropped when they arrive.
        """
        self._closed = True
        self._message_callback = None
        self._status_callback = None
