"""Checklist generation client.

Turns a free-text request into a StructuredChecklistResponse with a single
schema-constrained call to the LLM provider. Every failure is raised as a
GenerationError carrying a message that can be shown to the user.
"""

from typing import Any

from pydantic import ValidationError

from ..errors import GenerationError
from ..llm import ChatMessage, LLMProvider
from ..prompts import get_system_prompt
from .models import RESPONSE_SCHEMA, StructuredChecklistResponse

DEFAULT_TEMPERATURE = 0.7
ERROR_PREFIX = "Failed to get a response from Aura. Details:"


def _truncate(text: str, max_len: int = 100) -> str:
    return text[:max_len] + "..." if len(text) > max_len else text


def describe_validation_error(error: ValidationError) -> str:
    """Summarize a pydantic validation error in one readable sentence."""
    problems = []
    for err in error.errors():
        if err["type"] == "json_invalid":
            return "the response was not valid JSON"
        location = ".".join(str(part) for part in err["loc"])
        if not location:
            problems.append(err["msg"])
        elif err["type"] == "missing":
            problems.append(f"missing required field '{location}'")
        else:
            problems.append(f"invalid field '{location}' ({err['msg']})")
    return "the response was malformed: " + "; ".join(problems)


class ChecklistGenerator:
    """Generates structured checklists from user requests.

    Hidden design decisions:
    - The persona instruction and response schema sent with each request
    - Strict JSON parsing and schema validation of the reply
    - Uniform wrapping of every failure into GenerationError

    No retry and no caching: one call per invocation.
    """

    def __init__(
        self,
        llm: LLMProvider,
        model: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        system_prompt: str | None = None,
    ) -> None:
        self._llm = llm
        self._model = model
        self._temperature = temperature
        self._system_prompt = system_prompt
        self._debug_callback: Any | None = None

    @property
    def model_name(self) -> str:
        return self._model or self._llm.model

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for request tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def build_messages(self, user_prompt: str) -> list[ChatMessage]:
        """Build the conversation sent to the provider.

        Only the latest prompt is sent; earlier turns are not included.
        Without an explicit system prompt the persona is reloaded per call
        so the date it carries stays current.
        """
        return [
            ChatMessage(role="system", content=self._system_prompt or get_system_prompt()),
            ChatMessage(role="user", content=user_prompt),
        ]

    async def generate_checklist(self, user_prompt: str) -> StructuredChecklistResponse:
        """Generate a checklist for a free-text request.

        Args:
            user_prompt: The user's raw text

        Returns:
            Validated structured response

        Raises:
            GenerationError: If the call fails, the reply is not JSON, or
                required fields are missing
        """
        self._debug("info", "LLM", f"Requesting checklist from {self.model_name}: '{_truncate(user_prompt, 50)}'")

        try:
            response = await self._llm.chat_completion(
                self.build_messages(user_prompt),
                model=self._model,
                temperature=self._temperature,
                response_mime_type="application/json",
                response_schema=RESPONSE_SCHEMA,
            )
        except Exception as e:
            self._debug("error", "LLM", f"Request failed: {type(e).__name__}: {e}")
            raise GenerationError(f"{ERROR_PREFIX} {e}") from e

        text = response.content.strip()
        self._debug("info", "LLM", f"Response received ({len(text)} chars)")
        self._debug("debug", "LLM", f"Response preview: {_truncate(text, 200)}")
        if response.total_tokens is not None:
            self._debug("debug", "LLM", f"Tokens used: {response.total_tokens}")

        if not text:
            detail = "the service returned an empty response"
            if response.finish_reason and response.finish_reason != "STOP":
                detail += f" (finish reason: {response.finish_reason})"
            self._debug("error", "Parser", detail)
            raise GenerationError(f"{ERROR_PREFIX} {detail}")

        try:
            result = StructuredChecklistResponse.model_validate_json(text)
        except ValidationError as e:
            detail = describe_validation_error(e)
            self._debug("error", "Parser", detail)
            raise GenerationError(f"{ERROR_PREFIX} {detail}") from e

        item_count = sum(len(category.items) for category in result.checklist)
        self._debug("info", "Parser", f"Parsed {len(result.checklist)} categories, {item_count} items")
        return result

    async def close(self) -> None:
        """Close the underlying provider."""
        await self._llm.close()
