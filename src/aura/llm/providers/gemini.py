"""Gemini provider built on the Google GenAI SDK.

Checklist requests are a system instruction plus one user turn, answered
with JSON constrained by a response schema. Reference:
https://github.com/googleapis/python-genai
"""

from typing import Any

from google import genai
from google.genai import types

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

DEFAULT_MODEL = "gemini-2.5-flash"

# Everyday packing items (knives, lighters, medication) trip the default thresholds
DEFAULT_SAFETY_SETTINGS = [
    types.SafetySetting(category=category, threshold="BLOCK_ONLY_HIGH")
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]

# Function calling off: the reply must be the JSON document itself
_NO_TOOLS = types.ToolConfig(
    function_calling_config=types.FunctionCallingConfig(mode="NONE")
)

_ROLES = {"user": "user", "assistant": "model"}


class GeminiProvider(LLMProvider):
    """Gemini through the async GenAI client.

    Hidden design decisions:
    - The system turn travels as system_instruction, not as content
    - Relaxed safety thresholds and disabled function calling
    - Empty or blocked candidates come back as empty text with the
      finish reason attached, never as an exception
    """

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, **client_kwargs: Any):
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        return self._model

    def _convert_messages(self, messages: list[ChatMessage]) -> tuple[str | None, list[types.Content]]:
        """Split messages into (system_instruction, contents)."""
        system_parts = [msg.content for msg in messages if msg.role == "system"]
        contents = [
            types.Content(role=_ROLES[msg.role], parts=[types.Part(text=msg.content)])
            for msg in messages
            if msg.role != "system"
        ]
        return ("\n\n".join(system_parts) or None), contents

    def _build_config(
        self,
        system_instruction: str | None,
        temperature: float,
        max_tokens: int | None,
        options: dict[str, Any],
    ) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            max_output_tokens=max_tokens,
            safety_settings=DEFAULT_SAFETY_SETTINGS,
            tool_config=_NO_TOOLS,
            **options
        )

    @staticmethod
    def _read_candidate(response) -> tuple[str, str | None]:
        """Return (text, finish_reason) of the first candidate."""
        if not response.candidates:
            return "", None

        candidate = response.candidates[0]
        finish_reason = getattr(candidate, "finish_reason", None)
        if finish_reason is not None:
            finish_reason = getattr(finish_reason, "value", str(finish_reason))

        parts = candidate.content.parts if candidate.content else None
        text = "".join(part.text for part in parts or [] if getattr(part, "text", None))
        return text, finish_reason

    @staticmethod
    def _read_usage(response) -> dict[str, int] | None:
        meta = response.usage_metadata
        if not meta:
            return None
        return {
            "prompt_tokens": meta.prompt_token_count or 0,
            "completion_tokens": meta.candidates_token_count or 0,
            "total_tokens": meta.total_token_count or 0,
        }

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Run one generate_content call.

        Args:
            messages: System instruction and user turn
            model: Overrides the default model for this call
            temperature: Sampling temperature
            max_tokens: Output token cap, None for the service default
            **kwargs: Extra GenerateContentConfig fields, e.g.
                response_mime_type and response_schema
        """
        model_name = model or self._model
        system_instruction, contents = self._convert_messages(messages)

        response = await self._client.aio.models.generate_content(
            model=model_name,
            contents=contents,
            config=self._build_config(system_instruction, temperature, max_tokens, kwargs),
        )

        text, finish_reason = self._read_candidate(response)
        return LLMResponse(
            content=text,
            model=model_name,
            usage=self._read_usage(response),
            finish_reason=finish_reason,
        )

    async def close(self) -> None:
        """Nothing to release; the GenAI client holds no open session."""
