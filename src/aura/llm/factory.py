from typing import Any

from .base import LLMProvider
from .providers import GeminiProvider

_PROVIDERS: dict[str, type[LLMProvider]] = {
    "gemini": GeminiProvider,
}


def available_providers() -> list[str]:
    return sorted(_PROVIDERS)


def create_llm_provider(
    provider: str = "gemini",
    *,
    api_key: str,
    model: str | None = None,
    **client_kwargs: Any
) -> LLMProvider:
    """Instantiate a provider by name.

    Args:
        provider: Registered provider name, case-insensitive
        api_key: Credential for the hosted service
        model: Default model; None keeps the provider's own default
        **client_kwargs: Passed to the provider's SDK client

    Raises:
        ValueError: If the provider name is not registered

    Example:
        >>> llm = create_llm_provider("gemini", api_key="...", model="gemini-2.5-flash")
    """
    provider_cls = _PROVIDERS.get(provider.lower())
    if provider_cls is None:
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: {', '.join(available_providers())}"
        )

    if model is not None:
        client_kwargs["model"] = model
    return provider_cls(api_key=api_key, **client_kwargs)
