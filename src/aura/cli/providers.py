"""Provider factory functions for CLI.

Centralizes creation of the LLM provider and checklist generator from
environment variables. Hides configuration details from command implementations.
"""

import os

from rich.console import Console
from rich.markup import escape

from ..checklist import ChecklistGenerator
from ..checklist.generator import DEFAULT_TEMPERATURE
from ..errors import ConfigurationError
from ..llm import LLMProvider, create_llm_provider
from ..llm.providers.gemini import DEFAULT_MODEL

_console = Console()


def load_api_key() -> str:
    """Read the Gemini API key from the environment.

    Environment variables (first non-empty wins):
        GEMINI_API_KEY
        API_KEY

    Raises:
        ConfigurationError: If neither variable is set
    """
    api_key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY (or API_KEY) environment variable not set")
    return api_key


def load_temperature() -> float:
    """Read the sampling temperature from AURA_TEMPERATURE (default 0.7).

    Raises:
        ConfigurationError: If the value is not a number between 0 and 2
    """
    raw = os.getenv("AURA_TEMPERATURE")
    if not raw:
        return DEFAULT_TEMPERATURE
    try:
        temperature = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"AURA_TEMPERATURE must be a number, got '{raw}'") from e
    if not 0.0 <= temperature <= 2.0:
        raise ConfigurationError(f"AURA_TEMPERATURE must be between 0 and 2, got {temperature}")
    return temperature


def get_llm(console: Console | None = None) -> LLMProvider:
    """Create the LLM provider from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        Gemini provider instance

    Raises:
        SystemExit: If the API key is not set

    Environment variables:
        GEMINI_API_KEY / API_KEY: Gemini API key (required)
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
    """
    import typer

    con = console or _console
    try:
        api_key = load_api_key()
    except ConfigurationError as e:
        con.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    model = os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
    return create_llm_provider("gemini", api_key=api_key, model=model)


def get_generator(console: Console | None = None) -> ChecklistGenerator:
    """Create a checklist generator bound to the configured provider.

    Raises:
        SystemExit: If configuration is missing or invalid
    """
    import typer

    con = console or _console
    llm = get_llm(con)
    try:
        temperature = load_temperature()
    except ConfigurationError as e:
        con.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    return ChecklistGenerator(llm, temperature=temperature)
