"""Persona instruction for checklist requests.

The instruction ships as system.txt beside this module. A copy placed in
$AURA_PROMPTS_DIR or ./prompts/ replaces it, so the persona can be tuned
without reinstalling.
"""

import os
from datetime import date
from functools import lru_cache
from pathlib import Path

PROMPTS_DIR_ENV = "AURA_PROMPTS_DIR"
TODAY_PLACEHOLDER = "{today}"

_PACKAGE_DIR = Path(__file__).parent


def _search_paths(filename: str) -> list[Path]:
    paths = []
    override_dir = os.getenv(PROMPTS_DIR_ENV)
    if override_dir:
        paths.append(Path(override_dir) / filename)
    paths.append(Path.cwd() / "prompts" / filename)
    paths.append(_PACKAGE_DIR / filename)
    return paths


@lru_cache(maxsize=8)
def load_prompt(name: str) -> str:
    """Read prompts/<name>.txt from the first location that has it.

    Raises:
        FileNotFoundError: If no location has the file
    """
    paths = _search_paths(f"{name}.txt")
    for path in paths:
        if path.is_file():
            return path.read_text(encoding="utf-8").strip()

    searched = "\n".join(f"  - {path}" for path in paths)
    raise FileNotFoundError(f"Prompt '{name}' not found. Searched:\n{searched}")


def get_system_prompt(today: date | None = None) -> str:
    """The Aura persona instruction with today's date filled in.

    The date lets the model resolve "tomorrow" or "this weekend" when it
    estimates the weather.
    """
    day = today or date.today()
    return load_prompt("system").replace(TODAY_PLACEHOLDER, day.strftime("%A, %d %B %Y"))


def clear_cache() -> None:
    """Forget loaded prompts so edited files are picked up."""
    load_prompt.cache_clear()


__all__ = [
    "PROMPTS_DIR_ENV",
    "clear_cache",
    "get_system_prompt",
    "load_prompt",
]
