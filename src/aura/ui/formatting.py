"""Text formatting utilities for checklists.

Hides how a checklist is turned into Rich renderables (for the CLI) and
plain text (for the clipboard), and how categories get their icons.
"""

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from ..checklist import CheckableChecklistState, CheckableItem
from .config import SUGGESTIONS_SECTION_TITLE, WEATHER_SECTION_TITLE

# Matched in order, first keyword wins
_CATEGORY_ICONS = [
    ("grocer", "🛒"),
    ("cloth", "👕"),
    ("electronic", "🔌"),
    ("suggest", "💡"),
    ("weather", "🌦"),
]
_DEFAULT_ICON = "📋"


def category_icon(category: str) -> str:
    """Pick an icon for a category name by keyword."""
    lowered = category.lower()
    for keyword, icon in _CATEGORY_ICONS:
        if keyword in lowered:
            return icon
    return _DEFAULT_ICON


def iter_sections(state: CheckableChecklistState) -> list[tuple[str, str, list[CheckableItem]]]:
    """List (title, icon, items) for every non-empty section in display order."""
    sections = [(WEATHER_SECTION_TITLE, category_icon("weather"), state.weather.items)]
    sections.extend(
        (category.category, category_icon(category.category), category.items)
        for category in state.checklist
    )
    sections.append((SUGGESTIONS_SECTION_TITLE, category_icon("suggestions"), state.suggestions))
    return [section for section in sections if section[2]]


def _item_text(item: CheckableItem) -> Text:
    if item.checked:
        return Text.assemble(("[x] ", "green"), (item.text, "strike dim"))
    return Text.assemble(("[ ] ", "dim"), item.text)


def checklist_renderable(state: CheckableChecklistState) -> Panel:
    """Render a checklist as a Rich panel."""
    parts: list = [Text(state.greeting)]

    if state.has_weather_report:
        weather = Text()
        if state.weather.summary:
            weather.append(f'"{state.weather.summary}"', style="italic")
        if state.weather.temperature:
            if state.weather.summary:
                weather.append("  ")
            weather.append(state.weather.temperature, style="bold bright_cyan")
        parts.append(Text())
        parts.append(weather)

    for title, icon, items in iter_sections(state):
        parts.append(Text())
        parts.append(Text(f"{icon} {title}", style="bold"))
        parts.extend(_item_text(item) for item in items)

    parts.append(Text())
    parts.append(Text(state.closing))

    return Panel(
        Group(*parts),
        title="[bold cyan]Aura[/bold cyan]",
        subtitle=f"{state.checked_count}/{state.total_count} done",
        border_style="blue",
    )


def checklist_to_text(state: CheckableChecklistState) -> str:
    """Plain-text version of a checklist for copying."""
    lines = [state.greeting]
    if state.has_weather_report:
        lines.append(" ".join(part for part in (state.weather.summary, state.weather.temperature) if part))
    for title, _icon, items in iter_sections(state):
        lines.append("")
        lines.append(f"{title}:")
        lines.extend(f"- [{'x' if item.checked else ' '}] {item.text}" for item in items)
    lines.append("")
    lines.append(state.closing)
    return "\n".join(lines)
