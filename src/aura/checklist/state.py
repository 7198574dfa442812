"""Checkable view of a generated checklist.

Hides how checked/unchecked flags are tracked for a response. The source
StructuredChecklistResponse stays read-only; this mirror holds the only
mutable state and changes exclusively through the toggle operations.
"""

from dataclasses import dataclass, field

from .models import StructuredChecklistResponse


@dataclass
class CheckableItem:
    """A suggested item paired with its checked flag."""

    text: str
    checked: bool = False


@dataclass
class CheckableCategory:
    """A named group of checkable items."""

    category: str
    items: list[CheckableItem] = field(default_factory=list)


@dataclass
class CheckableWeather:
    summary: str = ""
    temperature: str = ""
    items: list[CheckableItem] = field(default_factory=list)


def _checkable(texts: list[str]) -> list[CheckableItem]:
    return [CheckableItem(text=text) for text in texts]


def _toggle(items: list[CheckableItem], index: int) -> bool:
    # Negative indices count as out of range
    if not 0 <= index < len(items):
        raise IndexError(f"Item index {index} out of range (0..{len(items) - 1})")
    item = items[index]
    item.checked = not item.checked
    return item.checked


@dataclass
class CheckableChecklistState:
    """Per-message checklist state derived from a structured response.

    Every item starts unchecked. Order, grouping and counts always match
    the source response; only the checked flags change.
    """

    greeting: str
    weather: CheckableWeather
    checklist: list[CheckableCategory]
    suggestions: list[CheckableItem]
    closing: str

    @classmethod
    def from_response(cls, response: StructuredChecklistResponse) -> "CheckableChecklistState":
        """Derive a fresh, fully unchecked state from a response."""
        return cls(
            greeting=response.greeting,
            weather=CheckableWeather(
                summary=response.weather.summary,
                temperature=response.weather.temperature,
                items=_checkable(response.weather.items),
            ),
            checklist=[
                CheckableCategory(category=category.category, items=_checkable(category.items))
                for category in response.checklist
            ],
            suggestions=_checkable(response.suggestions),
            closing=response.closing,
        )

    def toggle_weather_item(self, index: int) -> bool:
        """Flip one weather item. Returns the new checked value."""
        return _toggle(self.weather.items, index)

    def toggle_category_item(self, category_index: int, item_index: int) -> bool:
        """Flip one item inside a category. Returns the new checked value."""
        if not 0 <= category_index < len(self.checklist):
            raise IndexError(
                f"Category index {category_index} out of range (0..{len(self.checklist) - 1})"
            )
        return _toggle(self.checklist[category_index].items, item_index)

    def toggle_suggestion_item(self, index: int) -> bool:
        """Flip one suggested item. Returns the new checked value."""
        return _toggle(self.suggestions, index)

    @property
    def has_weather_report(self) -> bool:
        """True when there is a forecast summary or temperature to show."""
        return bool(self.weather.summary or self.weather.temperature)

    def all_items(self) -> list[CheckableItem]:
        """All items in display order: weather, categories, suggestions."""
        items = list(self.weather.items)
        for category in self.checklist:
            items.extend(category.items)
        items.extend(self.suggestions)
        return items

    @property
    def total_count(self) -> int:
        return len(self.all_items())

    @property
    def checked_count(self) -> int:
        return sum(1 for item in self.all_items() if item.checked)
