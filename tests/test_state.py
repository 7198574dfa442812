"""Unit and property-based tests for checkable checklist state."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from aura.checklist import (
    CheckableChecklistState,
    CheckableItem,
    ChecklistCategory,
    StructuredChecklistResponse,
    WeatherReport,
)


def _response(
    checklist: list[tuple[str, list[str]]],
    weather_items: list[str] | None = None,
    suggestions: list[str] | None = None,
) -> StructuredChecklistResponse:
    return StructuredChecklistResponse(
        greeting="Hi!",
        weather=WeatherReport(items=weather_items or []),
        checklist=[ChecklistCategory(category=name, items=items) for name, items in checklist],
        suggestions=suggestions or [],
        closing="Bye!",
    )


def _snapshot(state: CheckableChecklistState) -> list[bool]:
    return [item.checked for item in state.all_items()]


class TestDerivation:
    """Tests for CheckableChecklistState.from_response."""

    def test_groceries_items_start_unchecked(self):
        """Test the single-category example from the contract."""
        state = CheckableChecklistState.from_response(_response([("Groceries", ["milk", "eggs"])]))

        assert state.checklist[0].category == "Groceries"
        assert state.checklist[0].items == [
            CheckableItem(text="milk", checked=False),
            CheckableItem(text="eggs", checked=False),
        ]

    def test_text_fields_copied_untouched(self, beach_trip_response):
        """Test that greeting, closing and weather text are copied as-is."""
        state = CheckableChecklistState.from_response(beach_trip_response)

        assert state.greeting == beach_trip_response.greeting
        assert state.closing == beach_trip_response.closing
        assert state.weather.summary == "Sunny with a light sea breeze"
        assert state.weather.temperature == "29°C"
        assert [c.category for c in state.checklist] == ["Clothing", "Electronics"]

    def test_order_and_counts_preserved(self, beach_trip_response):
        """Test that every section mirrors its source list."""
        state = CheckableChecklistState.from_response(beach_trip_response)

        assert [i.text for i in state.weather.items] == beach_trip_response.weather.items
        for derived, source in zip(state.checklist, beach_trip_response.checklist, strict=True):
            assert [i.text for i in derived.items] == source.items
        assert [i.text for i in state.suggestions] == beach_trip_response.suggestions
        assert state.total_count == 8
        assert state.checked_count == 0

    def test_states_are_independent(self, beach_trip_response):
        """Test that two states derived from one response share nothing mutable."""
        first = CheckableChecklistState.from_response(beach_trip_response)
        second = CheckableChecklistState.from_response(beach_trip_response)

        first.toggle_suggestion_item(0)

        assert first.suggestions[0].checked
        assert not second.suggestions[0].checked

    def test_has_weather_report(self, beach_trip_response, grocery_payload):
        """Test weather box visibility depends on summary or temperature."""
        assert CheckableChecklistState.from_response(beach_trip_response).has_weather_report

        grocery = StructuredChecklistResponse.model_validate(grocery_payload)
        assert not CheckableChecklistState.from_response(grocery).has_weather_report

        only_temperature = grocery.model_copy(update={"weather": WeatherReport(temperature="12°C")})
        assert CheckableChecklistState.from_response(only_temperature).has_weather_report


class TestToggles:
    """Tests for the toggle operations."""

    @pytest.fixture
    def state(self, beach_trip_response):
        return CheckableChecklistState.from_response(beach_trip_response)

    def test_toggle_category_item_flips_only_that_entry(self):
        """Test toggling eggs leaves milk unchecked."""
        state = CheckableChecklistState.from_response(_response([("Groceries", ["milk", "eggs"])]))

        assert state.toggle_category_item(0, 1) is True
        assert state.checklist[0].items == [
            CheckableItem(text="milk", checked=False),
            CheckableItem(text="eggs", checked=True),
        ]

    def test_double_toggle_restores_original(self):
        """Test that toggling twice returns to unchecked."""
        state = CheckableChecklistState.from_response(_response([("Groceries", ["milk", "eggs"])]))

        state.toggle_category_item(0, 1)
        assert state.toggle_category_item(0, 1) is False
        assert not state.checklist[0].items[1].checked

    def test_toggle_weather_item(self, state):
        assert state.toggle_weather_item(1) is True
        assert [i.checked for i in state.weather.items] == [False, True]
        assert state.checked_count == 1

    def test_toggle_suggestion_item(self, state):
        assert state.toggle_suggestion_item(0) is True
        assert [i.checked for i in state.suggestions] == [True, False]

    def test_toggle_does_not_touch_other_sections(self, state):
        """Test isolation between categories, weather and suggestions."""
        state.toggle_category_item(0, 0)

        assert not any(i.checked for i in state.weather.items)
        assert not any(i.checked for i in state.suggestions)
        assert not any(i.checked for i in state.checklist[1].items)
        assert [i.checked for i in state.checklist[0].items] == [True, False, False]

    @pytest.mark.parametrize("category_index,item_index", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range_category_toggle_raises(self, state, category_index, item_index):
        """Test that bad indices raise without changing any entry."""
        before = _snapshot(state)

        with pytest.raises(IndexError):
            state.toggle_category_item(category_index, item_index)

        assert _snapshot(state) == before

    @pytest.mark.parametrize("index", [2, -1])
    def test_out_of_range_weather_and_suggestion_toggle_raises(self, state, index):
        before = _snapshot(state)

        with pytest.raises(IndexError):
            state.toggle_weather_item(index)
        with pytest.raises(IndexError):
            state.toggle_suggestion_item(index)

        assert _snapshot(state) == before


_categories = st.lists(
    st.tuples(st.text(max_size=10), st.lists(st.text(max_size=10), min_size=1, max_size=5)),
    min_size=1,
    max_size=4,
)


class TestToggleProperties:
    """Property tests for toggle isolation and involution."""

    @given(_categories, st.data())
    def test_toggle_changes_exactly_one_item(self, categories, data):
        """Property test: one toggle flips exactly one flag in the whole state."""
        state = CheckableChecklistState.from_response(
            _response(categories, weather_items=["umbrella"], suggestions=["wallet"])
        )
        category_index = data.draw(st.integers(0, len(categories) - 1))
        item_index = data.draw(st.integers(0, len(categories[category_index][1]) - 1))
        before = _snapshot(state)

        state.toggle_category_item(category_index, item_index)
        after = _snapshot(state)

        assert sum(b != a for b, a in zip(before, after, strict=True)) == 1
        assert state.checklist[category_index].items[item_index].checked

    @given(_categories, st.lists(st.tuples(st.integers(0, 3), st.integers(0, 4)), max_size=20))
    def test_every_toggle_sequence_then_reverse_is_identity(self, categories, toggles):
        """Property test: applying toggles twice leaves every flag unchecked."""
        state = CheckableChecklistState.from_response(_response(categories))
        valid = [
            (c, i) for c, i in toggles
            if c < len(categories) and i < len(categories[c][1])
        ]

        for c, i in valid + valid:
            state.toggle_category_item(c, i)

        assert state.checked_count == 0
        assert [[i.text for i in c.items] for c in state.checklist] == [items for _, items in categories]
