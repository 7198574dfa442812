"""Unit tests for checklist response models and schema."""
import pytest
from pydantic import ValidationError

from aura.checklist import RESPONSE_SCHEMA, StructuredChecklistResponse, WeatherReport

REQUIRED_FIELDS = ["greeting", "weather", "checklist", "suggestions", "closing"]


class TestStructuredChecklistResponse:
    """Tests for the response model."""

    def test_parse_full_payload(self, beach_trip_payload):
        response = StructuredChecklistResponse.model_validate(beach_trip_payload)

        assert response.greeting.startswith("A beach weekend")
        assert response.weather.temperature == "29°C"
        assert response.checklist[0].category == "Clothing"
        assert response.checklist[0].items == ["swimsuit", "flip-flops", "hat"]
        assert response.suggestions == ["reusable water bottle", "beach towel"]

    @pytest.mark.parametrize("field", REQUIRED_FIELDS)
    def test_missing_top_level_field_fails(self, beach_trip_payload, field):
        """Test that every top-level field is mandatory."""
        del beach_trip_payload[field]

        with pytest.raises(ValidationError) as exc_info:
            StructuredChecklistResponse.model_validate(beach_trip_payload)

        assert exc_info.value.errors()[0]["loc"] == (field,)

    def test_weather_fields_default_to_empty(self, beach_trip_payload):
        """Test that a bare weather object is accepted."""
        beach_trip_payload["weather"] = {}

        response = StructuredChecklistResponse.model_validate(beach_trip_payload)

        assert response.weather == WeatherReport(summary="", temperature="", items=[])

    def test_category_requires_items(self, beach_trip_payload):
        beach_trip_payload["checklist"] = [{"category": "Clothing"}]

        with pytest.raises(ValidationError):
            StructuredChecklistResponse.model_validate(beach_trip_payload)

    def test_response_is_read_only(self, beach_trip_response):
        with pytest.raises(ValidationError):
            beach_trip_response.greeting = "changed"


class TestResponseSchema:
    """Tests for the schema sent to the service."""

    def test_required_fields_match_model(self):
        """Test that the schema and the model agree on mandatory fields."""
        model_required = [
            name for name, info in StructuredChecklistResponse.model_fields.items()
            if info.is_required()
        ]
        assert RESPONSE_SCHEMA["required"] == REQUIRED_FIELDS
        assert sorted(model_required) == sorted(REQUIRED_FIELDS)

    def test_schema_properties_match_model(self):
        assert set(RESPONSE_SCHEMA["properties"]) == set(StructuredChecklistResponse.model_fields)
        weather = RESPONSE_SCHEMA["properties"]["weather"]["properties"]
        assert set(weather) == set(WeatherReport.model_fields)

    def test_checklist_category_shape(self):
        category = RESPONSE_SCHEMA["properties"]["checklist"]["items"]
        assert category["type"] == "OBJECT"
        assert category["required"] == ["category", "items"]
        assert category["properties"]["items"]["items"] == {"type": "STRING"}
