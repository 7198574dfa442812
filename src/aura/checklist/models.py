"""Data models for generated checklists.

Defines the shape of the structured reply expected from the model, both as
pydantic models (used to validate the reply) and as the response schema
sent with the request.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WeatherReport(BaseModel):
    """Weather forecast and weather-related items.

    All fields may be empty when no location could be inferred.
    """

    model_config = ConfigDict(frozen=True)

    summary: str = Field(default="", description="Brief forecast, empty if location unknown")
    temperature: str = Field(default="", description="Forecast temperature in Celsius, e.g. '22°C'")
    items: list[str] = Field(default_factory=list, description="Items suggested by the forecast")


class ChecklistCategory(BaseModel):
    """A named group of items, e.g. 'Clothing'."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(description="Category name")
    items: list[str] = Field(description="Items in this category")


class StructuredChecklistResponse(BaseModel):
    """Structured reply produced by one successful generation call."""

    model_config = ConfigDict(frozen=True)

    greeting: str = Field(description="Friendly opening remark")
    weather: WeatherReport = Field(description="Weather forecast and related items")
    checklist: list[ChecklistCategory] = Field(description="Categorized items")
    suggestions: list[str] = Field(description="Commonly forgotten items")
    closing: str = Field(description="Closing remark")


def _string_list(description: str) -> dict[str, Any]:
    return {
        "type": "ARRAY",
        "description": description,
        "items": {"type": "STRING"},
    }


# Schema in the OpenAPI subset accepted by the Gemini response_schema option.
RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "greeting": {
            "type": "STRING",
            "description": "A friendly, conversational opening remark to the user.",
        },
        "weather": {
            "type": "OBJECT",
            "description": "Information about the weather and related items.",
            "properties": {
                "summary": {
                    "type": "STRING",
                    "description": "A brief summary of the weather forecast. "
                                   "Can be an empty string if location is unknown.",
                },
                "temperature": {
                    "type": "STRING",
                    "description": "The forecasted temperature in Celsius (e.g., '22°C'). "
                                   "Can be an empty string if not available.",
                },
                "items": _string_list("A list of suggested items based on the weather forecast."),
            },
        },
        "checklist": {
            "type": "ARRAY",
            "description": "An array of categorized lists of items the user needs.",
            "items": {
                "type": "OBJECT",
                "required": ["category", "items"],
                "properties": {
                    "category": {
                        "type": "STRING",
                        "description": "The name of the category (e.g., 'Groceries', 'Clothing', 'Documents').",
                    },
                    "items": _string_list("The list of items within this category."),
                },
            },
        },
        "suggestions": _string_list("A list of proactively suggested, commonly forgotten items."),
        "closing": {
            "type": "STRING",
            "description": "A polite closing remark, often asking if there's anything else needed.",
        },
    },
    "required": ["greeting", "weather", "checklist", "suggestions", "closing"],
}
