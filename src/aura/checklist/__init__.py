"""Checklist generation and checkable state.

Module structure:
- models.py: Response models and the response schema sent to the model
- generator.py: Generation client (one schema-constrained call per request)
- state.py: Checkable mirror of a response with toggle operations
"""

from .generator import ChecklistGenerator
from .models import (
    RESPONSE_SCHEMA,
    ChecklistCategory,
    StructuredChecklistResponse,
    WeatherReport,
)
from .state import (
    CheckableCategory,
    CheckableChecklistState,
    CheckableItem,
    CheckableWeather,
)

__all__ = [
    "RESPONSE_SCHEMA",
    "CheckableCategory",
    "CheckableChecklistState",
    "CheckableItem",
    "CheckableWeather",
    "ChecklistCategory",
    "ChecklistGenerator",
    "StructuredChecklistResponse",
    "WeatherReport",
]
