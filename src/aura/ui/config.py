"""UI constants: log levels, limits and labels."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel thresholds. A lower value lets more messages through."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def from_string(cls, value: str) -> "LogLevel":
        """Parse 'debug', 'info', 'warning' or 'error'; anything else is DEBUG."""
        return cls.__members__.get(value.strip().upper(), cls.DEBUG)


INPUT_HISTORY_MAX_SIZE = 100

LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500

WEATHER_SECTION_TITLE = "Weather Essentials"
SUGGESTIONS_SECTION_TITLE = "Suggested Items"

INPUT_PLACEHOLDER = "Tell me about your plans..."
TYPING_FRAME_SECONDS = 0.3
