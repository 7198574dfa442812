"""Conversation state for a single chat session."""

from .controller import APOLOGY_PREFIX, WELCOME_MESSAGE, ConversationController
from .models import Message, Sender

__all__ = [
    "APOLOGY_PREFIX",
    "WELCOME_MESSAGE",
    "ConversationController",
    "Message",
    "Sender",
]
