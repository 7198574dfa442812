"""
Aura: a conversational assistant that turns plans into checkable checklists.

Each package hides one design decision: which model answers (llm),
what is asked and how replies are validated (checklist), how the
conversation evolves (conversation), and how it is shown (ui, cli).
"""

__version__ = "0.1.0"

from .checklist import (
    CheckableChecklistState,
    CheckableItem,
    ChecklistGenerator,
    StructuredChecklistResponse,
)
from .conversation import ConversationController, Message, Sender
from .errors import AuraError, ConfigurationError, GenerationError

__all__ = [
    "AuraError",
    "CheckableChecklistState",
    "CheckableItem",
    "ChecklistGenerator",
    "ConfigurationError",
    "ConversationController",
    "GenerationError",
    "Message",
    "Sender",
    "StructuredChecklistResponse",
]
