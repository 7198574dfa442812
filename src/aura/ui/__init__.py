"""Terminal UI module for aura.

Provides a Textual-based TUI for checklist conversations.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (input bar, transcript, checklist cards, log panel)
- formatting.py: Rich and plain-text rendering of checklists
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- config.py: UI constants and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import AuraApp, run_textual_tui
from .config import LogLevel
from .formatting import checklist_renderable, checklist_to_text
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    ChecklistCard,
    ChecklistItemBox,
    ChecklistSection,
    DebugPanel,
    TypingIndicator,
)

__all__ = [
    "AuraApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "ChecklistCard",
    "ChecklistItemBox",
    "ChecklistSection",
    "DebugPanel",
    "LogLevel",
    "TypingIndicator",
    "checklist_renderable",
    "checklist_to_text",
    "run_textual_tui",
]
