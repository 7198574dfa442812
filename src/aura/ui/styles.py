"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - single column
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    background: transparent;
}

.user-message {
    border-left: tall $primary;
    background: $primary 10%;

    & .message-header {
        color: $primary;
        text-style: bold;
    }
}

.assistant-message {
    border-left: tall $secondary;
    background: $secondary 6%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Checklist Card
   ============================================ */
ChecklistCard {
    height: auto;
    padding: 0 1;
    border: round $border;
    border-title-color: $secondary;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
}

.checklist-greeting, .checklist-closing {
    height: auto;
    margin: 1 0 0 0;
}

.weather-box {
    height: auto;
    margin: 1 0 0 0;
    padding: 0 1;
    background: $surface;

    & .weather-summary {
        width: 1fr;
        height: auto;
        text-style: italic;
    }

    & .weather-temperature {
        width: auto;
        height: auto;
        color: $accent;
        text-style: bold;
    }
}

ChecklistSection {
    height: auto;
    margin: 1 0 0 0;

    & .section-title {
        height: auto;
        text-style: bold;
    }
}

ChecklistItemBox {
    height: auto;
    border: none;
    padding: 0;
    background: transparent;

    &.-on > .toggle--label {
        text-style: strike;
        color: $text-muted;
    }
}

/* ============================================
   Typing Indicator
   ============================================ */
TypingIndicator {
    height: 1;
    padding: 0 2;
    color: $text-muted;
}

/* ============================================
   Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
}

/* ============================================
   Bottom Bar - error line + input
   ============================================ */
#bottom-bar {
    height: auto;
    padding: 0 1;
    background: $panel;
    border-top: solid $border;
}

#error-line {
    height: auto;
    color: $error;
    text-align: center;
}

ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    text-style: bold;
}
"""
