"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Prompt entry (Enter sends, Shift+Enter or Ctrl+J adds a line) and input history
- Chat message rendering
- Checklist cards with interactive checkboxes
- Typing indicator and log panel
"""

from collections.abc import Callable
from datetime import datetime
from functools import partial

from rich.text import Text
from textual import on
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Key
from textual.message import Message as TextualMessage
from textual.widgets import Button, Checkbox, RichLog, Static, TextArea

from ..checklist import CheckableChecklistState, CheckableItem
from ..conversation import Message
from .config import (
    INPUT_HISTORY_MAX_SIZE,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    SUGGESTIONS_SECTION_TITLE,
    TYPING_FRAME_SECONDS,
    WEATHER_SECTION_TITLE,
    LogLevel,
)
from .formatting import category_icon, checklist_to_text


class PromptTextArea(TextArea):
    """Multi-line prompt entry where Enter submits."""

    class SubmitRequested(TextualMessage):
        """Posted when the user presses Enter."""

    async def _on_key(self, event: Key) -> None:
        # prevent_default stops TextArea's own key handler from running
        if event.key == "enter":
            event.prevent_default()
            event.stop()
            self.post_message(self.SubmitRequested())
        elif event.key in ("shift+enter", "ctrl+j"):
            event.prevent_default()
            event.stop()
            self.insert("\n")


class ChatInputBar(Horizontal):
    """Chat input bar with a prompt area and Send button.

    The bar does not clear itself on submit; the app clears it once the
    submission is accepted so a dropped submission keeps its text.
    """

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, placeholder: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._placeholder = placeholder
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = PromptTextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="primary").with_tooltip(
            "Send message (Enter)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", PromptTextArea)
        text_area.highlight_cursor_line = False
        if self._placeholder:
            text_area.placeholder = self._placeholder
        text_area.focus()

    @property
    def value(self) -> str:
        return self.query_one("#chat-input", PromptTextArea).text

    @value.setter
    def value(self, text: str) -> None:
        self.query_one("#chat-input", PromptTextArea).text = text

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self.submit()

    def on_prompt_text_area_submit_requested(self, event: PromptTextArea.SubmitRequested) -> None:
        event.stop()
        self.submit()

    def on_key(self, event: Key) -> None:
        """Navigate input history with Up/Down at the edges of the text."""
        if event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", PromptTextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", PromptTextArea)
        lines = text_area.text.split("\n")
        last_row = len(lines) - 1
        last_col = len(lines[-1]) if lines else 0
        return text_area.cursor_location == (last_row, last_col)

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        if direction < 0:
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                self.value = ""
                return
        self.value = self._history[self._history_index]

    def remember(self, value: str) -> None:
        """Add an accepted submission to the input history."""
        if not self._history or self._history[-1] != value:
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1

    def submit(self) -> None:
        """Post the current text, unless it is blank."""
        value = self.value
        if value.strip():
            self.post_message(self.Submitted(value))

    def clear(self) -> None:
        self.value = ""

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", PromptTextArea).focus()


class ChecklistItemBox(Checkbox):
    """Checkbox bound to one checkable item."""

    def __init__(self, item: CheckableItem, on_toggle: Callable[[], bool], **kwargs) -> None:
        super().__init__(Text(item.text), value=item.checked, **kwargs)
        self.item = item
        self._on_toggle = on_toggle

    def sync_item(self, value: bool) -> None:
        """Flip the bound item if it does not already match the checkbox."""
        if self.item.checked != value:
            self._on_toggle()


class ChecklistSection(Vertical):
    """A titled list of checkboxes. Not rendered when it has no items."""

    def __init__(
        self,
        title: str,
        items: list[CheckableItem],
        on_toggle: Callable[[int], bool],
        icon: str | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.section_title = title
        self._items = items
        self._on_toggle = on_toggle
        self._icon = icon or category_icon(title)

    def compose(self):
        yield Static(Text(f"{self._icon} {self.section_title}"), classes="section-title")
        for index, item in enumerate(self._items):
            yield ChecklistItemBox(item, partial(self._on_toggle, index), classes="checklist-item")


class ChecklistCard(Vertical):
    """Interactive rendering of a message's checklist state."""

    BORDER_TITLE = "Checklist"

    def __init__(self, state: CheckableChecklistState, **kwargs) -> None:
        super().__init__(**kwargs)
        self.state = state

    def compose(self):
        state = self.state
        yield Static(Text(state.greeting), classes="checklist-greeting")

        if state.has_weather_report:
            with Horizontal(classes="weather-box"):
                if state.weather.summary:
                    yield Static(Text(f'"{state.weather.summary}"'), classes="weather-summary")
                if state.weather.temperature:
                    yield Static(Text(state.weather.temperature), classes="weather-temperature")

        if state.weather.items:
            yield ChecklistSection(
                WEATHER_SECTION_TITLE,
                state.weather.items,
                state.toggle_weather_item,
                icon=category_icon("weather"),
            )
        for index, category in enumerate(state.checklist):
            if category.items:
                yield ChecklistSection(
                    category.category,
                    category.items,
                    partial(state.toggle_category_item, index),
                )
        if state.suggestions:
            yield ChecklistSection(
                SUGGESTIONS_SECTION_TITLE,
                state.suggestions,
                state.toggle_suggestion_item,
                icon=category_icon("suggestions"),
            )

        yield Static(Text(state.closing), classes="checklist-closing")

    def on_mount(self) -> None:
        self._update_progress()

    @on(Checkbox.Changed)
    def _item_changed(self, event: Checkbox.Changed) -> None:
        box = event.control
        if isinstance(box, ChecklistItemBox):
            event.stop()
            box.sync_item(event.value)
            self._update_progress()

    def _update_progress(self) -> None:
        self.border_subtitle = f"{self.state.checked_count}/{self.state.total_count} done"


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat transcript."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[Message] = []

    @property
    def messages(self) -> list[Message]:
        return list(self._messages)

    def add_message(self, message: Message) -> None:
        """Render a message at the end of the transcript."""
        self._messages.append(message)
        self._render_message(message)
        self.border_subtitle = f"{len(self._messages)} messages"
        self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Plain text of the last assistant message."""
        for message in reversed(self._messages):
            if message.is_user:
                continue
            if message.checklist is not None:
                return checklist_to_text(message.checklist)
            return message.text
        return None

    def _render_message(self, message: Message) -> None:
        if message.is_user:
            prefix, border_class, icon = "You", "user-message", ">"
        else:
            prefix, border_class, icon = "Aura", "assistant-message", "<"

        timestamp = message.timestamp.strftime("%H:%M:%S")
        container = Vertical(classes=f"chat-message {border_class}")
        container.compose_add_child(Static(f"{icon} {prefix} [{timestamp}]", classes="message-header", markup=False))

        if message.checklist is not None:
            container.compose_add_child(ChecklistCard(message.checklist, classes="message-content"))
        else:
            container.compose_add_child(Static(Text(message.text), classes="message-content"))

        self.mount(container)


class TypingIndicator(Static):
    """Animated 'Aura is thinking' line shown while a reply is pending."""

    _FRAMES = ("●∙∙", "∙●∙", "∙∙●")

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._frame = 0
        self._timer = None
        self.display = False

    def on_mount(self) -> None:
        self._timer = self.set_interval(TYPING_FRAME_SECONDS, self._advance, pause=True)

    @property
    def active(self) -> bool:
        return bool(self.display)

    def _advance(self) -> None:
        self._frame = (self._frame + 1) % len(self._FRAMES)
        self.update(f"Aura is thinking {self._FRAMES[self._frame]}")

    def start(self) -> None:
        self._frame = 0
        self.update(f"Aura is thinking {self._FRAMES[0]}")
        self.display = True
        if self._timer is not None:
            self._timer.resume()

    def stop(self) -> None:
        self.display = False
        if self._timer is not None:
            self._timer.pause()


class DebugPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    _LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    _COMPONENT_COLORS = {
        "TUI": "cyan",
        "LLM": "magenta",
        "Parser": "bright_blue",
        "Conversation": "green",
    }

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level
        self.display = False

    @property
    def log_level(self) -> LogLevel:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {self._log_level.name}"
        else:
            self.border_subtitle = "Hidden"

    def log_message(self, component: str, message: str, level: LogLevel = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, LLM, Parser, Conversation)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        line = Text.assemble(
            (timestamp, "dim"),
            " ",
            (f"{level.name:<5}", self._LEVEL_COLORS[level]),
            " ",
            (f"[{component}]", self._COMPONENT_COLORS.get(component, "white")),
            " ",
            message,
        )
        self.write(line)

    def debug(self, component: str, message: str) -> None:
        self.log_message(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log_message(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log_message(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log_message(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
