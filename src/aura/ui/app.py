"""Main Textual TUI application.

Wires the conversation controller to the chat widgets: input submission,
the typing indicator, the error line and the log panel.
"""

import asyncio

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from ..checklist import ChecklistGenerator
from ..conversation import ConversationController, Message
from .config import INPUT_PLACEHOLDER, LogLevel
from .styles import APP_CSS
from .themes import AURA_NIGHT
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, TypingIndicator


class AuraApp(App):
    """Textual TUI for Aura checklists."""

    CSS = APP_CSS
    TITLE = "Aura"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "copy_last_response", "Copy Reply"),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        generator: ChecklistGenerator,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._generator = generator
        self._log_level = log_level
        self.controller = ConversationController(generator)
        self._sending = False

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield TypingIndicator(id="typing-indicator")
        yield DebugPanel(id="debug-panel")
        with Vertical(id="bottom-bar"):
            yield Static("", id="error-line", markup=False)
            yield ChatInputBar(id="chat-input-bar", placeholder=INPUT_PLACEHOLDER)
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(AURA_NIGHT)
        self.theme = "aura-night"
        self.sub_title = self._generator.model_name

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._generator.set_debug_callback(self._route_debug)
        self.controller.set_debug_callback(self._route_debug)
        self.controller.set_message_callback(self._on_message_added)
        self.controller.set_status_callback(self._on_status_changed)

        chat = self.query_one("#chat-history", ChatHistoryWidget)
        for message in self.controller.messages:
            chat.add_message(message)
        self._on_status_changed(self.controller.awaiting_response, self.controller.error)

        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        """Detach the controller so a reply still in flight is dropped."""
        self.controller.close()
        self.controller.set_debug_callback(None)
        self._generator.set_debug_callback(None)

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route debug messages to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.log_message(component, message, LogLevel.from_string(level))

    def _on_message_added(self, message: Message) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).add_message(message)

    def _on_status_changed(self, awaiting_response: bool, error: str | None) -> None:
        indicator = self.query_one("#typing-indicator", TypingIndicator)
        if awaiting_response:
            indicator.start()
        else:
            indicator.stop()

        error_line = self.query_one("#error-line", Static)
        error_line.update(error or "")
        error_line.display = bool(error)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        # The worker sets awaiting_response only once it runs
        busy = self._sending or self.controller.awaiting_response
        if busy or not self.controller.can_submit(event.value):
            if busy:
                self.notify("Aura is still working on your last request", severity="warning", timeout=2)
            return

        input_bar.remember(event.value.strip())
        input_bar.clear()
        self._sending = True
        self._send(event.value)

    @work(group="generation")
    async def _send(self, text: str) -> None:
        """Run one submission as a background async worker."""
        try:
            await self.controller.submit(text)
        finally:
            self._sending = False

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant reply to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Reply copied")
        else:
            self.notify("No reply to copy", severity="warning")


async def run_textual_tui(
    generator: ChecklistGenerator,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        generator: Checklist generator bound to an LLM provider
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = AuraApp(generator=generator, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
