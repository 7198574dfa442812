"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..conversation import ConversationController
from ..errors import ConfigurationError
from ..prompts import get_system_prompt
from ..ui.formatting import checklist_renderable
from .providers import get_generator, load_api_key, load_temperature

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="aura",
    help="Turn free-text plans into categorized, checkable checklists",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()


def _console_debug(level: str, component: str, message: str) -> None:
    """Print trace messages for --verbose runs."""
    color = {"error": "red", "warning": "yellow", "info": "cyan"}.get(level, "dim")
    line = Text.assemble(
        (f"{level.upper():<5}", color),
        " ",
        (f"[{component}]", "dim"),
        " ",
        message,
    )
    console.print(line, highlight=False, soft_wrap=True)


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="What are you planning? e.g. \"weekend beach trip to Miami\""),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the raw structured response as JSON"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show request tracing"
    ),
):
    """Generate a single checklist and print it."""
    async def _ask():
        generator = get_generator(console)
        controller = ConversationController(generator, intro_text=None)
        if verbose:
            generator.set_debug_callback(_console_debug)
            controller.set_debug_callback(_console_debug)

        try:
            with console.status("[dim]Aura is thinking...[/dim]"):
                reply = await controller.submit(prompt)
        finally:
            await generator.close()

        if reply is None:
            console.print("[yellow]Nothing to ask: the prompt is empty[/yellow]")
            raise typer.Exit(code=1)

        if reply.checklist is None:
            console.print(Text(reply.text, style="red"), highlight=False, soft_wrap=True)
            raise typer.Exit(code=1)

        if json_output:
            console.print_json(reply.data.model_dump_json())
        else:
            console.print(checklist_renderable(reply.checklist))

    asyncio.run(_ask())


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive checklist chat."""
    async def _tui():
        from ..ui import run_textual_tui

        generator = get_generator(console)
        try:
            await run_textual_tui(generator=generator, log_level=log_level)
        finally:
            await generator.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def health():
    """Check configuration without calling the service."""
    all_healthy = True

    try:
        load_api_key()
        console.print("[green]+[/green] API key: OK")
    except ConfigurationError as e:
        console.print(f"[red]x[/red] API key: MISSING ({escape(str(e))})")
        all_healthy = False

    try:
        temperature = load_temperature()
        console.print(f"[green]+[/green] Temperature: {temperature}")
    except ConfigurationError as e:
        console.print(f"[red]x[/red] Temperature: INVALID ({escape(str(e))})")
        all_healthy = False

    try:
        prompt = get_system_prompt()
        console.print(f"[green]+[/green] System prompt: {len(prompt)} chars")
    except FileNotFoundError as e:
        console.print(f"[red]x[/red] System prompt: NOT FOUND ({escape(str(e))})")
        all_healthy = False

    if not all_healthy:
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
