"""Interactive two-screen session: home, then live translation."""

from rich.prompt import Prompt

from gesturio.core.types import Screen
from gesturio.fingerspelling import SessionSnapshot, TranslatorSession

from ..utils.config import get_max_input_length, get_resolver
from ..utils.display import console, render_snapshot

QUIT_COMMANDS = {":q", ":quit", ":exit"}
BACK_COMMANDS = {":back", ":home"}
CLEAR_COMMANDS = {":clear", ":c"}


class TextPrompt(Prompt):
    """Prompt that returns the line exactly as typed.

    Leading and trailing spaces are significant: "Hi " opens a new, empty word.
    """

    def process_response(self, value: str) -> str:
        return value


def interactive() -> None:
    """Start the interactive translator.

    The home screen waits for Enter ("Let's Start"). On the translator
    screen every line you enter replaces the text field and the cards
    are redrawn. Commands: :clear, :back, :quit.

    Example:
        gesturio interactive
    """
    resolver = get_resolver()
    has_icon = resolver.icon() is not None
    session = TranslatorSession(resolver, max_input_length=get_max_input_length())

    def redraw(snapshot: SessionSnapshot) -> None:
        console.print()
        render_snapshot(snapshot, has_icon=has_icon)

    session.subscribe(redraw)

    while True:
        try:
            if session.screen is Screen.HOME:
                answer = Prompt.ask(
                    "[bold blue]Press Enter to start[/] [dim](:quit to exit)[/]",
                    default="",
                    show_default=False,
                    console=console,
                )
                if answer.strip().lower() in QUIT_COMMANDS:
                    break
                session.start()
                continue

            line = TextPrompt.ask("[blue]>[/]", default="", show_default=False, console=console)
        except EOFError:
            break

        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command in BACK_COMMANDS:
            session.go_home()
        elif command in CLEAR_COMMANDS:
            session.clear()
        else:
            session.set_text(line)

    console.print("[dim]Goodbye[/]")
