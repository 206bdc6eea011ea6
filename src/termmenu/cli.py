"""CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from termmenu.config import Config
    from termmenu.terminal import Terminal
    from termmenu.ui.base import PromptModel

app = typer.Typer(
    name="termmenu",
    help="Interactive terminal prompts for shell scripts. Prompts draw on stderr, answers go to stdout.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

EXIT_CANCELLED = 1
EXIT_LOOP_FAILED = 2

TitleOption = Annotated[str, typer.Option("--title", "-t", help="Title line")]
MessageOption = Annotated[str, typer.Option("--message", "-m", help="Message under the title")]
FullScreenOption = Annotated[
    bool | None,
    typer.Option("--full-screen/--inline", help="Use the alternate screen (default from config)"),
]


def _get_config() -> Config:
    """Lazy import and load config."""
    from termmenu.config import Config

    return Config.load()


def _make_terminal() -> Terminal:
    """Lazy import and create the terminal backend."""
    from termmenu.terminal import RichTerminal

    return RichTerminal(console=err_console)


def _run_prompt(model: PromptModel, full_screen: bool | None) -> PromptModel:
    """Run a prompt, exiting with EXIT_LOOP_FAILED if the terminal fails."""
    from termmenu.runner import run

    if full_screen is None:
        full_screen = _get_config().full_screen

    model, err = run(model, full_screen=full_screen, terminal=_make_terminal())
    if err is not None:
        err_console.print(f"[red]Error:[/red] {escape(str(err))}")
        raise typer.Exit(EXIT_LOOP_FAILED)
    return model


@app.command()
def select(
    choices: Annotated[list[str], typer.Argument(help="Choices to pick from")],
    title: TitleOption = "",
    message: MessageOption = "",
    full_screen: FullScreenOption = None,
):
    """Pick one choice and print it."""
    from termmenu.ui.single import SingleSelectPrompt

    prompt = _run_prompt(SingleSelectPrompt(choices, title, message), full_screen)
    if prompt.interrupted:
        raise typer.Exit(EXIT_CANCELLED)
    typer.echo(prompt.selected)


@app.command()
def multi(
    choices: Annotated[list[str], typer.Argument(help="Choices to pick from")],
    title: TitleOption = "",
    message: MessageOption = "",
    full_screen: FullScreenOption = None,
):
    """Pick any number of choices and print one per line."""
    from termmenu.ui.multi import MultiSelectPrompt

    prompt = _run_prompt(MultiSelectPrompt(choices, title, message), full_screen)
    if prompt.interrupted:
        raise typer.Exit(EXIT_CANCELLED)
    for choice in prompt.selected_choices:
        typer.echo(choice)


@app.command(name="input")
def input_(
    prompt_text: Annotated[str, typer.Argument(metavar="PROMPT", help="Question to show")],
    placeholder: Annotated[
        str, typer.Option("--placeholder", "-p", help="Hint shown while empty")
    ] = "",
    char_limit: Annotated[
        int | None, typer.Option("--char-limit", "-l", help="Maximum characters (0 = unlimited)")
    ] = None,
    width: Annotated[
        int | None, typer.Option("--width", "-w", help="Visible field width (0 = unlimited)")
    ] = None,
    full_screen: FullScreenOption = None,
):
    """Read a line of text and print it."""
    from termmenu.ui.text_input import TextInputPrompt

    cfg = _get_config()
    prompt = TextInputPrompt(
        prompt_text,
        placeholder=placeholder,
        char_limit=cfg.input_char_limit if char_limit is None else char_limit,
        width=cfg.input_width if width is None else width,
        blink_interval=cfg.blink_interval,
    )
    prompt = _run_prompt(prompt, full_screen)
    if prompt.interrupted:
        raise typer.Exit(EXIT_CANCELLED)
    typer.echo(prompt.value)


@app.command()
def config():
    """Show effective settings."""
    cfg = _get_config()
    console.print(f"[bold]Config dir:[/bold] {cfg.config_dir}")
    for name, desc, value in cfg.get_settings():
        console.print(f"[bold]{name}[/bold] = {value} [dim]({desc})[/dim]")


def main() -> None:
    app()
