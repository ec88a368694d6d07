"""Chat commands."""

from dataclasses import dataclass
from typing import Optional
import logging
import sys
import time

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from ghmodels.auth import token_for_host
from ghmodels.client import ModelsClient
from ghmodels.config import settings
from ghmodels.conversation import Conversation
from ghmodels.exceptions import ModelsError
from ghmodels.models import (
    ChatCompletionOptions,
    ChatCompletionResponse,
    ChatMessageRole,
)

console = Console()
logger = logging.getLogger(__name__)


@dataclass
class ReplyStats:
    """Timings collected while printing one reply."""

    started: float
    first_token: Optional[float] = None
    finished: Optional[float] = None
    chunks: int = 0
    characters: int = 0


def _stdin_is_tty() -> bool:
    return sys.stdin.isatty()


def run(
    prompt: Optional[str] = typer.Argument(None, help="Prompt to send; omit for an interactive chat"),
    model: str = typer.Option(settings.default_model, "--model", "-m", help="Model to use"),
    system_prompt: str = typer.Option(settings.system_prompt, "--system-prompt", help="System prompt"),
    max_tokens: Optional[int] = typer.Option(None, "--max-tokens", min=1, help="Maximum tokens to generate"),
    temperature: Optional[float] = typer.Option(None, "--temperature", min=0, max=2, help="Sampling temperature (0-2)"),
    top_p: Optional[float] = typer.Option(None, "--top-p", min=0, max=1, help="Nucleus sampling (0-1)"),
    stats: bool = typer.Option(False, "--stats", help="Print timings after each reply"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Send a prompt to a model and stream the reply."""
    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)

    text = prompt or ""
    if not _stdin_is_tty():
        piped = sys.stdin.read().strip()
        if piped:
            text = f"{text}\n{piped}" if text else piped

    interactive = not text
    if interactive and not _stdin_is_tty():
        console.print("[red]Error:[/red] no prompt given")
        raise typer.Exit(1)

    conversation = Conversation(system_prompt=system_prompt)
    sampling = {"max_tokens": max_tokens, "temperature": temperature, "top_p": top_p}

    try:
        token = token_for_host(settings.token_host)
        with ModelsClient(token) as client:
            if interactive:
                _chat_loop(client, conversation, model, sampling, stats)
            else:
                _reply(client, conversation, text, model, sampling, stats)
    except (ModelsError, ValidationError, httpx.HTTPError) as e:
        logger.debug(f"Request failed: {e!r}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _chat_loop(
    client: ModelsClient,
    conversation: Conversation,
    model: str,
    sampling: dict,
    stats: bool,
) -> None:
    """Interactive chat; turns are kept for this run only."""
    console.print(
        f"[bold]Chatting with {escape(model)}[/bold] "
        "(/reset to start over, /exit to quit)"
    )
    while True:
        try:
            line = Prompt.ask("[bold cyan]>>>[/bold cyan]", console=console).strip()
        except EOFError:
            break

        if not line:
            continue
        if line == "/exit":
            break
        if line == "/reset":
            conversation.reset()
            console.print("[dim]Conversation reset.[/dim]")
            continue

        _reply(client, conversation, line, model, sampling, stats)


def _reply(
    client: ModelsClient,
    conversation: Conversation,
    text: str,
    model: str,
    sampling: dict,
    stats: bool,
) -> None:
    """Send one user turn and print the model's answer."""
    conversation.add_message(ChatMessageRole.USER, text)
    options = ChatCompletionOptions(
        messages=conversation.get_messages(),
        model=model,
        **sampling,
    )

    reply_stats = ReplyStats(started=time.perf_counter())
    response = client.get_chat_completion_stream(options)
    reply = _print_response(response, reply_stats)

    conversation.add_message(ChatMessageRole.ASSISTANT, reply)

    if stats:
        _print_stats(reply_stats)


def _print_response(response: ChatCompletionResponse, reply_stats: ReplyStats) -> str:
    """Print completion content as it arrives and return the full reply."""
    parts = []

    def emit(content: Optional[str]) -> None:
        if not content:
            return
        if reply_stats.first_token is None:
            reply_stats.first_token = time.perf_counter()
        parts.append(content)
        reply_stats.characters += len(content)
        console.print(content, end="", markup=False, highlight=False, soft_wrap=True)

    if response.reader is not None:
        with response.reader as reader:
            for completion in reader:
                reply_stats.chunks += 1
                for choice in completion.choices:
                    if choice.delta is not None:
                        emit(choice.delta.content)
    elif response.completion is not None:
        reply_stats.chunks = 1
        for choice in response.completion.choices:
            if choice.message is not None:
                emit(choice.message.content)

    reply_stats.finished = time.perf_counter()
    console.print()
    return "".join(parts)


def _print_stats(reply_stats: ReplyStats) -> None:
    table = Table(title="Reply Stats")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    if reply_stats.first_token is not None:
        table.add_row(
            "Time to first token",
            f"{(reply_stats.first_token - reply_stats.started) * 1000:.0f} ms",
        )
    else:
        table.add_row("Time to first token", "-")
    table.add_row(
        "Total time",
        f"{(reply_stats.finished - reply_stats.started) * 1000:.0f} ms",
    )
    table.add_row("Chunks", str(reply_stats.chunks))
    table.add_row("Characters", str(reply_stats.characters))

    console.print(table)
