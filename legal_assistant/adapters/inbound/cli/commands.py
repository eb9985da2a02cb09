"""CLI interface for the legal assistant."""

import json
import os

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.prompt import Prompt

from ....common.exception_handler import describe_error
from ....config.logging import setup_logging
from ....config.settings import settings
from ....core.domain import Failure, Language, Query
from ....core.services import QueryPipeline

app = typer.Typer(
    name="legal-assistant",
    help="Legal assistant - answers legal questions from a legal document corpus",
    add_completion=False,
)

console = Console()

# Shows full JSON error details when enabled
DEBUG_MODE = os.getenv("DEBUG", "false").lower() == "true"

LANGUAGE_HELP = "Answer language: en, hi or mr (default: marker in the question, else English)"


def handle_cli_error(exc: Exception) -> None:
    """Display an error in the CLI.

    In debug mode, shows the full JSON error details.
    Otherwise shows a short message with the error code.
    """
    error_data = describe_error(exc, include_trace=DEBUG_MODE)

    if DEBUG_MODE:
        console.print(
            Panel(
                json.dumps(error_data, indent=2, default=str),
                title="[bold red]Error Details[/]",
                border_style="red",
            )
        )
        return

    error_code = error_data["error"].get("code", "UNKNOWN")
    console.print(f"\n[red]Error [{error_code}]:[/] {error_data['error']['message']}")
    console.print(f"[dim]Type: {error_data['error']['type']}[/]")
    console.print("[dim]Set DEBUG=true for full details[/]")


def with_language(question: str, language: str | None) -> str:
    """Prefix the question with a language marker, as the web UI does.

    A marker already present in the question is left untouched.

    Raises:
        typer.BadParameter: If the language code is not supported.
    """
    if not language:
        return question
    try:
        target = Language.from_code(language)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--language") from e
    if any(lang.marker in question for lang in Language):
        return question
    return f"{target.marker} {question}"


def get_pipeline() -> QueryPipeline:
    """Build the query pipeline from settings."""
    from ....composition.container import build_pipeline

    setup_logging(settings.log_level, json_format=settings.log_json)
    return build_pipeline(settings)


def _answer(pipeline: QueryPipeline, question: str, stream: bool) -> bool:
    """Answer one question and print it. Returns False on failure."""
    if stream:
        prepared = pipeline.prepare(question)
        if isinstance(prepared, Failure):
            console.print(f"[red]Error ({prepared.error_kind.value}):[/] {prepared.message}")
            return False
        for chunk in pipeline.stream(prepared):
            console.print(chunk, end="", markup=False, highlight=False)
        console.print()
        console.print(f"[dim]Sources: {prepared.source_count}[/]")
        return True

    with console.status("[bold green]Thinking...[/]"):
        result = pipeline.run(question)

    if isinstance(result, Failure):
        console.print(f"[red]Error ({result.error_kind.value}):[/] {result.message}")
        return False

    console.print()
    console.print(
        Panel(
            Markdown(result.answer),
            title=f"[bold blue]Legal Assistant ({Query.parse(question).language.value})[/]",
            subtitle=f"[dim]{result.source_count} sources[/]",
            border_style="blue",
        )
    )
    return True


@app.command()
def ask(
    question: str = typer.Argument(..., help="The legal question to ask"),
    language: str | None = typer.Option(None, "--language", "-l", help=LANGUAGE_HELP),
    stream: bool = typer.Option(False, "--stream", "-s", help="Stream the answer as it is generated"),
) -> None:
    """Ask a single legal question."""
    message = with_language(question, language)

    try:
        pipeline = get_pipeline()
        ok = _answer(pipeline, message, stream)
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    if not ok:
        raise typer.Exit(1)


@app.command()
def chat(
    language: str | None = typer.Option(None, "--language", "-l", help=LANGUAGE_HELP),
) -> None:
    """Start an interactive chat session."""
    console.print(
        Panel.fit(
            "[bold blue]Legal Assistant[/]\n"
            "[dim]Answers grounded in the legal document corpus[/]\n\n"
            "Examples:\n"
            "- What are the grounds for divorce?\n"
            "- How do I file an FIR?\n"
            "- [Language: Hindi] What is the process for registering a will?\n\n"
            "[dim]Type 'quit' or 'exit' to leave[/]",
            title="Welcome",
            border_style="blue",
        )
    )

    try:
        pipeline = get_pipeline()
    except Exception as exc:
        handle_cli_error(exc)
        raise typer.Exit(1)

    while True:
        try:
            question = Prompt.ask("\n[bold cyan]You[/]")

            if question.lower() in ("quit", "exit", "q"):
                console.print("[dim]Goodbye![/]")
                break

            if not question.strip():
                continue

            _answer(pipeline, with_language(question, language), stream=False)

        except KeyboardInterrupt:
            console.print("\n[dim]Goodbye![/]")
            break
        except Exception as exc:
            handle_cli_error(exc)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Host to bind"),
    port: int = typer.Option(3001, help="Port to bind"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    console.print(f"[green]Starting API on http://{host}:{port} (docs at /docs)[/]")
    uvicorn.run(
        "legal_assistant.adapters.inbound.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
