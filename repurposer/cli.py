"""Command-line interface for the Transcript Repurposer."""

import json
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from repurposer import __version__
from repurposer.config import configure_logging, get_settings
from repurposer.errors import AllProvidersFailedError, NoProvidersConfiguredError
from repurposer.llm import create_configured_providers
from repurposer.models import GenerationRequest, GenerationResponse, Platform, validation_message
from repurposer.pipeline import GenerationPipeline
from repurposer.prompting import PLATFORM_PROFILES

app = typer.Typer(
    name="repurposer",
    help="Transcript Repurposer - Turn video transcripts into platform-ready content",
    add_completion=False,
)
console = Console()


@app.command()
def generate(
    transcript_path: Path = typer.Argument(
        ...,
        help="Path to a plain-text transcript file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    platform: Platform = typer.Option(
        Platform.YOUTUBE,
        "--platform",
        "-p",
        help="Target platform",
    ),
    duration: str = typer.Option(
        None,
        "--duration",
        "-d",
        help="Video duration as MM:SS (enables YouTube timestamps)",
    ),
    keyword: list[str] = typer.Option(
        None,
        "--keyword",
        "-k",
        help="Focus keyword (repeat up to 3 times)",
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON response to this file instead of printing fields",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Generate content for one platform from a transcript file."""
    settings = get_settings()
    configure_logging("DEBUG" if verbose else "WARNING", json=settings.log_json)

    try:
        request = GenerationRequest(
            transcript=transcript_path.read_text(encoding="utf-8"),
            platform=platform,
            duration_hint=duration,
            keywords=keyword,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid input:[/red] {validation_message(e)}")
        sys.exit(1)

    try:
        pipeline = GenerationPipeline.from_settings(settings)
    except NoProvidersConfiguredError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        console.print("[dim]Set GOOGLE_GEMINI_API_KEY and/or ANTHROPIC_API_KEY, or OLLAMA_ENABLED=true.[/dim]")
        sys.exit(1)

    console.print(f"[dim]Generating {platform.value} content...[/dim]")

    try:
        response = pipeline.run(request)
    except AllProvidersFailedError as e:
        console.print(f"\n[red]Content generation failed:[/red] {e}")
        sys.exit(1)

    if output is not None:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(response.to_payload(), f, indent=2, ensure_ascii=False)
        console.print(f"[green]Response saved to:[/green] {output}")
        return

    _display_response(response)


@app.command()
def platforms() -> None:
    """List supported platforms and the section markers they use."""
    table = Table(title="Supported Platforms")
    table.add_column("Platform", style="bold")
    table.add_column("Name")
    table.add_column("Sections")
    table.add_column("Options", style="dim")

    for profile in PLATFORM_PROFILES.values():
        options = []
        if profile.uses_duration:
            options.append("duration")
        if profile.uses_keywords:
            options.append("keywords")
        table.add_row(
            profile.platform.value,
            profile.display_name,
            ", ".join(section.marker for section in profile.sections),
            ", ".join(options) or "-",
        )

    console.print(table)


@app.command()
def info() -> None:
    """Display system information and configured providers."""
    settings = get_settings()
    configure_logging("WARNING", json=settings.log_json)

    console.print(
        Panel.fit(
            "[bold blue]Transcript Repurposer[/bold blue]",
            border_style="blue",
        )
    )

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("Version", __version__)
    table.add_row("Temperature", str(settings.llm_temperature))
    table.add_row("Request Timeout", f"{settings.llm_request_timeout}s")

    providers = create_configured_providers(settings)
    if providers:
        for position, provider in enumerate(providers, 1):
            table.add_row(f"Provider {position}", f"{provider.name}: {', '.join(provider.models)}")
    else:
        table.add_row("Providers", "[red]none configured[/red]")

    console.print(table)


def _display_response(response: GenerationResponse) -> None:
    """Display the extracted fields of a response.

    Args:
        response: The generated response.
    """
    for name, value in response.content.model_dump().items():
        if isinstance(value, list):
            value = "\n".join(f"- {item}" for item in value)
        console.print(
            Panel(
                Text(value) if value else Text("(empty)", style="dim"),
                title=name.replace("_", " ").title(),
                title_align="left",
                border_style="blue",
            )
        )

    notes = f"Model: {response.model_used}"
    if response.transcript_cleaned:
        notes += " | trailing character removed from transcript"
    console.print(f"[dim]{notes}[/dim]")


if __name__ == "__main__":
    app()
