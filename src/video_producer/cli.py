"""Command-line interface using Typer."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from video_producer import __version__
from video_producer.config import settings
from video_producer.domain.models import VideoProduction, VisualPlan
from video_producer.logging import setup_logging

# Setup logging
setup_logging()

app = typer.Typer(
    name="video-producer",
    help="AI Video Producer - brief-to-video production CLI",
    add_completion=False,
)

console = Console()

LOG_STYLES = {
    "decision": "blue",
    "generation": "magenta",
    "evaluation": "cyan",
    "success": "green",
    "error": "bold red",
    "fallback": "yellow",
    "warning": "yellow",
    "info": "dim",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"AI Video Producer v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """AI Video Producer - Turn a script or product brief into a finished video."""
    pass


def _read_text(value: Optional[str], path: Optional[Path]) -> str:
    if path is not None:
        return path.read_text(encoding="utf-8")
    return value or ""


def _show_plan(plan: VisualPlan) -> None:
    table = Table(title="Visual Plan")
    table.add_column("Section", style="cyan")
    table.add_column("Script")
    table.add_column("Selected visual", style="green")
    table.add_column("Alternatives", justify="right")

    for section in plan.sections:
        table.add_row(
            section.name,
            section.script_content[:60],
            section.visual_direction[:60],
            str(len(section.alternatives)),
        )
    console.print(table)
    if plan.director_notes:
        console.print(f"[dim]Director notes: {plan.director_notes}[/dim]")


def _show_production(production: VideoProduction) -> None:
    table = Table(title="Phases")
    table.add_column("Phase", style="cyan")
    table.add_column("Status")
    table.add_column("Progress", justify="right")

    for phase in production.phases:
        table.add_row(phase.name, str(phase.status), f"{phase.progress}%")
    console.print(table)

    summary = (
        f"[cyan]Production:[/cyan] {production.id}\n"
        f"[cyan]Status:[/cyan] {production.status}\n"
        f"[cyan]Assets:[/cyan] {len(production.assets)}\n"
        f"[cyan]Overall score:[/cyan] {production.overall_score if production.overall_score is not None else 'n/a'}"
    )
    if production.output_url:
        summary += f"\n[cyan]Output:[/cyan] {production.output_url}"
    console.print(Panel.fit(summary, title=production.title, border_style="cyan"))


@app.command()
def produce(
    title: str = typer.Option(..., "--title", "-t", help="Video title"),
    script: Optional[str] = typer.Option(None, "--script", "-s", help="Narration script"),
    script_file: Optional[Path] = typer.Option(None, "--script-file", help="Read the script from a file"),
    visuals_file: Optional[Path] = typer.Option(
        None, "--visuals-file", help="Visual directions, one per line"
    ),
    product_description: Optional[str] = typer.Option(
        None, "--product", "-p", help="Product description (product mode, script is written for you)"
    ),
    voice_style: str = typer.Option(settings.default_voice_style, "--voice-style", help="Voice style"),
    voice_gender: str = typer.Option(settings.default_voice_gender, "--voice-gender", help="Voice gender"),
    voice_id: Optional[str] = typer.Option(None, "--voice-id", help="Explicit provider voice ID"),
    music: str = typer.Option(settings.default_music_mood, "--music", "-m", help="Music mood (or 'none')"),
    duration: int = typer.Option(60, "--duration", "-d", help="Target duration in seconds"),
    suggest: bool = typer.Option(
        False, "--suggest-visuals", help="Review AI-suggested visuals before producing"
    ),
    download: bool = typer.Option(False, "--download", help="Download the finished video"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Download destination"),
) -> None:
    """Produce a video from a script or a product description."""
    from video_producer.adapters.assembler import DownloadResult
    from video_producer.adapters.script import VisualSuggestionRequest
    from video_producer.domain import (
        MusicMood,
        ProducerMode,
        ProductBrief,
        ProductionBrief,
        ProductionStatus,
        VisualPlanReview,
        VoiceGender,
        VoiceStyle,
    )
    from video_producer.domain.visual_plan import approve, receive_suggestions
    from video_producer.services.producer import ProducerService

    try:
        options = {
            "voice_style": VoiceStyle(voice_style),
            "voice_gender": VoiceGender(voice_gender),
            "voice_id": voice_id,
            "music_mood": MusicMood(music),
        }
    except ValueError as e:
        console.print(f"[bold red]Invalid option: {e}[/bold red]")
        raise typer.Exit(code=1)

    text = _read_text(script, script_file)
    if product_description:
        brief = ProductionBrief.from_product(
            ProductBrief(product_name=title, product_description=product_description),
            video_duration=duration,
            **options,
        )
    elif text.strip():
        brief = ProductionBrief(
            title=title,
            script=text,
            visual_directions=_read_text(None, visuals_file),
            video_duration=duration,
            **options,
        )
    else:
        console.print("[bold red]Provide --script, --script-file or --product[/bold red]")
        raise typer.Exit(code=1)

    producer = ProducerService()
    printed = 0

    def on_update(production: VideoProduction) -> None:
        nonlocal printed
        for log in production.logs[printed:]:
            style = LOG_STYLES.get(str(log.type), "")
            console.print(f"[{style}]\\[{log.phase}] {escape(log.message)}[/{style}]")
        printed = len(production.logs)

    review = None
    if suggest and brief.mode == ProducerMode.SCRIPT:
        result = asyncio.run(
            producer.suggest_visuals(
                VisualSuggestionRequest(script=brief.script, title=brief.title, style=brief.style)
            )
        )
        if not result.success or result.visual_plan is None:
            console.print(f"[bold red]Visual suggestions failed: {result.error_message}[/bold red]")
            raise typer.Exit(code=1)
        review = receive_suggestions(VisualPlanReview(), result.visual_plan)
        _show_plan(result.visual_plan)
        if not typer.confirm("Approve this visual plan?", default=True):
            console.print("[yellow]Plan not approved; production not started.[/yellow]")
            raise typer.Exit(code=1)
        review = approve(review)

    async def _run() -> tuple[VideoProduction, DownloadResult | None]:
        production = await producer.run(brief, plan_review=review, on_update=on_update)
        dl = None
        if download and production.status == ProductionStatus.COMPLETED:
            dl = await producer.download(production, brief, output)
        return production, dl

    console.print(f"[bold blue]Producing '{title}'...[/bold blue]")
    production, dl = asyncio.run(_run())
    _show_production(production)

    if dl is not None:
        if dl.success:
            console.print(f"[green]Saved to {dl.output_path} ({dl.file_size_bytes} bytes)[/green]")
        else:
            console.print(f"[bold red]Download failed: {dl.error_message}[/bold red]")

    if production.status != ProductionStatus.COMPLETED:
        raise typer.Exit(code=1)


@app.command()
def script(
    topic: str = typer.Argument(..., help="What the video is about"),
    keywords: str = typer.Option("", "--keywords", "-k", help="Comma-separated keywords"),
    duration: int = typer.Option(60, "--duration", "-d", help="Target duration in seconds"),
    style: str = typer.Option("professional", "--style", help="Writing style"),
    audience: str = typer.Option("General audience", "--audience", "-a", help="Target audience"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the script to a file"),
) -> None:
    """Generate a narration script for a topic."""
    from video_producer.adapters.script import ScriptRequest
    from video_producer.services.producer import ProducerService

    request = ScriptRequest(
        topic=topic,
        keywords=keywords,
        duration_seconds=duration,
        style=style,
        target_audience=audience,
    )
    result = asyncio.run(ProducerService().generate_script(request))
    if not result.success or not result.script:
        console.print(f"[bold red]Script generation failed: {result.error_message}[/bold red]")
        raise typer.Exit(code=1)

    console.print(Panel(result.script, title=topic, border_style="green"))
    if output is not None:
        output.write_text(result.script, encoding="utf-8")
        console.print(f"[dim]Saved to {output}[/dim]")


@app.command()
def visuals(
    script_file: Path = typer.Argument(..., help="Script file to plan visuals for"),
    title: str = typer.Option("", "--title", "-t", help="Video title"),
    style: str = typer.Option("professional", "--style", help="Visual style"),
    platform: str = typer.Option("youtube", "--platform", help="Target platform"),
) -> None:
    """Suggest visuals for each section of a script."""
    from video_producer.adapters.script import VisualSuggestionRequest
    from video_producer.services.producer import ProducerService

    request = VisualSuggestionRequest(
        script=script_file.read_text(encoding="utf-8"),
        title=title,
        style=style,
        platform=platform,
    )
    result = asyncio.run(ProducerService().suggest_visuals(request))
    if not result.success or result.visual_plan is None:
        console.print(f"[bold red]Visual suggestions failed: {result.error_message}[/bold red]")
        raise typer.Exit(code=1)

    _show_plan(result.visual_plan)


@app.command("download")
def download_video(
    production_id: str = typer.Argument(..., help="Production ID"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination file"),
) -> None:
    """Download an assembled video by production ID."""
    from video_producer.services.producer import ProducerService, safe_filename

    destination = output or Path(settings.download_dir) / safe_filename(production_id)
    producer = ProducerService()
    result = asyncio.run(producer.providers.assembler.download(production_id, destination))
    if not result.success:
        console.print(f"[bold red]Download failed: {result.error_message}[/bold red]")
        raise typer.Exit(code=1)

    console.print(f"[green]Saved to {result.output_path} ({result.file_size_bytes} bytes)[/green]")


@app.command()
def health() -> None:
    """Check the health of the generation collaborators."""
    from video_producer.services.producer import ProducerService

    components = asyncio.run(ProducerService().health_check())

    table = Table(title="Collaborator Health")
    table.add_column("Component", style="cyan")
    table.add_column("Status")
    for component, healthy in components.items():
        table.add_row(component, "✓" if healthy else "✗")
    console.print(table)

    if all(components.values()):
        console.print("[bold green]All collaborators healthy![/bold green]")
    else:
        console.print("[bold yellow]Some collaborators unhealthy[/bold yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
