"""Command-line interface for Voice Analyzer."""

import logging
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from voice_analyzer import __version__
from voice_analyzer.errors import VoiceAnalyzerError

console = Console()

ANALYSIS_TYPES = ["full", "quick", "vocabulary", "syntax"]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def resolve_corpus_path(corpus_name: str, corpus_dir: str | None) -> Path:
    from voice_analyzer.config import get_settings

    if corpus_dir:
        return Path(corpus_dir) / corpus_name
    return get_settings().corpus_path(corpus_name)


class VoiceAnalyzerGroup(click.Group):
    """Command group that turns library errors into a red message and exit status 1."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except VoiceAnalyzerError as e:
            console.print(f"[red]Error:[/red] {e}")
            ctx.exit(1)


@click.group(cls=VoiceAnalyzerGroup)
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool) -> None:
    """Voice Analyzer - Derive an author's voice fingerprint from their articles."""
    from voice_analyzer.config import get_settings

    configure_logging("DEBUG" if verbose else get_settings().log_level)


@main.command()
@click.argument("corpus_name")
@click.option("--corpus-dir", "-d", type=click.Path(), help="Directory holding corpora")
@click.option(
    "--type", "-t", "analysis_type",
    type=click.Choice(ANALYSIS_TYPES), default="full", show_default=True,
    help="Which analyzers to run",
)
def analyze(corpus_name: str, corpus_dir: str | None, analysis_type: str) -> None:
    """Analyze a collected corpus and write its reports.

    Example:
        voice-analyzer analyze my-blog --type quick
    """
    from voice_analyzer.pipeline import CorpusAnalyzer

    console.print(f"[bold]Analyzing corpus:[/bold] {corpus_name}")
    console.print(f"[dim]Analysis type: {analysis_type}[/dim]\n")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Loading...", total=None)

        def update_progress(p):
            progress.update(task, completed=p.current, total=p.total, description=p.message)

        analyzer = CorpusAnalyzer(progress_callback=update_progress)
        result = analyzer.analyze_corpus(
            corpus_name,
            corpus_dir=Path(corpus_dir) if corpus_dir else None,
            analysis_type=analysis_type,
        )

    console.print("\n[bold green]✓ Analysis complete![/bold green]\n")

    table = Table(title="Files Written")
    table.add_column("File", style="cyan")
    for name in result.files:
        table.add_row(name)
    console.print(table)
    console.print(f"\n[dim]Output: {result.analysis_path}[/dim]")


@main.command()
@click.argument("corpus_name")
@click.option("--corpus-dir", "-d", type=click.Path(), help="Directory holding corpora")
@click.option("--output", "-o", type=click.Path(), help="Output file (default: writing_style_<corpus>.md)")
def guide(corpus_name: str, corpus_dir: str | None, output: str | None) -> None:
    """Generate a Markdown style guide from a corpus's reports."""
    from voice_analyzer.config import get_settings
    from voice_analyzer.guide import StyleGuideGenerator

    settings = get_settings()
    analysis_path = resolve_corpus_path(corpus_name, corpus_dir) / settings.analysis_dirname

    generator = StyleGuideGenerator(analysis_path, corpus_name, settings=settings)
    with console.status("Generating style guide..."):
        path = generator.write(Path(output) if output else None)

    console.print(f"[green]✓[/green] Style guide saved to {path}")


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def score(path: str) -> None:
    """Score how natural (non-mechanical) one text file reads."""
    from voice_analyzer.analyzers import anti_mechanical, clustering
    from voice_analyzer.config import get_settings

    thresholds = get_settings().thresholds
    text = Path(path).read_text(encoding="utf-8")

    report = anti_mechanical.analyze(text, thresholds)
    clusters = clustering.analyze(text, thresholds).sentence_length_clusters
    naturalness = report.naturalness

    table = Table(title=f"Naturalness: {Path(path).name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Sentence variation", f"{naturalness.sentence_variation_score}/25")
    table.add_row("Paragraph variation", f"{naturalness.paragraph_variation_score}/25")
    table.add_row("First-person distribution", f"{naturalness.first_person_score}/25")
    table.add_row("Repetition", f"{naturalness.repetition_score}/25")
    table.add_row("Total", f"[bold]{naturalness.total_score}/100[/bold]")
    table.add_row("Interpretation", naturalness.interpretation)
    table.add_row("Burstiness", f"{clusters.burstiness:.3f}")
    table.add_row(
        "Sentence length CV",
        f"{report.sentence_length_variation.coefficient_of_variation:.2f}",
    )

    console.print(table)
    console.print(f"\n[dim]{clusters.guidance}[/dim]")


@main.command()
@click.argument("corpus_name")
@click.argument("report_name")
@click.option("--corpus-dir", "-d", type=click.Path(), help="Directory holding corpora")
def show(corpus_name: str, report_name: str, corpus_dir: str | None) -> None:
    """Pretty-print one stored report, e.g. `show my-blog punctuation`."""
    from voice_analyzer.analyzers import report_type
    from voice_analyzer.config import get_settings
    from voice_analyzer.guide import load_report

    analysis_path = resolve_corpus_path(corpus_name, corpus_dir) / get_settings().analysis_dirname
    report = load_report(analysis_path, report_type(report_name))
    console.print_json(report.to_json())


@main.command()
@click.argument("corpus_name")
@click.option("--corpus-dir", "-d", type=click.Path(), help="Directory holding corpora")
def index(corpus_name: str, corpus_dir: str | None) -> None:
    """Write corpus.json metadata for a directory of collected articles."""
    from voice_analyzer.config import get_settings
    from voice_analyzer.corpus import load_corpus, write_corpus_metadata

    corpus_path = resolve_corpus_path(corpus_name, corpus_dir)
    corpus = load_corpus(corpus_name, corpus_path, get_settings().articles_dirname)
    path = write_corpus_metadata(corpus, corpus_path, created=datetime.now().isoformat())

    console.print(
        f"[green]✓[/green] Indexed {len(corpus.articles)} articles "
        f"({sum(a.word_count for a in corpus.articles):,} words) to {path}"
    )


if __name__ == "__main__":
    main()
