"""
Command-line interface for SEO Text Analyzer.

Provides a CLI for analyzing a text file or literal text and previewing
keyword insertion.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .analyzer import MissingTextError, analyze_text
from .config import AnalyzerConfig
from .grading import (
    KEYWORD_USAGE_TIPS,
    content_length_label,
    density_class,
    readability_label,
    score_class,
)
from .inserter import insert_keyword
from .models import AnalysisResult
from .oracle import TextRazorClient

console = Console()

_SCORE_STYLES = {
    "excellent": "bold green",
    "good": "green",
    "average": "yellow",
    "poor": "red",
}


@click.command()
@click.argument(
    "source",
    type=click.Path(allow_dash=True, dir_okay=False, path_type=Path),
    required=False,
)
@click.option(
    "--text",
    "-t",
    type=str,
    help="Analyze this text instead of reading SOURCE.",
)
@click.option(
    "--api-key",
    type=str,
    envvar="TEXTRAZOR_API_KEY",
    help="TextRazor API key. Can also be set via TEXTRAZOR_API_KEY env var.",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Extraction request timeout in seconds (default: 10).",
)
@click.option(
    "--offline",
    is_flag=True,
    default=False,
    help="Skip keyword extraction and use the fallback keyword set.",
)
@click.option(
    "--insert",
    "insert_keywords",
    multiple=True,
    help="Keyword to insert into the preview text. May be repeated.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the raw analysis result as JSON.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(
    source: Optional[Path],
    text: Optional[str],
    api_key: Optional[str],
    timeout: Optional[float],
    offline: bool,
    insert_keywords: tuple[str, ...],
    as_json: bool,
    verbose: bool,
) -> None:
    """
    SEO Text Analyzer - Keyword and readability feedback for a draft.

    Reads text from SOURCE (a file path, or - for stdin) or from --text,
    extracts ranked keywords with TextRazor and prints readability, keyword
    density, word count and improvement tips.

    Examples:

        seo-analyze draft.txt

        seo-analyze --text "Your text here." --offline

        cat draft.txt | seo-analyze - --insert "content marketing"
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if source and text:
        console.print("[red]Error:[/red] Provide only one of SOURCE or --text")
        sys.exit(1)

    try:
        content = text if text is not None else _read_source(source)
    except OSError as e:
        console.print(f"[red]Could not read input:[/red] {e}")
        sys.exit(1)

    try:
        config = AnalyzerConfig.from_env(api_key=api_key, timeout=timeout)
    except ValueError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    oracle = None
    if not offline:
        if config.has_api_key:
            oracle = TextRazorClient(config=config)
        elif not as_json:
            console.print("[yellow]No TextRazor API key set, using offline analysis.[/yellow]")

    try:
        result = analyze_text(content, oracle=oracle, config=config)
    except MissingTextError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    preview = content
    for keyword in insert_keywords:
        preview = insert_keyword(preview, keyword)

    if as_json:
        output = result.to_dict()
        if insert_keywords:
            output["preview"] = preview
        click.echo(json.dumps(output, indent=2))
        return

    console.print(Panel.fit(
        "[bold blue]SEO Text Analyzer[/bold blue]\n"
        "Keyword and readability feedback for your content",
        border_style="blue",
    ))
    _display_result(result, verbose)

    if insert_keywords:
        console.print(Panel(escape(preview), title="Optimized Text Preview", border_style="green"))


def _read_source(source: Optional[Path]) -> str:
    if source is None or str(source) == "-":
        return sys.stdin.read()
    return source.read_text(encoding="utf-8")


def _display_result(result: AnalysisResult, verbose: bool) -> None:
    """Display keyword and metric tables plus tips."""
    report = result.analysis

    kw_table = Table(title="Recommended Keywords", show_header=True)
    kw_table.add_column("Keyword", style="green")
    kw_table.add_column("Relevance", justify="right", style="cyan")
    for kw in result.keywords:
        kw_table.add_row(escape(kw.text), f"{kw.relevance}%")
    if not result.keywords:
        kw_table.add_row("[dim]No keywords available[/dim]", "")
    console.print(kw_table)

    grade = score_class(report.readability_score)
    density_style = "green" if density_class(report.keyword_density) == "good" else "yellow"

    metrics_table = Table(title="SEO Analysis Results", show_header=True)
    metrics_table.add_column("Metric", style="cyan")
    metrics_table.add_column("Value", justify="right")
    metrics_table.add_column("Assessment")
    metrics_table.add_row(
        "Readability Score",
        f"[{_SCORE_STYLES[grade]}]{report.readability_score}[/]",
        readability_label(report.readability_score),
    )
    metrics_table.add_row(
        "Keyword Density",
        f"[{density_style}]{report.keyword_density}%[/]",
        "",
    )
    metrics_table.add_row(
        "Content Length",
        f"{report.word_count} words",
        content_length_label(report.word_count),
    )
    console.print(metrics_table)

    console.print("\n[bold]Optimization Tips[/bold]")
    for tip in report.improvement_tips:
        console.print(f"  - {tip}")

    if verbose:
        console.print("\n[dim]Keyword Usage Tips[/dim]")
        for tip in KEYWORD_USAGE_TIPS:
            console.print(f"[dim]  - {tip}[/dim]")


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
