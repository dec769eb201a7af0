import json
import logging
import random
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .analysis import validate_seo_configuration
from .config import load_config, ConfigValidationError, EngineConfig
from .content import generate_meta_description, generate_page_title
from .imaging import generate_image_seo_metadata, generate_seo_filename
from .pipeline import extract_keywords, extract_multilingual_keywords
from .schema import KeywordAnalysis, Language
from .text import calculate_reading_time

# Initialize rich console
console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Thuis 3D SEO - multilingual keyword and content optimization",
)


def setup_logging(verbose: bool):
    """Setup logging with rich handler for pretty output."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=verbose)],
    )


def _load(config_path: Optional[str], verbose: bool) -> EngineConfig:
    setup_logging(verbose)
    try:
        return load_config(config_path)
    except (ConfigValidationError, FileNotFoundError) as e:
        err_console.print("[bold red]Configuration Error:[/bold red]")
        for error in getattr(e, "errors", [str(e)]):
            err_console.print(f"  [red]•[/red] {error}")
        raise typer.Exit(code=2)


def _read_text(text: str) -> str:
    """'-' reads the text from stdin."""
    return sys.stdin.read() if text == "-" else text


def display_keywords_table(items: List[KeywordAnalysis], title: str, max_rows: int = 25):
    """Display keywords in a pretty ASCII table."""
    if not items:
        console.print("[yellow]No keywords found.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta", border_style="dim")
    table.add_column("Keyword", style="cyan", no_wrap=False, max_width=40)
    table.add_column("Lang", style="blue")
    table.add_column("Score", justify="right", style="bold green")
    table.add_column("Volume", style="yellow")
    table.add_column("Type", style="white")
    table.add_column("Category", style="green")

    for kw in items[:max_rows]:
        table.add_row(
            kw.keyword,
            kw.language.value if kw.language else "",
            str(kw.relevance_score),
            kw.search_volume.value,
            kw.keyword_type.value,
            kw.semantic_category,
        )

    if len(items) > max_rows:
        table.add_row(f"[dim]... and {len(items) - max_rows} more[/dim]", "", "", "", "", "")

    console.print(table)


def _print_json(data) -> None:
    console.print_json(json.dumps(data, ensure_ascii=False))


@app.command()
def keywords(
    text: str = typer.Argument(..., help="Text to analyse, or '-' for stdin"),
    language: Optional[Language] = typer.Option(None, "--language", "-l", help="es, en or nl"),
    category: Optional[str] = typer.Option(None, "--category", "-c"),
    table_output: bool = typer.Option(False, "--table", help="Display results as a table instead of JSON"),
    config_path: Optional[str] = typer.Option(None, "--config", help="YAML config (default: ./config.yaml if present)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="DEBUG logs to stderr"),
):
    """Extract the top 10 keywords for one language."""
    cfg = _load(config_path, verbose)
    kw_cfg = cfg.get("keywords", {})
    context = {
        "language": language or kw_cfg.get("language"),
        "category": category or kw_cfg.get("category"),
    }
    items = extract_keywords(_read_text(text), context)

    if table_output or cfg.get("output", {}).get("format") == "table":
        display_keywords_table(items, "Keywords", cfg.get("output", {}).get("max_rows", 25))
    else:
        _print_json([kw.to_dict() for kw in items])


@app.command()
def multilingual(
    text: str = typer.Argument(..., help="Text to analyse, or '-' for stdin"),
    category: Optional[str] = typer.Option(None, "--category", "-c"),
    only: Optional[Language] = typer.Option(None, "--only", help="Show a single language list"),
    table_output: bool = typer.Option(False, "--table", help="Display results as tables instead of JSON"),
    config_path: Optional[str] = typer.Option(None, "--config"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Generate Dutch, English and Spanish keywords for the Belgian market."""
    cfg = _load(config_path, verbose)
    result = extract_multilingual_keywords(
        _read_text(text),
        {"category": category or cfg.get("keywords", {}).get("category")},
    )
    languages = [only] if only else Language.priority_order()

    if table_output or cfg.get("output", {}).get("format") == "table":
        max_rows = cfg.get("output", {}).get("max_rows", 25)
        for lang in languages:
            display_keywords_table(result.for_language(lang), f"Keywords ({lang.value})", max_rows)
    elif only:
        _print_json([kw.to_dict() for kw in result.for_language(only)])
    else:
        _print_json(result.to_dict())


@app.command()
def meta(
    content: str = typer.Argument(..., help="Page content (HTML allowed), or '-' for stdin"),
    title: str = typer.Option("", "--title", "-t"),
    keyword: List[str] = typer.Option([], "--keyword", "-k", help="Target keyword (repeatable)"),
    max_length: Optional[int] = typer.Option(None, "--max-length"),
    no_cta: bool = typer.Option(False, "--no-cta", help="Never append a call-to-action"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the call-to-action choice"),
    config_path: Optional[str] = typer.Option(None, "--config"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Generate a meta description."""
    cfg = _load(config_path, verbose)
    meta_cfg = cfg.get("meta", {})
    seed = seed if seed is not None else meta_cfg.get("seed")

    result = generate_meta_description(
        title,
        _read_text(content),
        max_length=max_length or meta_cfg.get("max_length", 160),
        keywords=keyword,
        include_call_to_action=not no_cta and meta_cfg.get("include_call_to_action", True),
        rng=random.Random(seed) if seed is not None else None,
    )
    _print_json(result.to_dict())


@app.command()
def title(
    base_title: str = typer.Argument(..., help="Page title"),
    keyword: Optional[str] = typer.Option(None, "--keyword", "-k", help="Keyword to prefix if missing"),
    suffix: Optional[str] = typer.Option(None, "--suffix"),
    max_length: Optional[int] = typer.Option(None, "--max-length"),
    config_path: Optional[str] = typer.Option(None, "--config"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Generate an SEO page title with brand suffix."""
    cfg = _load(config_path, verbose)
    title_cfg = cfg.get("title", {})
    typer.echo(
        generate_page_title(
            base_title,
            suffix=suffix if suffix is not None else title_cfg.get("suffix"),
            max_length=max_length or title_cfg.get("max_length", 60),
            include_keyword=keyword,
        )
    )


@app.command()
def validate(
    title: Optional[str] = typer.Option(None, "--title"),
    description: Optional[str] = typer.Option(None, "--description"),
    keywords: Optional[str] = typer.Option(None, "--keywords", help="Comma-separated keywords"),
    canonical_url: Optional[str] = typer.Option(None, "--canonical-url"),
    og_image: Optional[str] = typer.Option(None, "--og-image"),
    config_path: Optional[str] = typer.Option(None, "--config"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """
    Score an SEO configuration and list recommendations.

    Exits with code 1 when the configuration scores below 70.
    """
    _load(config_path, verbose)
    kw_list = [k.strip() for k in keywords.split(",") if k.strip()] if keywords else None
    result = validate_seo_configuration({
        "title": title,
        "description": description,
        "keywords": kw_list,
        "canonical_url": canonical_url,
        "og_image": og_image,
    })
    _print_json(result.to_dict())
    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command("image-meta")
def image_meta(
    product_name: str = typer.Argument(..., help="Product name"),
    index: int = typer.Option(0, "--index", "-i", help="Image position in the gallery"),
    extension: str = typer.Option("jpg", "--extension", "-e", help="Image file extension"),
    seed: Optional[int] = typer.Option(None, "--seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Generate multilingual image titles, alt texts and an SEO filename."""
    setup_logging(verbose)
    rng = random.Random(seed) if seed is not None else None
    _print_json({
        "filename": generate_seo_filename(product_name, index, extension),
        "metadata": generate_image_seo_metadata(product_name, index, rng=rng),
    })


@app.command("reading-time")
def reading_time(
    content: str = typer.Argument(..., help="Article content (HTML allowed), or '-' for stdin"),
    words_per_minute: int = typer.Option(200, "--wpm", help="Reading speed"),
):
    """Estimate the reading time of an article in minutes."""
    typer.echo(calculate_reading_time(_read_text(content), words_per_minute))
