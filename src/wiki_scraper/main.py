from typing import Optional

import typer

from wiki_scraper.analysis import analyze_page
from wiki_scraper.config import ScraperConfig
from wiki_scraper.exceptions import WikiScraperException
from wiki_scraper.logging_config import setup_logging
from wiki_scraper.models import AnalysisStatus
from wiki_scraper.text.word_count import top_n_entries, format_entries
from wiki_scraper.walker import FirstLinkWalker
from wiki_scraper.wikipedia import LiveRestWikiService, SoupPageExtractor


app = typer.Typer(help="Word analysis and first-link walks over Wikipedia articles.")


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Log level (DEBUG, INFO, WARNING, ERROR).",
    ),
):
    setup_logging(level=log_level)


@app.command()
def analysis(
    title: str = typer.Argument(..., help="Title of the article to analyse."),
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=0,
        help="Number of ranked words to print (default: all).",
    ),
):
    """
    Count the words of an article, most frequent first.
    """
    config = ScraperConfig()
    try:
        with LiveRestWikiService(config) as service:
            result = analyze_page(title, service, SoupPageExtractor())
    except WikiScraperException as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    if result.status == AnalysisStatus.PAGE_NOT_FOUND:
        typer.echo(f"Page {result.title} nonexistent!")
        raise typer.Exit(code=1)

    for line in format_entries(top_n_entries(result.statistics, count)):
        typer.echo(line)


@app.command("first-link")
def first_link(
    start: str = typer.Argument(..., help="Title of the article to start from."),
    end: Optional[str] = typer.Argument(None, help="Title of the target article (default: Philosophy)."),
    max_steps: Optional[int] = typer.Option(
        None,
        "--max-steps",
        "-s",
        min=1,
        help="The maximum number of links to follow (default: 500).",
    ),
):
    """
    Follow the first link of each article until END is reached.
    """
    overrides = {"max_steps": max_steps} if max_steps is not None else {}
    config = ScraperConfig(**overrides)
    typer.echo(">> Following first wikilinks of each page")
    try:
        with LiveRestWikiService(config) as service:
            walker = FirstLinkWalker(service, SoupPageExtractor(), config)
            result = walker.walk(start, end)
    except WikiScraperException as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    if result.path:
        typer.echo(" -> ".join(result.path))
    typer.echo(result.describe())


if __name__ == "__main__":
    app()
