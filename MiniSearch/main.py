import argparse
import logging
import sys
import time
from typing import List, Optional

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from MiniSearch.config import load_config
from MiniSearch.corpus import load_corpus
from MiniSearch.cosine_search.query_engine import QueryEngine, SearchResult
from MiniSearch.errors import MiniSearchError
from MiniSearch.log import console, setup_logging
from MiniSearch.preprocessing.document import Document
from MiniSearch.storage.chained_table import BucketStats
from MiniSearch.storage.document_store import DocumentStore

logger = logging.getLogger(__name__)


class MiniSearch:
    """
    Unified interface over the document store and the query engine.
    The store is populated once from a corpus and then edited in place.
    """

    def __init__(self, config: Optional[dict] = None):
        self.config = config or load_config()
        self.store = DocumentStore.from_config(self.config)
        self.engine = QueryEngine.from_config(self.store, self.config)

    def load_documents(self, corpus_path: str) -> int:
        """
        Populate the store from a corpus.

        Args:
            corpus_path: JSON file or directory of article files

        Returns:
            Number of articles in the store afterwards

        Raises:
            CorpusError: If the corpus cannot be read
        """
        corpus = load_corpus(corpus_path)
        logger.debug("Populating document store from %s (%d articles)", corpus_path, corpus.count())
        self.store.initialize(corpus.documents())
        return self.store.size()

    def add_article(self, title: str, body: str) -> bool:
        """
        Insert an article.

        Returns:
            False when an article with the same title already exists
        """
        if self.store.member(title):
            return False
        self.store.insert(Document(title, body))
        return True

    def remove_article(self, title: str) -> bool:
        """
        Delete an article.

        Returns:
            False when no article has that title
        """
        if not self.store.member(title):
            return False
        self.store.delete(title)
        return True

    def search(self, query: str, top_k: Optional[int] = None) -> List[SearchResult]:
        return self.engine.search(query, top_k)

    def stats(self) -> BucketStats:
        return self.store.stats()


def display_results(results: List[SearchResult], query: str = "") -> None:
    """Display ranked search results as a table"""
    if not results:
        console.print("[yellow]No articles found![/yellow]")
        return

    timestamp = time.strftime("%H:%M:%S")
    console.print(f"\n[bold cyan]SEARCH RESULTS [dim]({timestamp})[/dim]:[/bold cyan]")

    table = Table(
        box=box.HEAVY_EDGE,
        show_header=True,
        header_style="bold magenta",
        title=f"[bold]Top {len(results)} match(es) for '{escape(query)}'[/bold]" if query
        else f"[bold]Top {len(results)} match(es)[/bold]",
        title_style="yellow"
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", style="cyan bold")
    table.add_column("Score", style="yellow", width=10)
    table.add_column("Content", style="green", no_wrap=False)

    for i, (doc, score) in enumerate(results):
        # Highlight the row for the top match
        row_style = "on blue" if i == 0 else ""

        score_str = f"{score:.4f}"
        if score > 0.7:
            score_display = f"[bold green]{score_str}[/bold green]"
        elif score > 0.4:
            score_display = f"[yellow]{score_str}[/yellow]"
        else:
            score_display = f"[dim]{score_str}[/dim]"

        table.add_row(str(i + 1), escape(doc.title), score_display, escape(doc.snippet()), style=row_style)

    console.print(table)
    console.print("[dim]Tip: Higher scores indicate more relevant results.[/dim]")


def display_stats(stats: BucketStats) -> None:
    """Display the bucket distribution of the document store"""
    table = Table(title="[bold]Document store buckets[/bold]", box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Buckets", str(stats.buckets))
    table.add_row("Articles", str(stats.size))
    table.add_row("Shortest chain", str(stats.min_length))
    table.add_row("Longest chain", str(stats.max_length))
    table.add_row("Mean chain length", f"{stats.mean:.4f}")
    table.add_row("Standard deviation", f"{stats.stdev:.4f}")
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='MiniSearch - cosine similarity search over an article collection'
    )
    parser.add_argument('--documents', required=True,
                        help='Path to a documents JSON file or a directory of article files')
    parser.add_argument('--query', help='Query string to search for')
    parser.add_argument('--top', type=int, default=None,
                        help='Number of top results to display (default from config)')
    parser.add_argument('--config', help='Path to a JSON config file')
    parser.add_argument('--stats', action='store_true',
                        help='Show hash bucket statistics for the document store')
    parser.add_argument('--interactive', action='store_true',
                        help='Run in interactive mode')
    parser.add_argument('--verbose', action='store_true',
                        help='Show debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.top is not None and args.top < 1:
        parser.error("--top must be at least 1")

    try:
        config = load_config(args.config)
        setup_logging("DEBUG" if args.verbose else config.get("logging", {}).get("level", "WARNING"))

        retriever = MiniSearch(config)
        count = retriever.load_documents(args.documents)
    except MiniSearchError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return 1

    console.print(f"[green]Loaded [bold]{count}[/bold] articles[/green]")

    if args.interactive:
        # cli_app imports the display helpers from this module
        from MiniSearch.cli_app import MiniSearchCLI
        MiniSearchCLI(retriever).interactive_mode()
        return 0

    if args.stats:
        display_stats(retriever.stats())

    if args.query:
        console.rule("[bold yellow]Query Search[/bold yellow]", style="yellow")
        display_results(retriever.search(args.query, args.top), args.query)
    elif not args.stats:
        console.print(Panel("Nothing to do: pass --query, --stats or --interactive",
                            border_style="yellow"))

    return 0


if __name__ == "__main__":
    sys.exit(main())
