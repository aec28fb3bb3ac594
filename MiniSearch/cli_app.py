"""
MiniSearch - interactive menu
Add, remove and search articles from the terminal.
"""

from typing import Callable, Optional

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from MiniSearch.log import console
from MiniSearch.main import MiniSearch, display_results, display_stats


class MiniSearchCLI:
    def __init__(self, retriever: MiniSearch, input_func: Optional[Callable[[str], str]] = None):
        """
        Initialize the interactive menu.

        Args:
            retriever: Loaded MiniSearch instance
            input_func: Prompt function (defaults to console.input)
        """
        self.retriever = retriever
        self.input = input_func or console.input

    def print_header(self):
        """Display the application header"""
        console.print(Panel(
            "[bold blue]MiniSearch[/bold blue] [yellow]Article Search[/yellow]",
            border_style="blue",
            subtitle=f"{self.retriever.store.size()} articles loaded",
            width=80
        ))

    def add_article(self):
        console.rule("[bold cyan]Add an article[/bold cyan]")
        title = self.input("[bold cyan]Enter article title: [/bold cyan]").strip()
        if not title:
            console.print("[bold red]Empty title. Article not added.[/bold red]")
            return

        console.print("You may now enter the body of the article.")
        console.print("Press return two times when you are done.")

        lines = []
        while True:
            line = self.input("")
            if line == "":
                break
            lines.append(line)

        if self.retriever.add_article(title, "\n".join(lines)):
            console.print(f"[green]Added '[bold]{escape(title)}[/bold]'[/green]")
        else:
            console.print(f"[yellow]An article titled '{escape(title)}' already exists[/yellow]")

    def remove_article(self):
        console.rule("[bold cyan]Remove an article[/bold cyan]")
        title = self.input("[bold cyan]Enter article title: [/bold cyan]").strip()

        if self.retriever.remove_article(title):
            console.print(f"[green]Removed '[bold]{escape(title)}[/bold]'[/green]")
        else:
            console.print(f"[yellow]No article titled '{escape(title)}'[/yellow]")

    def search(self):
        console.rule("[bold cyan]Search by search phrase[/bold cyan]")
        phrase = self.input("[bold cyan]Enter search phrase: [/bold cyan]")
        if not phrase.strip():
            console.print("[bold red]Empty query. Please try again.[/bold red]")
            return

        display_results(self.retriever.search(phrase), phrase)

    def interactive_mode(self):
        """Run the menu until the user quits"""
        self.print_header()

        actions = {
            "1": self.add_article,
            "2": self.remove_article,
            "3": self.search,
            "4": lambda: display_stats(self.retriever.stats()),
        }

        while True:
            menu_table = Table(show_header=False, box=box.SIMPLE)
            menu_table.add_column("Option", style="dim")
            menu_table.add_column("Description", style="yellow")

            menu_table.add_row("1", "Add a new article")
            menu_table.add_row("2", "Remove an article")
            menu_table.add_row("3", "Search using search phrase")
            menu_table.add_row("4", "Show table statistics")
            menu_table.add_row("0", "Quit")

            console.print("\n[bold cyan]Available Actions:[/bold cyan]")
            console.print(menu_table)

            try:
                choice = self.input("\n[bold cyan]Enter a selection (1-4, or 0 to quit): [/bold cyan]").strip()
            except (EOFError, KeyboardInterrupt):
                break

            if choice == "0" or choice.lower() == "quit":
                break

            action = actions.get(choice)
            if action is None:
                console.print("[bold red]Invalid choice. Please enter a number between 0 and 4.[/bold red]")
                continue

            try:
                action()
            except (EOFError, KeyboardInterrupt):
                console.print("\n[yellow]Input closed. Leaving MiniSearch.[/yellow]")
                break
