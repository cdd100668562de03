"""Console formatting utilities using rich."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from betfair import EventResult, EventTypeResult, MarketBook, MarketCatalogue
from betfair.enums import label as enum_label

console = Console()


def header(text: str) -> None:
    """Print a main header."""
    console.print()
    console.print(f"[bold cyan]{text}[/bold cyan]")
    console.print("=" * 60)


def section(text: str) -> None:
    """Print a section header."""
    console.print()
    console.print("-" * 60)
    console.print(f"[bold]{text}[/bold]")
    console.print("-" * 60)


def info(label: str, value: str) -> None:
    """Print a labeled info line."""
    console.print(f"[green]✓[/green] {label}: {value}")


def event_types_table(results: list[EventTypeResult]) -> Table:
    table = Table(title="Event Types")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Markets", style="magenta", justify="right")

    for r in results:
        et = r.event_type
        table.add_row(et.id if et else "?", et.name if et else "?", str(r.market_count or 0))
    return table


def events_table(results: list[EventResult]) -> Table:
    table = Table(title="Events")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="bold", max_width=40)
    table.add_column("Country", justify="center")
    table.add_column("Opens", style="yellow")
    table.add_column("Markets", style="magenta", justify="right")

    for r in results:
        e = r.event
        if e is None:
            continue
        opens = f"{e.open_date:%Y-%m-%d %H:%M}" if e.open_date else "N/A"
        table.add_row(e.id, e.name, e.country_code or "-", opens, str(r.market_count or 0))
    return table


def catalogue_table(markets: list[MarketCatalogue]) -> Table:
    table = Table(title="Market Catalogue", show_lines=True)
    table.add_column("Market ID", style="cyan")
    table.add_column("Market", style="bold", max_width=35)
    table.add_column("Event", max_width=30)
    table.add_column("Starts", style="yellow")
    table.add_column("Matched", style="green", justify="right")
    table.add_column("Runners", justify="right")

    for m in markets:
        starts = f"{m.market_start_time:%Y-%m-%d %H:%M}" if m.market_start_time else "N/A"
        table.add_row(
            m.market_id,
            m.market_name,
            m.event.name if m.event else "-",
            starts,
            f"{m.total_matched or 0:,.2f}",
            str(len(m.runners)),
        )
    return table


def market_book_table(book: MarketBook) -> Table:
    """Best back/lay per runner of a market book."""
    table = Table(title=f"📖 {book.market_id} ({enum_label(book.status)})")
    table.add_column("Selection", style="cyan", justify="right")
    table.add_column("Status")
    table.add_column("Back", style="blue", justify="right")
    table.add_column("Lay", style="red", justify="right")
    table.add_column("Last", style="yellow", justify="right")
    table.add_column("Matched", style="green", justify="right")

    for r in book.runners:
        back = r.best_back()
        lay = r.best_lay()
        table.add_row(
            str(r.selection_id),
            enum_label(r.status, "-"),
            str(back) if back else "-",
            str(lay) if lay else "-",
            f"{r.last_price_traded:.2f}" if r.last_price_traded else "-",
            f"{r.total_matched or 0:,.2f}",
        )
    return table


def usage_panel() -> None:
    """Print the usage information in a panel."""
    usage_text = """[bold]Discovery[/bold]
client.list_event_types(filter)           # Sports
client.list_competitions(filter)          # Competitions
client.list_countries(filter)             # Country codes
client.list_events(filter)                # Events
client.list_market_types(filter)          # Market type codes

[bold]Market data[/bold]
client.list_market_catalogue(filter, max_results, projections)
client.list_market_book(market_ids, projections)"""

    console.print()
    panel = Panel(usage_text, title="[bold]📚 USAGE[/bold]", border_style="cyan")
    console.print(panel)
