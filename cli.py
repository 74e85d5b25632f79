"""
Diagnostic command-line driver for the Golf Matchup Edge engine.
Loads a saved feed response and golfer roster from JSON files.
"""

import json
import logging
from typing import Any, List

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

try:
    from .config import get_config
    from .edge import edge_label
    from .engine import MatchupEngine
    from .exceptions import MatchupEdgeError
    from .odds import format_american, implied_probability, parse_american
    from .reconciler import display_text, key_of
except ImportError:
    from config import get_config
    from edge import edge_label
    from engine import MatchupEngine
    from exceptions import MatchupEdgeError
    from odds import format_american, implied_probability, parse_american
    from reconciler import display_text, key_of

console = Console()


def _load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_roster(path: str) -> List[Any]:
    data = _load_json(path)
    if isinstance(data, dict):
        data = data.get("golfers", [])
    return data


def _build_engine(feed_path: str, roster_path: str) -> MatchupEngine:
    config = get_config()
    logging.basicConfig(level=config.log_level_value, format="%(message)s")
    for problem in config.validate_config():
        console.print(f"[yellow]Config: {problem}[/]")

    engine = MatchupEngine(config)
    engine.update_roster(_load_roster(roster_path))
    engine.update_feed(_load_json(feed_path))
    return engine


def _odds_text(odds: str) -> str:
    try:
        return format_american(parse_american(odds))
    except MatchupEdgeError:
        return odds


def _header(engine: MatchupEngine) -> None:
    view = engine.view()
    console.print(Panel(
        f"[bold]{view.event_name or 'Unknown event'}[/]\n"
        f"Market: {view.market or '-'}\n"
        f"Last Updated: {view.last_updated or '-'}",
        title="Matchups",
        border_style="cyan"
    ))
    if view.status:
        console.print(f"[yellow]{view.status}[/]")


@click.group()
@click.version_option(version="1.0.0", prog_name="Golf Matchup Edge")
def cli():
    """Golf Matchup Edge - compare model odds to the books."""
    pass


@cli.command()
@click.argument("feed", type=click.Path(exists=True, dir_okay=False))
@click.argument("roster", type=click.Path(exists=True, dir_okay=False))
@click.option("--top", "-n", default=20, help="Number of rows to show")
def board(feed: str, roster: str, top: int):
    """Best edges across all matchups and bookmakers."""
    engine = _build_engine(feed, roster)
    _header(engine)

    rows = engine.edge_board()
    if not rows:
        console.print("[yellow]No edges available.[/]")
        return

    table = Table(title=f"Top {min(top, len(rows))} Edges", box=box.ROUNDED, header_style="bold cyan")
    table.add_column("Pick", style="white")
    table.add_column("Opponent")
    table.add_column("Book")
    table.add_column("Odds", justify="right")
    table.add_column("Model", justify="right")
    table.add_column("Edge", justify="right")

    for row in rows[:top]:
        color = "green" if row.is_favorable else "red"
        table.add_row(
            row.pick, row.opponent, row.bookmaker, _odds_text(row.odds), _odds_text(row.model_odds),
            f"[{color}]{row.edge_percent:+.1f}%[/]",
        )
    console.print(table)


@cli.command()
@click.argument("feed", type=click.Path(exists=True, dir_okay=False))
@click.argument("roster", type=click.Path(exists=True, dir_okay=False))
def unresolved(feed: str, roster: str):
    """Feed players with no match in the golfer roster."""
    engine = _build_engine(feed, roster)
    names = engine.unresolved_names
    console.print(f"Matchups kept: {len(engine.filtered_matchups)}")
    if not names:
        console.print("[green]All players matched.[/]")
        return
    console.print(f"[yellow]{len(names)} players missing from golfer data:[/]")
    for name in sorted(names):
        console.print(f"  {name}")


@cli.command()
@click.argument("feed", type=click.Path(exists=True, dir_okay=False))
@click.argument("roster", type=click.Path(exists=True, dir_okay=False))
def matchups(feed: str, roster: str):
    """List selectable matchups and their keys."""
    engine = _build_engine(feed, roster)
    _header(engine)
    for matchup in engine.filtered_matchups:
        console.print(f"{display_text(matchup)}  [dim]{key_of(matchup)}[/]")


@cli.command()
@click.argument("feed", type=click.Path(exists=True, dir_okay=False))
@click.argument("roster", type=click.Path(exists=True, dir_okay=False))
@click.argument("key")
@click.option("--book", "-b", default=None, help="Bookmaker (default: first offered)")
@click.option("--p2", "pick_p2", is_flag=True, help="Pick player 2 instead of player 1")
@click.option("--stake", "-s", default=None, help="Bet amount")
def analyze(feed: str, roster: str, key: str, book: str, pick_p2: bool, stake: str):
    """Edge and payout for one matchup (KEY is 'p1|p2|ties')."""
    engine = _build_engine(feed, roster)
    _header(engine)

    try:
        engine.select_key(key)
        if book:
            engine.set_bookmaker(book)
        if pick_p2:
            engine.set_pick_side(False)
        if stake is not None:
            engine.set_stake_amount(stake)
    except MatchupEdgeError as e:
        console.print(f"[red]{e}[/]")
        raise SystemExit(1)

    view = engine.view()
    sel = view.selection
    edge = view.edge_percent

    console.print(f"Your pick: [bold]{engine.selection.pick_name}[/] at {sel.bookmaker or '-'}")
    console.print(f"Odds: {_odds_text(sel.quoted_odds) if sel.quoted_odds else '-'}", highlight=False)
    if sel.quoted_odds:
        try:
            prob_text = f"{implied_probability(sel.quoted_odds) * 100:.1f}%"
        except MatchupEdgeError:
            prob_text = "-"
        console.print(f"Implied probability: {prob_text}")
    if sel.tie_odds:
        console.print(f"Tie (separate bet): {sel.tie_odds}")

    color = "green" if edge is not None and edge > 0 else "red"
    edge_text = f"{edge:.1f}%" if edge is not None else "-"
    console.print(f"Model Edge: [{color}]{edge_text}[/] ({edge_label(edge)})")
    payout_text = f"${view.potential_payout:,.2f}" if view.potential_payout is not None else "$-"
    console.print(f"Potential Payout: {payout_text}")

    rows = engine.head_to_head()
    if rows:
        table = Table(title="Head-to-Head Comparison", box=box.ROUNDED, header_style="bold cyan")
        table.add_column("Metric")
        table.add_column(f"{view.your_golfer.name} (Your Pick)", justify="right", style="green")
        table.add_column(view.opponent_golfer.name, justify="right")
        for row in rows:
            yours, theirs = row.formatted()
            table.add_row(row.metric, yours, theirs)
        console.print(table)


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
