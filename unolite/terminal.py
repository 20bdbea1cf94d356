"""
Terminal Presenter - Renders the table and reads moves with rich.

Input format for a play: hand positions separated by commas or
spaces, e.g. "3", "3,4" or "3 4". "-1" draws a card instead.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from .config import GameConfig
from .schemas import CardInfo, TableSnapshot
from .session.presenter import Move, Presenter

DRAW_SENTINEL = -1

COLOR_STYLES = {
    "Red": "bold red",
    "Blue": "bold blue",
    "Green": "bold green",
    "Yellow": "bold yellow",
}


def parse_indices(text: str) -> list[int] | None:
    """
    Parse "3,4", "3, 4" or "3 4" into [3, 4].

    Returns None for empty or non-numeric input.
    """
    tokens = text.replace(",", " ").split()
    if not tokens:
        return None
    try:
        return [int(token) for token in tokens]
    except ValueError:
        return None


def render_card(card: CardInfo) -> str:
    style = COLOR_STYLES.get(card.color, "bold")
    return f"[{style}]{escape(card.label)}[/{style}]"


class TerminalPresenter(Presenter):
    """Presenter for hot-seat play at one terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    # --- Setup prompts ---

    def welcome(self):
        self.console.print(Panel.fit(
            "[bold red]UNO-Lite[/bold red]\n"
            "[dim]Stack matching cards to play them together[/dim]",
            border_style="red",
        ))

    def ask_player_count(self, config: GameConfig) -> int:
        while True:
            count = IntPrompt.ask(
                f"Enter number of players ({config.min_players}-{config.max_players})",
                console=self.console,
            )
            if config.min_players <= count <= config.max_players:
                return count
            self.console.print(
                f"[red]Please enter a number between {config.min_players} "
                f"and {config.max_players}.[/red]"
            )

    def ask_player_names(self, count: int) -> list[str]:
        return [
            Prompt.ask(f"Enter name for Player {i + 1}", default=f"Player {i + 1}", console=self.console)
            for i in range(count)
        ]

    # --- Presenter interface ---

    def show_table(self, snapshot: TableSnapshot):
        top = render_card(snapshot.top_card) if snapshot.top_card else "-"
        current = snapshot.current_player
        self.console.rule(f"Round {snapshot.round_number}")
        self.console.print(f"Top card: {top}")
        self.console.print(
            f"Current player: [cyan]{escape(current.name)}[/cyan] ({current.hand_count} cards)"
            f"   Direction: {snapshot.direction.replace('_', ' ')}"
            f"   Deck: {snapshot.deck_size}"
        )

        players = Table(show_header=True, header_style="bold magenta")
        players.add_column("Player", style="cyan")
        players.add_column("Cards", justify="right")
        for player in snapshot.players:
            marker = " <" if player.is_current_turn else ""
            players.add_row(escape(player.name) + marker, str(player.hand_count))
        self.console.print(players)

        self.console.print(f"\n[bold]{escape(current.name)}'s hand:[/bold]")
        for i, card in enumerate(snapshot.hand):
            hint = "" if i in snapshot.playable_positions else " [dim](not playable)[/dim]"
            self.console.print(f"  {i}: {render_card(card)}{hint}")

    def choose_move(self, snapshot: TableSnapshot) -> Move:
        while True:
            line = Prompt.ask(
                "\nPlay card(s) (e.g. 0 or 0,2) or -1 to draw",
                console=self.console,
            )
            indices = parse_indices(line)
            if indices is None:
                self.console.print("[red]Invalid input. Try again.[/red]")
                continue
            if indices == [DRAW_SENTINEL]:
                return Move.draw()
            return Move.play(*indices)

    def confirm_play_drawn(self, snapshot: TableSnapshot, card: CardInfo) -> bool:
        return Confirm.ask(
            f"You can play the drawn card {render_card(card)}! Play it?",
            console=self.console,
        )

    def show_rejection(self, message: str):
        self.console.print(f"[red]{escape(message)}. Try again.[/red]")

    def announce(self, messages: list[str]):
        for message in messages:
            self.console.print(f">> {escape(message)}")

    def show_winner(self, name: str):
        self.console.print(Panel.fit(
            f"[bold green]{escape(name)} wins! Congratulations![/bold green]",
            border_style="green",
        ))
