"""
Plain-text rendering of a game for the console.
"""

from typing import Iterable

from aqueren.core.game import COLS, Game, Hotel, Player, PlayerShares, Slot, Tile

FILLED = "◼"
EMPTY = "◻"

SHARE_LABELS = {
    Hotel.LUXOR: "LUX",
    Hotel.TOWER: "TOW",
    Hotel.AMERICAN: "AMER",
    Hotel.FESTIVAL: "FEST",
    Hotel.WORLDWIDE: "WW",
    Hotel.CONTINENTAL: "CONT",
    Hotel.IMPERIAL: "IMP",
}


def render_slot(slot: Slot) -> str:
    """One board cell: hotel initial, filled square, or empty square."""
    if slot.hotel is not None:
        return slot.hotel.value[0]
    return FILLED if slot.has_tile else EMPTY


def render_board(game: Game) -> str:
    header = "   " + " ".join(f"{c + 1:<2}" for c in range(COLS))
    lines = [header]
    slots = game.board.slots
    for start in range(0, len(slots), COLS):
        row = slots[start:start + COLS]
        letter = row[0].tile.label()[0]
        cells = " ".join(f"{render_slot(s):<2}" for s in row)
        lines.append(f"{letter}  {cells} {letter}")
    lines.append(header)
    return "\n".join(lines)


def render_shares(shares: PlayerShares) -> str:
    return ", ".join(f"{SHARE_LABELS[h]}: {shares.get(h)}" for h in Hotel)


def render_tiles(tiles: Iterable[Tile]) -> str:
    return ", ".join(t.label() for t in sorted(tiles))


def render_player(player: Player) -> str:
    return "\n".join(
        [
            f"Player {player.id.value}:",
            f"  Money: {player.money}",
            f"  Shares: {render_shares(player.shares)}",
            f"  Tiles: {render_tiles(player.tiles)}",
        ]
    )


def render_game(game: Game) -> str:
    """Full status screen: players, board, and whose turn it is."""
    parts = [
        "Game status",
        "-" * 21,
        "",
        "\n\n".join(render_player(p) for p in game.players),
        "",
        render_board(game),
        "",
        f"Turn: Player {game.turn.value} ({game.turn_state.value})",
    ]
    return "\n".join(parts)
