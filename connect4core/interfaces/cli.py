"""
cli.py - Command-line driver for the column-drop game

This module plays games between registered AI strategies (a person counts as
the "human" strategy), replays recorded move sequences, and wires the command
line options to the debug manager. It is the caller the GameBoard expects: it
asks whether each move wins and decides when the game stops.
"""

import argparse
import sys
import time
from typing import Callable, List, Optional, Sequence

from connect4core.ai import AI, available_ais, create_ai
from connect4core.debug import DebugLevel, debug
from connect4core.errors import Connect4Error, InvalidMoveError
from connect4core.game.board import GameBoard
from connect4core.game.move import Move
from connect4core.game.player import Player
from connect4core.game.rules import BoardRules
from connect4core.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, WIN_LENGTH

# Invalid moves tolerated from one seat before the game is abandoned
MAX_INVALID_ATTEMPTS = 3


def column_header(width: int) -> str:
    """Column numbers lined up under the board's two-character cells."""
    return "".join(f"{column:>2}"[-2:] for column in range(width))


def show(board: GameBoard, out: Callable[[str], None]) -> None:
    out(board.render() + column_header(board.width))


def play_game(board: GameBoard, ais: Sequence[AI], delay: float = 0.0,
              out: Callable[[str], None] = print) -> Optional[Player]:
    """
    Play until someone wins or the board fills up.

    Args:
        board: Board to play on; PLAYER_1 moves first
        ais: One AI per player, indexed by player order
        delay: Seconds to pause after each move
        out: Where to write the board and messages

    Returns:
        The winning player, or None for a draw or an abandoned game
    """
    seats = {ai.player: ai for ai in ais}
    current = Player.PLAYER_1
    show(board, out)

    while not board.board_full():
        ai = seats[current]
        invalid = 0
        while True:
            # AIs get a copy so they can explore without touching the game
            move = ai.determine_move(board.copy())
            try:
                won = board.checked_add_move(move)
                break
            except InvalidMoveError as e:
                invalid += 1
                out(f"Invalid move by {ai}: {e}")
                if invalid >= MAX_INVALID_ATTEMPTS:
                    debug.warning(f"Abandoning game after {invalid} invalid moves", "run")
                    out("Too many invalid moves, game abandoned.")
                    return None

        out(f"\nPlayer {current} plays column {move.column}")
        show(board, out)
        if won:
            out(f"\nGame over! Player {current} wins!")
            return current

        current = current.opponent()
        if delay:
            time.sleep(delay)

    out("\nGame over! It's a draw!")
    return None


def replay_moves(board: GameBoard, columns: Sequence[int], delay: float = 0.0,
                 out: Callable[[str], None] = print) -> Optional[Player]:
    """
    Replay a recorded list of columns, players alternating from PLAYER_1.

    Stops at the first winning move.

    Returns:
        The winning player, or None if no move won

    Raises:
        InvalidMoveError: a recorded move is not legal
    """
    player = Player.PLAYER_1
    show(board, out)
    for number, column in enumerate(columns, start=1):
        won = board.checked_add_move(Move(column, player))
        out(f"\nMove {number}: Player {player} plays column {column}")
        show(board, out)
        if won:
            out(f"\nPlayer {player} wins!")
            return player
        player = player.opponent()
        if delay:
            time.sleep(delay)
    return None


def parse_columns(text: str) -> List[int]:
    """Parse "3,3,4" into [3, 3, 4]."""
    try:
        return [int(part) for part in text.split(',') if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected comma-separated column numbers, got {text!r}")


def configure_debug(args: argparse.Namespace) -> None:
    """Apply --debug, --debug-level and --log-file to the debug manager."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    elif args.debug_level:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Column-drop (Connect Four) game driver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Play against a random AI
    python run.py play --player1 human --player2 random

    # Watch two random AIs on a 9x7 board
    python run.py play --player1 random --player2 random --width 9 --height 7 --seed 42

    # Replay a recorded game
    python run.py replay --moves 0,1,0,1,0,1,0 --delay 0.5
    """)

    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns')
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows')
    parser.add_argument('--win-length', type=int, default=WIN_LENGTH,
                        help='Discs in a line needed to win')
    parser.add_argument('--delay', type=float, default=0.0,
                        help='Seconds to pause between moves')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging (same as --debug-level debug)')
    parser.add_argument('--debug-level',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging verbosity')
    parser.add_argument('--log-file', type=str, help='Also write log records to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a game between two AIs')
    play_parser.add_argument('--player1', choices=available_ais(), default='human',
                             help='Strategy for player 1')
    play_parser.add_argument('--player2', choices=available_ais(), default='random',
                             help='Strategy for player 2')
    play_parser.add_argument('--seed', type=int, help='Seed for random strategies')

    replay_parser = subparsers.add_parser('replay', help='Replay a list of moves')
    replay_parser.add_argument('--moves', type=parse_columns, required=True,
                               help='Comma-separated columns, players alternating')

    return parser


def make_ai(name: str, player: Player, seed: Optional[int]) -> AI:
    if name == 'random' and seed is not None:
        # Different seeds per seat so two random AIs do not mirror each other
        return create_ai(name, player, seed=seed + player.value)
    return create_ai(name, player)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; returns a process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_debug(args)

    if not args.command:
        parser.print_help()
        return 1

    try:
        board = GameBoard(rules=BoardRules(args.width, args.height, args.win_length))
        if args.command == 'play':
            ais = [make_ai(args.player1, Player.PLAYER_1, args.seed),
                   make_ai(args.player2, Player.PLAYER_2, args.seed)]
            for ai in ais:
                print(ai)
            play_game(board, ais, delay=args.delay)
        elif args.command == 'replay':
            replay_moves(board, args.moves, delay=args.delay)
    except Connect4Error as e:
        debug.error(str(e), "run")
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130

    return 0
