from __future__ import annotations

from typing import Iterable, List

from connect4_search.ai.base import Agent
from connect4_search.config import ROWS, COLS
from connect4_search.core.board import Board, IllegalMove
from connect4_search.core.rules import winning_line
from connect4_search.game.actions import apply_move, reset
from connect4_search.game.results import GameResult
from connect4_search.game.state import GameState
from connect4_search.types import Move


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_line(agent: Agent, move: Move, board: Board) -> str:
    name = _agent_name(agent, f"Player {board.current}")
    info = getattr(agent, "last_info", None)
    if info:
        return (
            f"{name} chose {info.get('move_col')} | "
            f"{info.get('algorithm')} d={info.get('depth')} | "
            f"nodes={info.get('nodes')} | "
            f"cut={info.get('cutoffs')} | "
            f"eval={info.get('eval')} | "
            f"{info.get('time_ms')}ms"
        )
    return f"{name} chose {int(move) + 1}"


def play_game(
    agent_x: Agent,
    agent_o: Agent,
    rows: int = ROWS,
    cols: int = COLS,
    opening: Iterable[int] = (),
    verbose: bool = False,
) -> GameResult:
    """
    Play one headless game. `opening` columns are replayed first, then the
    agents alternate. The live board is replaced after every move.
    """
    state = GameState(board=reset(rows, cols))
    moves: List[Move] = []
    last_col: int | None = None

    for col in opening:
        board, ok = apply_move(state.board, Move(int(col)))
        if not ok:
            raise IllegalMove(f"Opening move {int(col) + 1} is not playable.")
        last_col = int(col)
        state.board = board
        moves.append(Move(int(col)))

    while state.board.outcome is None:
        agent = agent_x if state.current == "X" else agent_o
        move = agent.choose_move(state)

        board, ok = apply_move(state.board, move)
        if not ok:
            raise IllegalMove(f"{_agent_name(agent, state.current)} chose unplayable column {int(move) + 1}.")

        state.last_status = _status_line(agent, move, state.board)
        state.board = board
        moves.append(move)
        last_col = int(move)

        if verbose:
            print(f"{state.last_status} | Next: Player {state.current}")

    line = []
    if last_col is not None and state.board.outcome in ("X", "O"):
        row = next(r for r in range(state.board.rows) if state.board.grid[r][last_col] is not None)
        line = winning_line(state.board, row, last_col)

    if verbose:
        if state.board.outcome == "draw":
            print("Draw game.")
        else:
            print(f"Player {state.board.outcome} wins!")

    return GameResult(outcome=state.board.outcome, moves=moves, winning_line=line)
