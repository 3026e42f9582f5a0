import pytest

from connect4_search.ai.alphabeta_agent import AlphaBetaSearch
from connect4_search.ai.expectiminimax_agent import ExpectiMiniMaxSearch, NEXT_KIND
from connect4_search.ai.minimax_agent import MinimaxSearch
from connect4_search.ai.pick import STRATEGIES, make_strategy, search
from connect4_search.ai.search import NoLegalMoves, NodeCounter, best_move
from connect4_search.core.board import Board

ALGORITHMS = ["minimax", "alphabeta", "expectiminimax"]

MID_GAME = [3, 3, 2, 4, 4, 2]


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_takes_immediate_win(algo, o_wins_in_col_2):
    res = search(algo, o_wins_in_col_2, 1)
    assert res.column == 2
    assert res.score == 1000


def test_alphabeta_depth_one_picks_winning_column(o_wins_in_col_2):
    assert o_wins_in_col_2.current == "O"
    res = best_move(AlphaBetaSearch(), o_wins_in_col_2, 1)
    assert res.column == 2
    # one node per root child at depth 1
    assert res.nodes == 7


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_blocks_opponent_threat_at_depth_two(algo, x_must_block_col_2):
    res = search(algo, x_must_block_col_2, 2)
    assert res.column == 2
    assert res.score == 0


@pytest.mark.parametrize("depth", [1, 2, 3, 4])
def test_alphabeta_matches_minimax(depth):
    board = Board.from_moves(MID_GAME)
    mm = best_move(MinimaxSearch(), board, depth)
    ab = best_move(AlphaBetaSearch(), board, depth)
    assert ab.column == mm.column
    assert ab.score == mm.score
    assert ab.nodes <= mm.nodes


def test_alphabeta_prunes_at_depth_four():
    board = Board.from_moves(MID_GAME)
    mm = best_move(MinimaxSearch(), board, 4)
    ab = best_move(AlphaBetaSearch(), board, 4)
    assert mm.cutoffs == 0
    assert ab.cutoffs > 0
    assert ab.nodes < mm.nodes


def test_minimax_node_count_on_empty_board():
    # 7 root children, each with 7 replies, no terminal nodes at this depth
    res = best_move(MinimaxSearch(), Board(), 2)
    assert res.nodes == 7 + 7 * 7
    assert res.column == 0


def test_search_does_not_mutate_the_board():
    board = Board.from_moves(MID_GAME)
    before = board.copy()
    for algo in ALGORITHMS:
        search(algo, board, 3)
    assert board == before


def test_node_counter_is_fresh_per_call():
    board = Board.from_moves(MID_GAME)
    first = search("minimax", board, 2)
    second = search("minimax", board, 2)
    assert first.nodes == second.nodes


@pytest.mark.parametrize("depth", [0, -3])
@pytest.mark.parametrize("algo", ALGORITHMS)
def test_non_positive_depth_is_one_ply(algo, depth, o_wins_in_col_2):
    res = search(algo, o_wins_in_col_2, depth)
    assert res.column == 2
    assert res.nodes == 7

    empty = search(algo, Board(), depth)
    assert empty.column == 0
    assert empty.score == 0


def test_first_best_move_wins_ties():
    # Nothing is reachable at depth 2 on an empty board, every column scores 0
    for algo in ALGORITHMS:
        assert search(algo, Board(), 2).column == 0


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_no_legal_moves_on_full_board(algo):
    full = Board.from_moves([0, 1, 2, 0, 1, 2, 0, 1, 2], rows=3, cols=3)
    with pytest.raises(NoLegalMoves):
        search(algo, full, 3)


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_no_legal_moves_on_decided_board(algo):
    won = Board.from_moves([0, 6, 1, 6, 2, 6, 3])
    with pytest.raises(ValueError):
        search(algo, won, 2)


def test_expectiminimax_single_legal_move_matches_minimax(single_column_left):
    assert single_column_left.valid_moves() == [3]
    em = best_move(ExpectiMiniMaxSearch(), single_column_left, 3)
    mm = best_move(MinimaxSearch(), single_column_left, 3)
    assert em.column == mm.column == 3
    assert em.score == mm.score == 1000
    assert em.nodes == mm.nodes == 1


def test_expectiminimax_single_column_board():
    board = Board.from_moves([0, 0], rows=6, cols=1)
    em = best_move(ExpectiMiniMaxSearch(), board, 3)
    mm = best_move(MinimaxSearch(), board, 3)
    assert em.column == mm.column == 0
    assert em.score == mm.score
    assert em.nodes == mm.nodes


def test_node_kinds_rotate():
    assert NEXT_KIND["max"] == "min"
    assert NEXT_KIND["min"] == "chance"
    assert NEXT_KIND["chance"] == "max"


def test_chance_node_averages_children(o_wins_in_col_2):
    em = ExpectiMiniMaxSearch()

    counter = NodeCounter()
    assert em._value(o_wins_in_col_2, 1, "chance", "O", counter) == pytest.approx(1000 / 7)
    assert counter.nodes == 8

    assert em._value(o_wins_in_col_2, 1, "chance", "X", NodeCounter()) == pytest.approx(-1000 / 7)
    assert em._value(o_wins_in_col_2, 1, "max", "O", NodeCounter()) == 1000
    assert em._value(o_wins_in_col_2, 1, "min", "O", NodeCounter()) == 0


def test_make_strategy_accepts_spelling_variants():
    assert make_strategy("Alpha-Beta").name == "alphabeta"
    assert make_strategy("alpha_beta").name == "alphabeta"
    assert make_strategy(" MINIMAX ").name == "minimax"
    assert make_strategy("expectiminimax").name == "expectiminimax"
    assert sorted(STRATEGIES) == sorted(ALGORITHMS)


def test_make_strategy_rejects_unknown_names():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        make_strategy("mcts")


def test_on_record_receives_one_record_per_search(o_wins_in_col_2):
    records = []
    res = search("alphabeta", o_wins_in_col_2, 1, on_record=records.append)

    assert len(records) == 1
    rec = records[0]
    assert rec.algorithm == "alphabeta"
    assert rec.depth == 1
    assert rec.nodes == res.nodes
    assert rec.column == 2
    assert rec.outcome == "O"
    assert rec.board_size == "default"
    assert (rec.rows, rec.cols) == (6, 7)
    assert rec.time_ms >= 0


@pytest.mark.parametrize("algo", ALGORITHMS)
def test_no_search_past_a_won_grid(algo):
    grid = [[None] * 7 for _ in range(6)]
    grid[5] = ["X", "X", "X", "X", "O", "O", "O"]
    won = Board(grid=grid, current="O")
    with pytest.raises(NoLegalMoves):
        search(algo, won, 2)
