from connect4_search.main import main, parse_moves
from connect4_search.scripts.benchmark import main as bench_main, parse_sizes, run_benchmark
from connect4_search.evaluation import EvaluationLog

import pytest


def test_parse_moves_is_one_based():
    assert parse_moves("1, 3,3") == [0, 2, 2]
    assert parse_moves("") == []
    with pytest.raises(ValueError):
        parse_moves("a,2")


def test_move_command_prints_winning_column(capsys):
    rc = main(["move", "--moves", "1,3,1,3,2,3,5", "--algorithm", "alpha-beta", "--depth", "1"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "Player O -> column 3" in out
    assert "nodes=7" in out


def test_move_command_rejects_overfull_column(capsys):
    rc = main(["move", "--moves", "1,1,1,1,1,1,1"])
    assert rc == 2
    assert "Column is full" in capsys.readouterr().out


def test_move_command_on_finished_game(capsys):
    rc = main(["move", "--moves", "1,7,2,7,3,7,4"])
    assert rc == 2
    assert "No valid moves" in capsys.readouterr().out


def test_move_command_unknown_algorithm(capsys):
    rc = main(["move", "--algorithm", "mcts"])
    assert rc == 2


def test_no_command_prints_usage(capsys):
    assert main([]) == 2
    assert "Usage" in capsys.readouterr().out


def test_parse_sizes():
    assert parse_sizes("6x7, 4X5") == [(6, 7), (4, 5)]
    with pytest.raises(ValueError):
        parse_sizes("6by7")


def test_run_benchmark_tallies_games_and_searches():
    log = EvaluationLog()
    table = run_benchmark(["minimax", "alpha-beta"], [1, 2], [(4, 5)], games=2, seed=7, log=log)

    assert set(table) == {
        ("minimax", 1, (4, 5)),
        ("minimax", 2, (4, 5)),
        ("alphabeta", 1, (4, 5)),
        ("alphabeta", 2, (4, 5)),
    }
    for agg in table.values():
        assert agg.games == 2
        assert agg.wins + agg.draws + agg.losses == 2
    assert len(log) == sum(a.searches for a in table.values())
    assert all(r.board_size == "small" for r in log.entries())


def test_benchmark_main_writes_csv(tmp_path, capsys):
    rc = bench_main([
        "--algorithms", "alphabeta,expectiminimax",
        "--depths", "1,2",
        "--sizes", "5x6",
        "--games", "1",
        "--results-dir", str(tmp_path),
    ])
    assert rc == 0
    files = list(tmp_path.glob("evaluation_log_*.csv"))
    assert len(files) == 1
    assert "BENCHMARK RESULTS" in capsys.readouterr().out


def test_benchmark_main_rejects_bad_algorithm(tmp_path):
    assert bench_main(["--algorithms", "beam", "--results-dir", str(tmp_path)]) == 2
    assert not list(tmp_path.iterdir())


def test_main_routes_bench(tmp_path):
    rc = main(["bench", "--depths", "1", "--sizes", "4x4", "--games", "1", "--no-csv"])
    assert rc == 0
