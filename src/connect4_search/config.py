# src/connect4_search/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# Terminal scores (evaluation is terminal-only)
WIN_SCORE = 1000

# Search defaults
DEFAULT_ALGORITHM = "alphabeta"
DEFAULT_DEPTH = 4

# Board size labels used by the evaluation log
SMALL_BOARD_MAX = 4
LARGE_BOARD_MIN = 8

# Benchmark output
RESULTS_DIR = "data/results"
EVAL_LOG_PATTERN = "evaluation_log_*.csv"
