"""CLI options for selecting players, difficulty, rule flags, and config paths."""


def parse_args(argv=None):
    import argparse

    try:
        from ai.strategy_selector import DIFFICULTY_LEVELS
    except ImportError:
        from Kalida_AI.ai.strategy_selector import DIFFICULTY_LEVELS

    parser = argparse.ArgumentParser(description="Kalida: five in a row on a 6x6 board with bounce, wrap and missing-teeth rules")
    parser.add_argument("--board-size", type=int, help="Board size (default 6)")
    parser.add_argument("--timeout", type=float, help="Seconds per human move (0 for no limit)")
    parser.add_argument("--difficulty", type=str.lower, choices=DIFFICULTY_LEVELS, help="Computer difficulty tier")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default=None,
        help="Play mode (who plays X/O); X moves first",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--weights", default="config/weights.yaml", help="Path to evaluation weights YAML")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the randomized tiers")
    parser.add_argument("--rounds", type=int, default=None, help="Number of rounds to play")
    parser.add_argument("--bounce", action=argparse.BooleanOptionalAction, default=None, help="Diagonal lines reflect off edges")
    parser.add_argument("--wrap", action=argparse.BooleanOptionalAction, default=None, help="Lines continue from the opposite edge")
    parser.add_argument(
        "--missing-teeth",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Wrapped lines with a gap do not win (great diagonals exempt)",
    )
    parser.add_argument(
        "--knight-move",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="X's second stone must be a knight's move from its first",
    )
    return parser.parse_args(argv)
