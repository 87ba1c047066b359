"""Entry point for Kalida games. Load config, wire players, start Kalidagame."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import log_event
    from Kalidagame import Kalidagame
    from Player import HumanPlayer, ComputerPlayer, describe
    from Board import X, O, SYMBOLS
    from ai import heuristic
    from ai.strategy_selector import StrategySelector, normalize_difficulty
    from engine.rules import RuleFlags
except ImportError:
    from Kalida_AI.utils.cli import parse_args
    from Kalida_AI.utils.logger import log_event
    from Kalida_AI.Kalidagame import Kalidagame
    from Kalida_AI.Player import HumanPlayer, ComputerPlayer, describe
    from Kalida_AI.Board import X, O, SYMBOLS
    from Kalida_AI.ai import heuristic
    from Kalida_AI.ai.strategy_selector import StrategySelector, normalize_difficulty
    from Kalida_AI.engine.rules import RuleFlags


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Kalida_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _flag(cli_value, settings_value):
    return bool(settings_value) if cli_value is None else cli_value


def build_rules(args, settings):
    base = RuleFlags.from_settings(settings)
    return RuleFlags(
        bounce=_flag(args.bounce, base.bounce),
        missing_teeth=_flag(args.missing_teeth, base.missing_teeth),
        wrap=_flag(args.wrap, base.wrap),
    )


def build_selector(settings, seed, weights):
    search = settings.get("search") or {}
    options = {
        "medium": {"tactics_rate": search.get("medium_tactics_rate", 0.5)},
        "extrahard": {
            "depth": search.get("extrahard_depth", 3),
            "candidate_limit": search.get("extrahard_candidate_limit", 10),
            "sample_limit": search.get("extrahard_sample_limit", 10),
        },
        "impossible": {"candidate_limit": search.get("candidate_limit", 12), "weights": weights},
    }
    return StrategySelector(seed=seed, options=options)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings.get("board_size", 6)
    move_timeout = args.timeout if args.timeout is not None else settings.get("move_timeout_seconds", 0)
    difficulty = normalize_difficulty(args.difficulty or settings.get("difficulty", "medium"))
    mode = args.mode or settings.get("mode", "human-vs-ai")
    seed = args.seed if args.seed is not None else settings.get("seed")
    rounds = args.rounds or settings.get("rounds", 1)
    knight_move = _flag(args.knight_move, settings.get("rules", {}).get("knight_move", False))
    rules = build_rules(args, settings)

    weights = heuristic.load_weights(resolve_project_path(args.weights))
    selector = build_selector(settings, seed, weights)

    def computer(color):
        return ComputerPlayer(color, difficulty=difficulty, rules=rules, selector=selector, logger=log_event)

    if mode == "ai-vs-ai":
        x_player, o_player = computer(X), computer(O)
    elif mode == "human-vs-ai":
        x_player, o_player = HumanPlayer(X), computer(O)
    elif mode == "ai-vs-human":
        x_player, o_player = computer(X), HumanPlayer(O)
    elif mode == "human-vs-human":
        x_player, o_player = HumanPlayer(X), HumanPlayer(O)
    else:
        raise ValueError(f"Unsupported mode: {mode}")

    log_event(
        f"Kalida {board_size}x{board_size}: X {describe(x_player)} vs O {describe(o_player)}; "
        f"rules: {rules.describe()}{', knight move' if knight_move else ''}"
    )

    renderer = None
    if "human" in mode:
        def renderer(board, last_move, current_color, game_result):
            print(board.render())

    game = Kalidagame(
        board_size=board_size,
        x_player=x_player,
        o_player=o_player,
        rules=rules,
        knight_move=knight_move,
        move_timeout=move_timeout,
        logger=log_event,
        renderer=renderer,
    )
    outcome = {X: "X wins", O: "O wins", 0: "Draw"}
    for round_no in range(1, rounds + 1):
        if round_no > 1:
            game.reset()
        result = game.play()
        print(f"Round {round_no}: {outcome.get(result, 'Unknown result')}")
    print(f"Score: X {game.scores[X]} - O {game.scores[O]} (draws {game.scores[0]})")
    return game.scores


if __name__ == "__main__":
    main()
