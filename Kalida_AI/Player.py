"""Player interface for human or computer controllers."""

import time

try:
    from Board import SYMBOLS
    from ai import strategies
    from ai.strategy_selector import StrategySelector
    from engine.rules import RuleFlags
    from utils import timer
except ImportError:
    from Kalida_AI.Board import SYMBOLS
    from Kalida_AI.ai import strategies
    from Kalida_AI.ai.strategy_selector import StrategySelector
    from Kalida_AI.engine.rules import RuleFlags
    from Kalida_AI.utils import timer


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board, deadline=None, legal_moves=None):
        """Return (row, col) for the next move; `legal_moves` restricts the choice when given."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color):
        super().__init__(color)

    def next_move(self, board, deadline=None, legal_moves=None):
        """Text-input player with deadline guard (raises TimeoutError on timeout)."""
        import os
        import sys

        if legal_moves:
            print(f"{SYMBOLS[self.color]} must play a knight move: {legal_moves}")
        prompt = f"{SYMBOLS[self.color]} move as 'row col' (0-indexed): "
        if deadline is None:
            raw = input(prompt).strip()
        else:
            remaining = timer.time_remaining(deadline)
            if remaining <= 0:
                raise TimeoutError("Move exceeded allotted time")

            if os.name == "nt":
                # Windows: select() on stdin is not supported. Poll with msvcrt.
                import msvcrt

                sys.stdout.write(prompt)
                sys.stdout.flush()
                buffer = ""
                while time.time() < deadline:
                    if msvcrt.kbhit():
                        ch = msvcrt.getwche()
                        if ch in ("\r", "\n"):
                            sys.stdout.write("\n")
                            break
                        buffer += ch
                    time.sleep(0.01)
                else:
                    raise TimeoutError("Move exceeded allotted time")
                raw = buffer.strip()
            else:
                import select

                sys.stdout.write(prompt)
                sys.stdout.flush()
                rlist, _, _ = select.select([sys.stdin], [], [], remaining)
                if not rlist:
                    raise TimeoutError("Move exceeded allotted time")
                raw = sys.stdin.readline().strip()

        try:
            row_str, col_str = raw.split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class ComputerPlayer(Player):
    """Delegates to the strategy registered for `difficulty`."""

    def __init__(self, color, difficulty="medium", rules=None, selector=None, logger=None):
        super().__init__(color)
        self.difficulty = difficulty
        self.rules = rules or RuleFlags()
        self.selector = selector or StrategySelector()
        self.logger = logger

    def next_move(self, board, deadline=None, legal_moves=None):
        start = time.time()
        opponent = -self.color
        move = self.selector.get_move(board, self.difficulty, self.color, opponent, *self.rules.as_args())
        if legal_moves and move not in legal_moves:
            move = strategies.best_by_evaluation(board, legal_moves, self.color, opponent, *self.rules.as_args())
        if self.logger:
            self.logger(f"{SYMBOLS[self.color]} ({self.difficulty}) chose {move} in {timer.elapsed_since(start):.2f}s")
        return move


def describe(player):
    if isinstance(player, ComputerPlayer):
        return f"computer ({player.difficulty})"
    return "human"
