"""Game loop and turn management for Kalida rounds."""

try:
    from Board import Board, X, O, SYMBOLS
    from engine import referee, win_checker
    from engine.rules import RuleFlags
    from utils import timer
except ImportError:
    from Kalida_AI.Board import Board, X, O, SYMBOLS
    from Kalida_AI.engine import referee, win_checker
    from Kalida_AI.engine.rules import RuleFlags
    from Kalida_AI.utils import timer


class Kalidagame:
    def __init__(self, board_size, x_player, o_player, rules=None, knight_move=False, move_timeout=None, logger=print, renderer=None):
        self.board = Board(size=board_size)
        self.players = {X: x_player, O: o_player}
        self.rules = rules or RuleFlags()
        self.knight_move = knight_move
        self.move_timeout = move_timeout
        self.logger = logger
        self.renderer = renderer
        self.move_index = 0
        self.last_result = None
        self.scores = {X: 0, O: 0, 0: 0}

    def reset(self):
        """Clear the board for a new round; scores carry over."""
        self.board.reset()
        self.move_index = 0
        self.last_result = None

    def play(self):
        """Run a single round. Returns 1 (X wins), -1 (O wins), or 0 (draw)."""
        color = X  # X starts
        game_result = None
        last_move = None
        while game_result is None:
            if self.renderer:
                self.renderer(self.board, last_move, color, game_result)

            player = self.players[color]
            deadline = timer.deadline_after(self.move_timeout)
            legal_moves = referee.required_moves(self.board, self.knight_move)

            try:
                move = player.next_move(self.board, deadline=deadline, legal_moves=legal_moves)
                if move is None:
                    self.logger(f"{SYMBOLS[color]} has no move; result: Draw")
                    game_result = 0
                    break
                referee.check_move(move, self.board, deadline, legal_moves=legal_moves)
                self.board.place(*move, color)
                last_move = move
            except (TimeoutError, ValueError) as exc:
                self.logger(f"Disqualification: {SYMBOLS[color]} - {exc}")
                game_result = -color  # opponent wins
                break

            self.logger(f"Move {self.move_index + 1}: {SYMBOLS[color]} {move}")

            result = win_checker.check_win(self.board, *move, *self.rules.as_args())
            if result.is_win:
                detail = f" (bounce at {result.winning_cells[result.bounce_index]})" if result.bounce_index is not None else ""
                self.logger(f"Winner: {SYMBOLS[color]} {result.winning_cells}{detail}")
                self.last_result = result
                game_result = color
            elif self.board.is_full():
                self.logger("Result: Draw (board full)")
                game_result = 0

            self.move_index += 1
            if game_result is None:
                color = -color  # swap turns

        if self.renderer:
            self.renderer(self.board, last_move, color, game_result)

        self.scores[game_result] += 1
        return game_result
