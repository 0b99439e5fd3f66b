"""Squares terminal game loop with optional AI players."""

from typing import Optional

from .board import RED, SIDE_NAMES, YELLOW
from .config import CONTROLLER_AI, GameConfig
from .session import GameSession

PLAYER_NAMES = {RED: "Red(R)", YELLOW: "Yellow(Y)"}


class Game:
    def __init__(self, config: Optional[GameConfig] = None, quiet: bool = False):
        self.session = GameSession(config=config or GameConfig())
        self.quiet = quiet

    @property
    def board(self):
        return self.session.board

    @property
    def current_player(self):
        return self.session.current_player

    def _print(self, text: str = ""):
        if not self.quiet:
            print(text)

    def play(self) -> Optional[str]:
        """Run the game to the end and return the winner (RED, YELLOW, 'D' or None)."""
        self._print("=== SQUARES ===")
        self._print("Type 'help' for commands.\n")

        while not self.is_game_over():
            self._print(self.board.display(last_move=self._last_move()))
            pname = PLAYER_NAMES[self.current_player]
            controller = self.session.current_controller
            clock = self.session.time_left_ms[self.current_player]
            self._print(f"  Turn: {pname} [{controller.upper()}]  clock={clock / 1000.0:.1f}s")
            self._print()

            if controller == CONTROLLER_AI:
                result = self.session.apply_agent_move()
                if "error" in result:
                    self._print(f"  AI error: {result['error']}")
                    break

                self._print(f"  >> {pname} (AI) plays {result['notation']}")
                self._print_claimed(result)
                search = result.get("search")
                if search:
                    self._print(
                        f"     Search: mode={search['mode']} depth={search['depth']} "
                        f"nodes={search['nodes']} time={search['elapsed_ms']}ms"
                    )
                self._print()
                continue

            payload = self._get_move()
            if payload is None:
                continue

            result = self.session.apply_human_move(payload)
            if "error" in result:
                print(f"  {result['error']}")
                continue

            self._print(f"\n  >> {pname} plays {result['notation']}")
            self._print_claimed(result)
            self._print()

        self._print(self.board.display())
        status = self.session.status()
        winner = status["winner"]
        if winner is None:
            self._print("  GAME OVER! No winner.")
            return None

        if winner in PLAYER_NAMES:
            reason = " on time" if status["game_over_reason"] == "timeout" else ""
            self._print(f"  GAME OVER! {PLAYER_NAMES[winner]} wins{reason}!")
        else:
            self._print("  GAME OVER! Draw.")
        self._print(f"  Final score: Red {self.board.owned_count(RED)} - {self.board.owned_count(YELLOW)} Yellow")
        return winner

    def _last_move(self):
        history = self.session.move_history
        return history[-1]["move"] if history else None

    def is_game_over(self) -> bool:
        return self.session.status()["game_over"]

    def _print_claimed(self, result: dict):
        if result["claimed"]:
            cells = ", ".join(f"{r},{c}" for r, c in result["claimed"])
            self._print(f"     Claimed: {cells}")

    def _get_move(self) -> Optional[dict]:
        try:
            raw = input("  Enter move> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            raise SystemExit

        if not raw:
            return None

        if raw == "q":
            print("Goodbye!")
            raise SystemExit

        if raw == "help":
            self._print_help()
            return None

        if raw == "moves":
            self._show_moves()
            return None

        if raw == "undo":
            self._undo()
            return None

        payload = parse_move_text(raw)
        if payload is None:
            print("  Invalid move format. Type 'help' for syntax.")
        return payload

    def _show_moves(self):
        legal = self.board.valid_moves()
        if not legal:
            print("  No legal moves!")
            return

        print(f"\n  Legal moves ({len(legal)} total):")
        for row in range(self.board.size):
            in_row = [move.to_notation() for move in legal if move.row == row]
            if in_row:
                print(f"    {' '.join(in_row)}")
        print()

    def _undo(self):
        result = self.session.undo()
        if "error" in result:
            print(f"  {result['error']}")
            return
        print("  Undid last move.")

    def _print_help(self):
        sides = ", ".join(f"{name.lower()}={side}" for side, name in SIDE_NAMES.items())
        print(
            f"""
  === Move notation ===
  {{row}} {{col}} {{side}}     e.g. 0 2 t   3 1 b   1,4r

  row, col = cell coordinates, 0 at the top-left
  side     = {sides}

  === Commands ===
  moves  - list all legal moves
  undo   - undo last move
  help   - show this help
  q      - quit
"""
        )


def parse_move_text(text: str) -> Optional[dict]:
    """Turn '2 3 t', '2,3,t' or '2,3t' into a move payload."""
    cleaned = text.replace(",", " ").strip()
    parts = cleaned.split()
    if len(parts) == 2 and parts[1][-1:].isalpha():
        parts = [parts[0], parts[1][:-1], parts[1][-1]]
    if len(parts) != 3:
        return None

    row, col, side = parts
    if not row.isdigit() or not col.isdigit():
        return None
    return {"row": row, "col": col, "side": side}
