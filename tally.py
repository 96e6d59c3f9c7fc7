# tally.py
from __future__ import annotations
from dataclasses import dataclass, replace

from eval_hand import Outcome

# "player2" credits ties to player 2, like the classic driver.
# "separate" keeps them in their own counter.
TIE_POLICIES = ("player2", "separate")
DEFAULT_TIE_POLICY = "player2"


@dataclass(frozen=True, slots=True)
class Tally:
    player1 : int = 0
    player2 : int = 0
    ties    : int = 0
    skipped : int = 0

    def record(self, outcome: Outcome, policy: str = DEFAULT_TIE_POLICY) -> Tally:
        """Return a new Tally with one more comparison result folded in."""
        if policy not in TIE_POLICIES:
            raise ValueError(f"Unknown tie policy {policy!r}, expected one of {TIE_POLICIES}")

        if outcome is Outcome.FIRST_WINS:
            return replace(self, player1=self.player1 + 1)
        if outcome is Outcome.SECOND_WINS or policy == "player2":
            return replace(self, player2=self.player2 + 1)
        return replace(self, ties=self.ties + 1)

    def skip(self) -> Tally:
        return replace(self, skipped=self.skipped + 1)

    def report_lines(self, policy: str = DEFAULT_TIE_POLICY) -> list[str]:
        lines = [f"Player 1: {self.player1}", f"Player 2: {self.player2}"]
        if policy == "separate":
            lines.append(f"Ties: {self.ties}")
        return lines
