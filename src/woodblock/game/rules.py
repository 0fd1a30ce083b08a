from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    points_per_cell: int = 1
    line_clear_points: int = 10
    swap_cost: int = 100

    def placement_score(self, cells: int) -> int:
        return cells * self.points_per_cell

    def clear_bonus(self, lines: int) -> int:
        """Triangular combo: 1 line -> 10, 2 -> 30, 3 -> 60, 4 -> 100."""
        if lines <= 0:
            return 0
        return lines * (lines + 1) // 2 * self.line_clear_points

    def score_for_placement(self, cells: int, lines: int) -> int:
        return self.placement_score(cells) + self.clear_bonus(lines)

    def can_swap(self, score: int) -> bool:
        return score >= self.swap_cost
