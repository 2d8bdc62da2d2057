"""Garden growth stages derived from how many words have been found."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

LadderMode = Literal["count", "percent"]


@dataclass(frozen=True)
class GrowthLadder:
    """Ascending thresholds; stage N is reached once thresholds[N] is met.

    In "count" mode thresholds are found-word counts, in "percent" mode they
    are percentages of the target list.
    """
    name: str
    thresholds: tuple[int, ...]
    mode: LadderMode = "count"

    def __post_init__(self) -> None:
        if not self.thresholds or self.thresholds[0] != 0:
            raise ValueError("Growth ladder must start at threshold 0")
        if list(self.thresholds) != sorted(set(self.thresholds)):
            raise ValueError("Growth thresholds must be strictly ascending")

    @property
    def stages(self) -> int:
        return len(self.thresholds)


FIVE_STAGE = GrowthLadder("five", (0, 2, 4, 6, 8), "count")
THREE_STAGE = GrowthLadder("three", (0, 40, 80), "percent")

LADDERS: dict[str, GrowthLadder] = {
    FIVE_STAGE.name: FIVE_STAGE,
    THREE_STAGE.name: THREE_STAGE,
}


def growth_stage(found_count: int, total: int,
                 ladder: GrowthLadder = FIVE_STAGE) -> int:
    """Highest stage whose threshold the found count has reached."""
    if ladder.mode == "percent":
        value = (found_count * 100) / total if total else 0
    else:
        value = found_count
    stage = 0
    for i, threshold in enumerate(ladder.thresholds):
        if value >= threshold:
            stage = i
    return stage


def growth_class(stage: int) -> str:
    """CSS class for a stage; stage 0 uses the base style."""
    return f"growth-stage-{stage}" if stage > 0 else ""
