"""Tally result domain model.

A tally resolves to exactly one of two outcomes: a single winning
proposal, or no winner (nobody voted, or two or more proposals share
the maximum count). A no-winner result never carries a proposal id.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

NO_VOTES_REASON: str = "no proposal received any vote"
TIE_REASON: str = "tie among two or more proposals"


class TallyOutcome(Enum):
    """Outcome of a tally."""

    WINNER = "WINNER"
    NO_WINNER = "NO_WINNER"


@dataclass(frozen=True, eq=True)
class TallyResult:
    """Result of one tally run.

    Attributes:
        outcome: WINNER or NO_WINNER.
        max_votes: Highest vote count observed (0 for an empty registry).
        top_proposal_ids: Every proposal id holding max_votes, ascending.
        tallied_at: When the tally ran (UTC).
        winning_proposal_id: Set only when outcome is WINNER.
        reason: Set only when outcome is NO_WINNER.
    """

    outcome: TallyOutcome
    max_votes: int
    tallied_at: datetime
    top_proposal_ids: tuple[int, ...] = field(default_factory=tuple)
    winning_proposal_id: int | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.outcome is TallyOutcome.WINNER and self.winning_proposal_id is None:
            raise ValueError("WINNER result requires winning_proposal_id")
        if self.outcome is TallyOutcome.NO_WINNER and self.winning_proposal_id is not None:
            raise ValueError("NO_WINNER result must not carry winning_proposal_id")

    @property
    def winner_elected(self) -> bool:
        return self.outcome is TallyOutcome.WINNER

    @property
    def is_tie(self) -> bool:
        return len(self.top_proposal_ids) > 1

    @classmethod
    def winner(
        cls, proposal_id: int, max_votes: int, tallied_at: datetime
    ) -> TallyResult:
        """Create a WINNER result."""
        return cls(
            outcome=TallyOutcome.WINNER,
            max_votes=max_votes,
            tallied_at=tallied_at,
            top_proposal_ids=(proposal_id,),
            winning_proposal_id=proposal_id,
        )

    @classmethod
    def no_winner(
        cls,
        reason: str,
        max_votes: int,
        tallied_at: datetime,
        top_proposal_ids: tuple[int, ...] = (),
    ) -> TallyResult:
        """Create a NO_WINNER result."""
        return cls(
            outcome=TallyOutcome.NO_WINNER,
            max_votes=max_votes,
            tallied_at=tallied_at,
            top_proposal_ids=top_proposal_ids,
            reason=reason,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "outcome": self.outcome.value,
            "winner_elected": self.winner_elected,
            "winning_proposal_id": self.winning_proposal_id,
            "max_votes": self.max_votes,
            "top_proposal_ids": list(self.top_proposal_ids),
            "reason": self.reason,
            "tallied_at": self.tallied_at.isoformat(),
        }
