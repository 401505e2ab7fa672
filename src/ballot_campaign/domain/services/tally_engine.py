"""Tally engine - computes the winning proposal or an explicit no-winner.

Algorithm:
1. max_votes = highest vote count, 0 when there are no proposals
2. max_votes == 0 -> NO_WINNER (nobody voted)
3. exactly one proposal at max_votes -> WINNER
4. two or more proposals at max_votes -> NO_WINNER (tie)

Ties are detected by counting indices at the maximum, so iteration order
never changes the outcome. The engine keeps its last result until the
next run; winner reads are gated on ``winner_elected``.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ballot_campaign.domain.errors.campaign import NoWinnerAvailableError
from ballot_campaign.domain.models.proposal import Proposal
from ballot_campaign.domain.models.tally import (
    NO_VOTES_REASON,
    TIE_REASON,
    TallyResult,
)


class TallyEngine:
    """Runs tallies and holds the last tally state."""

    def __init__(self) -> None:
        self._last_result: TallyResult | None = None

    def run(self, proposals: Iterable[Proposal], timestamp: datetime) -> TallyResult:
        """Tally a proposal sequence.

        Args:
            proposals: Proposals of the current generation, any order.
            timestamp: Current time from the caller.

        Returns:
            The TallyResult, also kept as the engine's last result.
        """
        ordered = sorted(proposals, key=lambda p: p.proposal_id)
        max_votes = max((p.vote_count for p in ordered), default=0)

        if max_votes == 0:
            result = TallyResult.no_winner(
                reason=NO_VOTES_REASON, max_votes=0, tallied_at=timestamp
            )
        else:
            top_ids = tuple(p.proposal_id for p in ordered if p.vote_count == max_votes)
            if len(top_ids) == 1:
                result = TallyResult.winner(
                    proposal_id=top_ids[0], max_votes=max_votes, tallied_at=timestamp
                )
            else:
                result = TallyResult.no_winner(
                    reason=TIE_REASON,
                    max_votes=max_votes,
                    tallied_at=timestamp,
                    top_proposal_ids=top_ids,
                )

        self._last_result = result
        return result

    @property
    def winner_elected(self) -> bool:
        return self._last_result is not None and self._last_result.winner_elected

    @property
    def last_result(self) -> TallyResult | None:
        return self._last_result

    def winning_proposal_id(self) -> int:
        """Get the elected proposal id.

        Raises:
            NoWinnerAvailableError: If the last tally elected nobody.
        """
        result = self._last_result
        if result is None:
            raise NoWinnerAvailableError("votes have not been tallied")
        if result.winning_proposal_id is None:
            raise NoWinnerAvailableError(result.reason or "no winner elected")
        return result.winning_proposal_id
