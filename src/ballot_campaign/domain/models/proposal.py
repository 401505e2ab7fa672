"""Proposal domain model and registry.

A proposal's identity is its index in the registry, assigned at insertion
and never reused within a generation. Descriptions are unique per
generation (exact, case-sensitive match).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ballot_campaign.domain.errors.campaign import (
    DuplicateProposalError,
    InvalidProposalIdError,
)


@dataclass(frozen=True, eq=True)
class Proposal:
    """A submitted proposal and its running vote count.

    Attributes:
        proposal_id: Index in the proposal sequence.
        description: Proposal text.
        vote_count: Votes received so far (non-negative).
    """

    proposal_id: int
    description: str
    vote_count: int = 0

    def __post_init__(self) -> None:
        if self.vote_count < 0:
            raise ValueError(f"vote_count must be non-negative, got {self.vote_count}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "proposal_id": self.proposal_id,
            "description": self.description,
            "vote_count": self.vote_count,
        }


class ProposalRegistry:
    """Ordered sequence of proposals for the current generation."""

    def __init__(self) -> None:
        self._proposals: list[Proposal] = []
        self._index_by_description: dict[str, int] = {}

    def submit(self, description: str) -> int:
        """Append a new proposal with zero votes.

        Args:
            description: Proposal text, unique within the generation.

        Returns:
            The new proposal's id (its index).

        Raises:
            DuplicateProposalError: If an identical description exists.
        """
        existing = self._index_by_description.get(description)
        if existing is not None:
            raise DuplicateProposalError(description, existing)

        proposal_id = len(self._proposals)
        self._proposals.append(Proposal(proposal_id=proposal_id, description=description))
        self._index_by_description[description] = proposal_id
        return proposal_id

    def validate_id(self, proposal_id: int) -> None:
        """Check that an id indexes the current sequence.

        Raises:
            InvalidProposalIdError: If the id is negative or out of range.
        """
        if proposal_id < 0 or proposal_id >= len(self._proposals):
            raise InvalidProposalIdError(proposal_id, len(self._proposals))

    def increment_vote(self, proposal_id: int) -> Proposal:
        """Add one vote to a proposal.

        Returns:
            The updated proposal.

        Raises:
            InvalidProposalIdError: If the id does not index the sequence.
        """
        self.validate_id(proposal_id)
        proposal = self._proposals[proposal_id]
        proposal = replace(proposal, vote_count=proposal.vote_count + 1)
        self._proposals[proposal_id] = proposal
        return proposal

    def get(self, proposal_id: int) -> Proposal:
        """Get one proposal by id.

        Raises:
            InvalidProposalIdError: If the id does not index the sequence.
        """
        self.validate_id(proposal_id)
        return self._proposals[proposal_id]

    def list(self) -> tuple[Proposal, ...]:
        """Return all proposals in id order."""
        return tuple(self._proposals)

    def count(self) -> int:
        return len(self._proposals)

    def total_votes(self) -> int:
        return sum(p.vote_count for p in self._proposals)

    def clear(self) -> None:
        """Remove every proposal (used on reset)."""
        self._proposals.clear()
        self._index_by_description.clear()

    def __len__(self) -> int:
        return len(self._proposals)
