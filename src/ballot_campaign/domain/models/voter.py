"""Voter domain model and registry.

Voters are keyed by an opaque caller identity. An identity that was never
registered has no record at all; an identity registered in an earlier
generation keeps its record, with every flag cleared by reset.

Ownership:
- VoterRegistry is owned and mutated only by the campaign controller
- Identities stay enumerable across generations; only flags reset
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ballot_campaign.domain.errors.campaign import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    NotRegisteredError,
)


@dataclass(frozen=True, eq=True)
class Voter:
    """Voting state of one identity.

    Attributes:
        voter_id: Opaque unique caller identity.
        is_registered: Eligible in the current generation.
        has_voted: A vote was cast in the current generation.
        voted_proposal_id: Index of the chosen proposal (0 until a vote is cast).
    """

    voter_id: str
    is_registered: bool = False
    has_voted: bool = False
    voted_proposal_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "voter_id": self.voter_id,
            "is_registered": self.is_registered,
            "has_voted": self.has_voted,
            "voted_proposal_id": self.voted_proposal_id,
        }


class VoterRegistry:
    """Ordered registry of voter identities and their voting state.

    The identity sequence is append-only and holds each identity at most
    once. Records are immutable; every mutation replaces the stored record.
    """

    def __init__(self) -> None:
        self._order: list[str] = []
        self._voters: dict[str, Voter] = {}

    def register(self, voter_id: str) -> Voter:
        """Mark an identity as registered for the current generation.

        Args:
            voter_id: Identity to register.

        Returns:
            The updated voter record.

        Raises:
            AlreadyRegisteredError: If the identity is already registered.
        """
        existing = self._voters.get(voter_id)
        if existing is not None and existing.is_registered:
            raise AlreadyRegisteredError(voter_id)

        # Re-registering after reset keeps the original position
        if existing is None:
            self._order.append(voter_id)
            existing = Voter(voter_id=voter_id)

        voter = replace(existing, is_registered=True)
        self._voters[voter_id] = voter
        return voter

    def list(self) -> tuple[str, ...]:
        """Return every identity ever registered, in registration order."""
        return tuple(self._order)

    def get(self, voter_id: str) -> Voter | None:
        """Return the voter record, or None if the identity was never seen."""
        return self._voters.get(voter_id)

    def is_registered(self, voter_id: str) -> bool:
        voter = self._voters.get(voter_id)
        return voter is not None and voter.is_registered

    def has_voted(self, voter_id: str) -> bool:
        """Check whether an identity has voted.

        Raises:
            NotRegisteredError: If the identity was never registered.
        """
        return self._require(voter_id).has_voted

    def voted_proposal_id(self, voter_id: str) -> int:
        """Get the proposal index an identity voted for.

        Raises:
            NotRegisteredError: If the identity was never registered.
        """
        return self._require(voter_id).voted_proposal_id

    def record_vote(self, voter_id: str, proposal_id: int) -> Voter:
        """Record a vote for an identity.

        Args:
            voter_id: Identity casting the vote.
            proposal_id: Index of the chosen proposal.

        Returns:
            The updated voter record.

        Raises:
            NotRegisteredError: If the identity was never registered.
            AlreadyVotedError: If the identity has already voted.
        """
        voter = self._require(voter_id)
        if voter.has_voted:
            raise AlreadyVotedError(voter_id)

        voter = replace(voter, has_voted=True, voted_proposal_id=proposal_id)
        self._voters[voter_id] = voter
        return voter

    def reset_all(self) -> None:
        """Clear every voter's flags without forgetting identities."""
        for voter_id in self._order:
            self._voters[voter_id] = Voter(voter_id=voter_id)

    def registered_count(self) -> int:
        return sum(1 for voter in self._voters.values() if voter.is_registered)

    def voted_count(self) -> int:
        return sum(1 for voter in self._voters.values() if voter.has_voted)

    def __len__(self) -> int:
        return len(self._order)

    def _require(self, voter_id: str) -> Voter:
        voter = self._voters.get(voter_id)
        if voter is None:
            raise NotRegisteredError(voter_id)
        return voter
