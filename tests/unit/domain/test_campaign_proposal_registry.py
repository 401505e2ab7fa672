"""Unit tests for ProposalRegistry."""

import pytest

from ballot_campaign.domain.errors import DuplicateProposalError, InvalidProposalIdError
from ballot_campaign.domain.models.proposal import Proposal, ProposalRegistry


@pytest.fixture
def registry() -> ProposalRegistry:
    return ProposalRegistry()


class TestSubmit:
    """Tests for proposal submission."""

    def test_ids_are_sequential(self, registry: ProposalRegistry) -> None:
        assert registry.submit("Alpha") == 0
        assert registry.submit("Beta") == 1
        assert registry.list() == (
            Proposal(proposal_id=0, description="Alpha"),
            Proposal(proposal_id=1, description="Beta"),
        )

    def test_duplicate_description_raises(self, registry: ProposalRegistry) -> None:
        registry.submit("Alpha")

        with pytest.raises(DuplicateProposalError) as exc_info:
            registry.submit("Alpha")

        assert exc_info.value.existing_proposal_id == 0
        assert registry.count() == 1

    def test_descriptions_compare_exactly(self, registry: ProposalRegistry) -> None:
        registry.submit("Alpha")
        registry.submit("alpha")

        assert registry.count() == 2


class TestVotes:
    """Tests for vote counting on proposals."""

    def test_increment_vote(self, registry: ProposalRegistry) -> None:
        registry.submit("Alpha")

        registry.increment_vote(0)
        proposal = registry.increment_vote(0)

        assert proposal.vote_count == 2
        assert registry.get(0).vote_count == 2
        assert registry.total_votes() == 2

    @pytest.mark.parametrize("proposal_id", [-1, 1, 99])
    def test_out_of_range_id_raises(
        self, registry: ProposalRegistry, proposal_id: int
    ) -> None:
        registry.submit("Alpha")

        with pytest.raises(InvalidProposalIdError):
            registry.increment_vote(proposal_id)
        with pytest.raises(InvalidProposalIdError):
            registry.get(proposal_id)

    def test_negative_vote_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Proposal(proposal_id=0, description="Alpha", vote_count=-1)


class TestClear:
    """Tests for clearing proposals on reset."""

    def test_clear_restarts_ids_and_allows_same_text(
        self, registry: ProposalRegistry
    ) -> None:
        registry.submit("Alpha")
        registry.submit("Beta")

        registry.clear()

        assert len(registry) == 0
        assert registry.submit("Beta") == 0
