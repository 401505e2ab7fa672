"""Campaign controller - single entry point for every campaign action.

Each mutating operation is composed from, in order:
1. caller authority (administrator-only actions)
2. phase guard (OPERATION_PHASES)
3. domain guards (registration state, duplicates, id bounds)
4. the mutation
5. the derived phase change and tally, where the operation has one

Steps 1-3 raise before anything changes, so a refused call leaves the
campaign exactly as it was. Every operation, reads included, runs under one
asyncio.Lock: calls are applied one at a time and never observe a
partially applied change.

Events are published after the change they describe, inside the same
locked unit of work.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from ballot_campaign.application.ports.administrator_check import (
    AdministratorCheckProtocol,
)
from ballot_campaign.application.ports.campaign_event_publisher import (
    CampaignEventPublisherProtocol,
)
from ballot_campaign.application.services.base import LoggingMixin
from ballot_campaign.config.campaign_config import DEFAULT_MAX_DESCRIPTION_LENGTH
from ballot_campaign.domain.errors.campaign import NoWinnerAvailableError
from ballot_campaign.domain.events.campaign import (
    CampaignEvent,
    NoWinnerEvent,
    ProposalRegisteredEvent,
    VoteCastEvent,
    VoterRegisteredEvent,
    WinnerSelectedEvent,
    WorkflowStatusChangedEvent,
)
from ballot_campaign.domain.exceptions import CampaignError
from ballot_campaign.domain.models.campaign_state import CampaignState
from ballot_campaign.domain.models.proposal import Proposal
from ballot_campaign.domain.models.tally import TallyResult
from ballot_campaign.domain.models.voter import Voter
from ballot_campaign.domain.models.workflow_status import (
    INITIAL_STATUS,
    PhaseTransition,
    WorkflowStatus,
)
from ballot_campaign.domain.services import guards


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


class CampaignController(LoggingMixin):
    """Orchestrates administrator and voter actions on one campaign.

    Example:
        >>> controller = CampaignController(admin_check, event_bus)
        >>> await controller.add_voter("administrator", "alice")
        >>> await controller.open_proposals_registration("administrator")
        >>> await controller.add_proposal("alice", "Alpha")
    """

    def __init__(
        self,
        administrator_check: AdministratorCheckProtocol,
        event_publisher: CampaignEventPublisherProtocol,
        *,
        state: CampaignState | None = None,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the controller.

        Args:
            administrator_check: Capability answering "is this caller the administrator?".
            event_publisher: Destination for campaign events.
            state: Existing campaign state (a fresh campaign when None).
            max_description_length: Longest accepted proposal description.
            clock: Source of UTC timestamps.
        """
        self._administrator_check = administrator_check
        self._event_publisher = event_publisher
        self._state = state if state is not None else CampaignState()
        self._max_description_length = max_description_length
        self._clock = clock
        self._lock = asyncio.Lock()
        self._init_logger()

    # ------------------------------------------------------------------
    # Administrator actions
    # ------------------------------------------------------------------

    async def add_voter(self, caller_id: str, voter_id: str) -> Voter:
        """Register a voter for the current generation.

        Raises:
            UnauthorizedError: Caller is not the administrator.
            WrongPhaseError: Phase is not REGISTERING_VOTERS.
            AlreadyRegisteredError: Identity is already registered.
        """
        log = self._log_operation(guards.ADD_VOTER, caller_id=caller_id, voter_id=voter_id)
        async with self._lock:
            await self._authorize(
                log,
                guards.ADD_VOTER,
                caller_id,
                lambda: guards.require_not_registered(self._state, voter_id),
            )
            voter = self._state.voters.register(voter_id)
            await self._publish(
                VoterRegisteredEvent(
                    occurred_at=self._clock(),
                    generation=self._state.workflow.generation,
                    voter_id=voter_id,
                )
            )
        log.info("voter_registered")
        return voter

    async def open_proposals_registration(self, caller_id: str) -> PhaseTransition:
        """Advance to PROPOSALS_REGISTRATION_STARTED (needs at least one voter)."""
        operation = guards.OPEN_PROPOSALS_REGISTRATION
        return await self._advance(
            caller_id,
            operation,
            WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
            lambda: guards.require_voters_registered(self._state, operation),
        )

    async def close_proposals_registration(self, caller_id: str) -> PhaseTransition:
        """Advance to PROPOSALS_REGISTRATION_ENDED (needs at least one proposal)."""
        operation = guards.CLOSE_PROPOSALS_REGISTRATION
        return await self._advance(
            caller_id,
            operation,
            WorkflowStatus.PROPOSALS_REGISTRATION_ENDED,
            lambda: guards.require_proposals_registered(self._state, operation),
        )

    async def open_voting_session(self, caller_id: str) -> PhaseTransition:
        """Advance to VOTING_SESSION_STARTED."""
        return await self._advance(
            caller_id, guards.OPEN_VOTING_SESSION, WorkflowStatus.VOTING_SESSION_STARTED
        )

    async def close_voting_session(self, caller_id: str) -> PhaseTransition:
        """Advance to VOTING_SESSION_ENDED."""
        return await self._advance(
            caller_id, guards.CLOSE_VOTING_SESSION, WorkflowStatus.VOTING_SESSION_ENDED
        )

    async def start_counting(self, caller_id: str) -> TallyResult:
        """Advance to VOTES_TALLIED and tally the votes.

        Returns:
            The TallyResult of this generation.

        Raises:
            UnauthorizedError: Caller is not the administrator.
            WrongPhaseError: Phase is not VOTING_SESSION_ENDED.
        """
        operation = guards.START_COUNTING
        log = self._log_operation(operation, caller_id=caller_id)
        async with self._lock:
            await self._authorize(log, operation, caller_id)
            await self._apply_transition(caller_id, WorkflowStatus.VOTES_TALLIED)

            now = self._clock()
            result = self._state.tally.run(self._state.proposals.list(), now)
            generation = self._state.workflow.generation
            if result.winning_proposal_id is not None:
                await self._publish(
                    WinnerSelectedEvent(
                        occurred_at=now,
                        generation=generation,
                        proposal_id=result.winning_proposal_id,
                        vote_count=result.max_votes,
                    )
                )
            else:
                await self._publish(
                    NoWinnerEvent(
                        occurred_at=now,
                        generation=generation,
                        reason=result.reason or "",
                        max_votes=result.max_votes,
                        tied_proposal_ids=result.top_proposal_ids,
                    )
                )
        log.info(
            "tally_completed",
            outcome=result.outcome.value,
            winning_proposal_id=result.winning_proposal_id,
            max_votes=result.max_votes,
            reason=result.reason,
        )
        return result

    async def reset_campaign(self, caller_id: str) -> PhaseTransition:
        """Start a new generation.

        Clears voter flags (identities stay enumerable), removes every
        proposal, then returns the phase to REGISTERING_VOTERS.

        Raises:
            UnauthorizedError: Caller is not the administrator.
            WrongPhaseError: Phase is already REGISTERING_VOTERS.
        """
        operation = guards.RESET_CAMPAIGN
        log = self._log_operation(operation, caller_id=caller_id)
        async with self._lock:
            await self._authorize(log, operation, caller_id)
            self._state.voters.reset_all()
            self._state.proposals.clear()
            transition = await self._apply_transition(caller_id, INITIAL_STATUS)
        log.info(
            "campaign_reset",
            previous_status=transition.previous.value,
            generation=self._state.workflow.generation,
        )
        return transition

    # ------------------------------------------------------------------
    # Voter actions
    # ------------------------------------------------------------------

    async def add_proposal(self, caller_id: str, description: str) -> Proposal:
        """Submit a proposal as a registered voter who has not voted.

        Raises:
            WrongPhaseError: Phase is not PROPOSALS_REGISTRATION_STARTED.
            VoterNotEligibleError: Caller is not a registered voter.
            AlreadyVotedError: Caller has already voted.
            InvalidDescriptionError: Description is empty or too long.
            DuplicateProposalError: Description already submitted.
        """
        operation = guards.ADD_PROPOSAL
        log = self._log_operation(operation, caller_id=caller_id)
        async with self._lock:
            await self._authorize(
                log,
                operation,
                caller_id,
                lambda: guards.require_eligible_voter(self._state, caller_id, operation),
                lambda: guards.require_valid_description(
                    description, self._max_description_length
                ),
                lambda: guards.require_unique_description(self._state, description),
            )
            proposal_id = self._state.proposals.submit(description)
            proposal = self._state.proposals.get(proposal_id)
            await self._publish(
                ProposalRegisteredEvent(
                    occurred_at=self._clock(),
                    generation=self._state.workflow.generation,
                    proposal_id=proposal_id,
                    submitted_by=caller_id,
                )
            )
        log.info("proposal_registered", proposal_id=proposal_id)
        return proposal

    async def vote(self, caller_id: str, proposal_id: int) -> Voter:
        """Cast the caller's single vote.

        Raises:
            WrongPhaseError: Phase is not VOTING_SESSION_STARTED.
            VoterNotEligibleError: Caller is not a registered voter.
            AlreadyVotedError: Caller has already voted.
            InvalidProposalIdError: proposal_id does not index a proposal.
        """
        operation = guards.VOTE
        log = self._log_operation(operation, caller_id=caller_id, proposal_id=proposal_id)
        async with self._lock:
            await self._authorize(
                log,
                operation,
                caller_id,
                lambda: guards.require_eligible_voter(self._state, caller_id, operation),
                lambda: guards.require_valid_proposal_id(self._state, proposal_id),
            )
            voter = self._state.voters.record_vote(caller_id, proposal_id)
            self._state.proposals.increment_vote(proposal_id)
            await self._publish(
                VoteCastEvent(
                    occurred_at=self._clock(),
                    generation=self._state.workflow.generation,
                    voter_id=caller_id,
                    proposal_id=proposal_id,
                )
            )
        log.info("vote_cast")
        return voter

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_voter_choice(self, caller_id: str, voter_id: str) -> int:
        """Read which proposal a voter chose.

        Votes are public once cast; any caller may read them after the
        voting session has ended.

        Raises:
            WrongPhaseError: Voting session has not ended.
            NotRegisteredError: Target is not a registered voter.
            VoterHasNotVotedError: Target did not vote.
        """
        operation = guards.GET_VOTER_CHOICE
        log = self._log_operation(operation, caller_id=caller_id, voter_id=voter_id)
        async with self._lock:
            await self._authorize(
                log,
                operation,
                caller_id,
                lambda: guards.require_voted(self._state, voter_id),
            )
            return self._state.voters.voted_proposal_id(voter_id)

    async def current_phase(self) -> WorkflowStatus:
        async with self._lock:
            return self._state.phase

    async def list_voters(self) -> tuple[str, ...]:
        """Every identity ever registered, in registration order."""
        async with self._lock:
            return self._state.voters.list()

    async def voter_status(self, voter_id: str) -> Voter | None:
        """Voting state of an identity; None if it was never registered."""
        async with self._lock:
            return self._state.voters.get(voter_id)

    async def list_proposals(self) -> tuple[Proposal, ...]:
        async with self._lock:
            return self._state.proposals.list()

    async def get_proposal(self, proposal_id: int) -> Proposal:
        """Read one proposal.

        Raises:
            InvalidProposalIdError: proposal_id does not index a proposal.
        """
        async with self._lock:
            return self._state.proposals.get(proposal_id)

    async def winner(self) -> int:
        """Id of the elected proposal.

        Raises:
            NoWinnerAvailableError: Votes are not tallied, or nobody was elected.
        """
        async with self._lock:
            return self._winning_proposal_id()

    async def winner_details(self) -> Proposal:
        """The elected proposal with its final vote count.

        Raises:
            NoWinnerAvailableError: Votes are not tallied, or nobody was elected.
        """
        async with self._lock:
            return self._state.proposals.get(self._winning_proposal_id())

    async def tally_result(self) -> TallyResult | None:
        """Tally result of the current generation, None before counting."""
        async with self._lock:
            if self._state.phase is not WorkflowStatus.VOTES_TALLIED:
                return None
            return self._state.tally.last_result

    async def transition_history(self) -> tuple[PhaseTransition, ...]:
        async with self._lock:
            return self._state.workflow.history()

    async def administrator(self) -> str:
        return await self._administrator_check.get_administrator()

    async def campaign_summary(self) -> dict[str, object]:
        async with self._lock:
            return self._state.summary()

    # ------------------------------------------------------------------
    # Internals (callers hold the lock)
    # ------------------------------------------------------------------

    async def _authorize(
        self,
        log: structlog.BoundLogger,
        operation: str,
        caller_id: str,
        *checks: Callable[[], None],
    ) -> None:
        """Run authority, phase and domain guards in that order."""
        try:
            if operation in guards.ADMINISTRATOR_OPERATIONS:
                is_administrator = await self._administrator_check.is_administrator(
                    caller_id
                )
                guards.require_administrator(caller_id, is_administrator, operation)
            guards.require_phase(self._state, operation)
            for check in checks:
                check()
        except CampaignError as exc:
            log.warning(
                f"{operation}_rejected",
                error_code=exc.error_code,
                error_type=type(exc).__name__,
                reason=str(exc),
                phase=self._state.phase.value,
            )
            raise

    async def _advance(
        self,
        caller_id: str,
        operation: str,
        target: WorkflowStatus,
        *checks: Callable[[], None],
    ) -> PhaseTransition:
        log = self._log_operation(operation, caller_id=caller_id)
        async with self._lock:
            await self._authorize(log, operation, caller_id, *checks)
            transition = await self._apply_transition(caller_id, target)
        log.info(
            "phase_advanced",
            previous_status=transition.previous.value,
            new_status=transition.new.value,
        )
        return transition

    async def _apply_transition(
        self, caller_id: str, target: WorkflowStatus
    ) -> PhaseTransition:
        transition = self._state.workflow.advance_to(target, self._clock())
        await self._publish(
            WorkflowStatusChangedEvent(
                occurred_at=transition.transitioned_at,
                generation=transition.generation,
                previous_status=transition.previous,
                new_status=transition.new,
                triggered_by=caller_id,
            )
        )
        return transition

    def _winning_proposal_id(self) -> int:
        if self._state.phase is not WorkflowStatus.VOTES_TALLIED:
            raise NoWinnerAvailableError(
                f"votes have not been tallied (phase: {self._state.phase.value})"
            )
        return self._state.tally.winning_proposal_id()

    async def _publish(self, event: CampaignEvent) -> None:
        await self._event_publisher.publish(event)
