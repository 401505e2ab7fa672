"""Campaign errors for the ballot campaign workflow.

This module defines the four error kinds every campaign operation can raise:

- UnauthorizedError: a non-administrator invoked an administrator-only action
- InvalidTransitionError: the workflow phase does not permit the call
- PreconditionNotMetError: registry state refuses the call
- NoWinnerAvailableError: a winner was read before one was elected

Precondition failures are further split into specific subclasses so callers
can discriminate while still catching the kind. Every error carries a stable
``error_code`` for the HTTP layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ballot_campaign.domain.exceptions import CampaignError

if TYPE_CHECKING:
    from ballot_campaign.domain.models.workflow_status import WorkflowStatus


class UnauthorizedError(CampaignError):
    """Raised when a non-administrator invokes an administrator-only action.

    Attributes:
        caller_id: Identity that attempted the action.
        operation: Name of the refused operation.
    """

    error_code = "UNAUTHORIZED"

    def __init__(self, caller_id: str, operation: str) -> None:
        self.caller_id = caller_id
        self.operation = operation
        super().__init__(
            f"Caller {caller_id!r} is not the administrator; "
            f"{operation} is restricted to the administrator"
        )


class InvalidTransitionError(CampaignError):
    """Raised when a phase change is not along a permitted edge.

    Attributes:
        from_status: Current workflow status.
        to_status: Attempted target status.
        allowed_transitions: Valid targets from the current status.
    """

    error_code = "INVALID_TRANSITION"

    def __init__(
        self,
        from_status: WorkflowStatus,
        to_status: WorkflowStatus,
        allowed_transitions: list[WorkflowStatus] | None = None,
        message: str | None = None,
    ) -> None:
        self.from_status = from_status
        self.to_status = to_status
        self.allowed_transitions = allowed_transitions or []

        if message is None:
            allowed_str = (
                f" Valid transitions: {[s.value for s in self.allowed_transitions]}"
                if self.allowed_transitions
                else ""
            )
            message = (
                f"Invalid phase transition: {from_status.value} -> "
                f"{to_status.value}.{allowed_str}"
            )
        super().__init__(message)


class WrongPhaseError(InvalidTransitionError):
    """Raised when an operation is called outside the phase it requires.

    Attributes:
        operation: Name of the refused operation.
        current: Current workflow status.
        required: Status (or statuses) in which the operation is legal.
    """

    def __init__(
        self,
        operation: str,
        current: WorkflowStatus,
        required: tuple[WorkflowStatus, ...],
    ) -> None:
        self.operation = operation
        self.current = current
        self.required = required
        super().__init__(
            from_status=current,
            to_status=current,
            message=(
                f"{operation} is not allowed during {current.value}; "
                f"required phase: {', '.join(s.value for s in required)}"
            ),
        )


class PreconditionNotMetError(CampaignError):
    """Raised when registry state refuses an otherwise well-formed call."""

    error_code = "PRECONDITION_NOT_MET"


class AlreadyRegisteredError(PreconditionNotMetError):
    """Raised when registering an identity that is already registered."""

    def __init__(self, voter_id: str) -> None:
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id!r} is already registered")


class NotRegisteredError(PreconditionNotMetError):
    """Raised when looking up voting state of an identity never registered."""

    def __init__(self, voter_id: str) -> None:
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id!r} was never registered")


class VoterNotEligibleError(PreconditionNotMetError):
    """Raised when the caller is not a registered voter of this generation."""

    def __init__(self, voter_id: str, operation: str) -> None:
        self.voter_id = voter_id
        self.operation = operation
        super().__init__(
            f"{operation} requires a registered voter; {voter_id!r} is not registered"
        )


class AlreadyVotedError(PreconditionNotMetError):
    """Raised when a voter who has already voted tries to act as a fresh voter."""

    def __init__(self, voter_id: str) -> None:
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id!r} has already voted")


class VoterHasNotVotedError(PreconditionNotMetError):
    """Raised when reading the choice of a voter who did not vote."""

    def __init__(self, voter_id: str) -> None:
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id!r} has not voted")


class DuplicateProposalError(PreconditionNotMetError):
    """Raised when a description equals an existing proposal's description."""

    def __init__(self, description: str, existing_proposal_id: int) -> None:
        self.description = description
        self.existing_proposal_id = existing_proposal_id
        super().__init__(
            f"Proposal {description!r} already exists "
            f"(proposal_id={existing_proposal_id})"
        )


class InvalidDescriptionError(PreconditionNotMetError):
    """Raised when a proposal description is empty or too long."""

    def __init__(self, reason: str = "Proposal description must not be empty") -> None:
        super().__init__(reason)


class InvalidProposalIdError(PreconditionNotMetError):
    """Raised when a proposal id does not index the current proposal sequence."""

    def __init__(self, proposal_id: int, proposal_count: int) -> None:
        self.proposal_id = proposal_id
        self.proposal_count = proposal_count
        super().__init__(
            f"Proposal id {proposal_id} is invalid; "
            f"{proposal_count} proposal(s) registered"
        )


class EmptyRegistryError(PreconditionNotMetError):
    """Raised when advancing a phase whose registry is still empty."""

    def __init__(self, registry: str, operation: str) -> None:
        self.registry = registry
        self.operation = operation
        super().__init__(f"{operation} requires at least one registered {registry}")


class NoWinnerAvailableError(CampaignError):
    """Raised when a winner is read but none is available.

    A winner is only available once votes are tallied and exactly one
    proposal held the maximum vote count.
    """

    error_code = "NO_WINNER_AVAILABLE"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"No winner available: {reason}")
