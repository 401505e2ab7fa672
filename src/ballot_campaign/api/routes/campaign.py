"""Campaign API routes.

FastAPI router for the single-administrator election campaign. Every route
delegates to CampaignController; refusals come back as RFC 7807 problem
details carrying the campaign error code:

- 403 UNAUTHORIZED: non-administrator called an administrator action
- 409 INVALID_TRANSITION: the current phase does not permit the call
- 422 PRECONDITION_NOT_MET: registry state refuses the call
- 404 NO_WINNER_AVAILABLE: winner read before one was elected

The caller identity is the X-Caller-ID header.
"""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request

from ballot_campaign.api.dependencies.campaign import (
    get_caller_id,
    get_campaign_controller,
)
from ballot_campaign.api.models.campaign import (
    CampaignErrorResponse,
    CampaignSummaryResponse,
    CastVoteRequest,
    PhaseResponse,
    PhaseTransitionResponse,
    ProposalListResponse,
    ProposalResponse,
    RegisterVoterRequest,
    SubmitProposalRequest,
    TallyResultResponse,
    TransitionHistoryResponse,
    VoterChoiceResponse,
    VoterListResponse,
    VoterResponse,
    WinnerResponse,
)
from ballot_campaign.application.services.campaign_controller import CampaignController
from ballot_campaign.domain.errors import (
    InvalidTransitionError,
    NoWinnerAvailableError,
    PreconditionNotMetError,
    UnauthorizedError,
)
from ballot_campaign.domain.exceptions import CampaignError

router = APIRouter(prefix="/v1/campaign", tags=["campaign"])

# (status, type URI, title) per error kind, most specific first
_PROBLEM_TYPES: list[tuple[type[CampaignError], int, str, str]] = [
    (UnauthorizedError, 403, "urn:ballot-campaign:unauthorized", "Unauthorized"),
    (
        InvalidTransitionError,
        409,
        "urn:ballot-campaign:invalid-transition",
        "Invalid Phase Transition",
    ),
    (
        PreconditionNotMetError,
        422,
        "urn:ballot-campaign:precondition-not-met",
        "Precondition Not Met",
    ),
    (
        NoWinnerAvailableError,
        404,
        "urn:ballot-campaign:no-winner-available",
        "No Winner Available",
    ),
]

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    403: {"model": CampaignErrorResponse, "description": "Caller is not the administrator"},
    409: {"model": CampaignErrorResponse, "description": "Not allowed in the current phase"},
    422: {"model": CampaignErrorResponse, "description": "Precondition not met"},
}


async def _raise_problem(
    exc: CampaignError, request: Request, controller: CampaignController
) -> NoReturn:
    """Translate a campaign error into an RFC 7807 HTTPException."""
    status, type_uri, title = 500, "urn:ballot-campaign:error", "Campaign Error"
    for error_type, error_status, error_uri, error_title in _PROBLEM_TYPES:
        if isinstance(exc, error_type):
            status, type_uri, title = error_status, error_uri, error_title
            break
    phase = await controller.current_phase()
    raise HTTPException(
        status_code=status,
        detail={
            "type": type_uri,
            "title": title,
            "status": status,
            "detail": str(exc),
            "instance": str(request.url),
            "error_code": exc.error_code,
            "phase": phase.value,
        },
    ) from None


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------


@router.get("/phase", response_model=PhaseResponse, summary="Current workflow phase")
async def get_phase(
    controller: CampaignController = Depends(get_campaign_controller),
) -> PhaseResponse:
    summary = await controller.campaign_summary()
    return PhaseResponse(phase=summary["phase"], generation=summary["generation"])


@router.get(
    "/summary", response_model=CampaignSummaryResponse, summary="Campaign counters"
)
async def get_summary(
    controller: CampaignController = Depends(get_campaign_controller),
) -> CampaignSummaryResponse:
    summary = await controller.campaign_summary()
    administrator = await controller.administrator()
    return CampaignSummaryResponse(administrator=administrator, **summary)


@router.get("/voters", response_model=VoterListResponse, summary="List voters")
async def list_voters(
    controller: CampaignController = Depends(get_campaign_controller),
) -> VoterListResponse:
    return VoterListResponse(voters=list(await controller.list_voters()))


@router.get(
    "/voters/{voter_id}",
    response_model=VoterResponse,
    responses={404: {"model": CampaignErrorResponse, "description": "Unknown voter"}},
    summary="Voting state of one identity",
)
async def get_voter(
    voter_id: str,
    request: Request,
    controller: CampaignController = Depends(get_campaign_controller),
) -> VoterResponse:
    voter = await controller.voter_status(voter_id)
    if voter is None:
        phase = await controller.current_phase()
        raise HTTPException(
            status_code=404,
            detail={
                "type": "urn:ballot-campaign:voter-not-found",
                "title": "Voter Not Found",
                "status": 404,
                "detail": f"Voter {voter_id!r} was never registered",
                "instance": str(request.url),
                "error_code": "VOTER_NOT_FOUND",
                "phase": phase.value,
            },
        )
    return VoterResponse.from_domain(voter)


@router.get(
    "/voters/{voter_id}/choice",
    response_model=VoterChoiceResponse,
    responses=_ERROR_RESPONSES,
    summary="Proposal a voter chose",
)
async def get_voter_choice(
    voter_id: str,
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> VoterChoiceResponse:
    try:
        proposal_id = await controller.get_voter_choice(caller_id, voter_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return VoterChoiceResponse(voter_id=voter_id, proposal_id=proposal_id)


@router.get("/proposals", response_model=ProposalListResponse, summary="List proposals")
async def list_proposals(
    controller: CampaignController = Depends(get_campaign_controller),
) -> ProposalListResponse:
    proposals = await controller.list_proposals()
    return ProposalListResponse(
        proposals=[ProposalResponse.from_domain(p) for p in proposals]
    )


@router.get(
    "/proposals/{proposal_id}",
    response_model=ProposalResponse,
    responses=_ERROR_RESPONSES,
    summary="Read one proposal",
)
async def get_proposal(
    proposal_id: int,
    request: Request,
    controller: CampaignController = Depends(get_campaign_controller),
) -> ProposalResponse:
    try:
        proposal = await controller.get_proposal(proposal_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return ProposalResponse.from_domain(proposal)


@router.get(
    "/winner",
    response_model=WinnerResponse,
    responses={
        404: {"model": CampaignErrorResponse, "description": "No winner available"}
    },
    summary="Elected proposal",
)
async def get_winner(
    request: Request,
    controller: CampaignController = Depends(get_campaign_controller),
) -> WinnerResponse:
    try:
        proposal = await controller.winner_details()
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return WinnerResponse(
        proposal_id=proposal.proposal_id,
        description=proposal.description,
        vote_count=proposal.vote_count,
    )


@router.get(
    "/tally",
    response_model=TallyResultResponse,
    responses={404: {"model": CampaignErrorResponse, "description": "Not tallied yet"}},
    summary="Tally result of the current generation",
)
async def get_tally(
    request: Request,
    controller: CampaignController = Depends(get_campaign_controller),
) -> TallyResultResponse:
    result = await controller.tally_result()
    if result is None:
        await _raise_problem(
            NoWinnerAvailableError("votes have not been tallied"), request, controller
        )
    return TallyResultResponse.from_domain(result)


@router.get(
    "/transitions",
    response_model=TransitionHistoryResponse,
    summary="Every phase change, oldest first",
)
async def get_transitions(
    controller: CampaignController = Depends(get_campaign_controller),
) -> TransitionHistoryResponse:
    history = await controller.transition_history()
    return TransitionHistoryResponse(
        transitions=[PhaseTransitionResponse.from_domain(t) for t in history]
    )


# ----------------------------------------------------------------------
# Actions
# ----------------------------------------------------------------------


@router.post(
    "/voters",
    response_model=VoterResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
    summary="Register a voter (administrator only)",
)
async def register_voter(
    request_data: RegisterVoterRequest,
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> VoterResponse:
    try:
        voter = await controller.add_voter(caller_id, request_data.voter_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return VoterResponse.from_domain(voter)


@router.post(
    "/proposals",
    response_model=ProposalResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
    summary="Submit a proposal (registered voters)",
)
async def submit_proposal(
    request_data: SubmitProposalRequest,
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> ProposalResponse:
    try:
        proposal = await controller.add_proposal(caller_id, request_data.description)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return ProposalResponse.from_domain(proposal)


@router.post(
    "/votes",
    response_model=VoterResponse,
    status_code=201,
    responses=_ERROR_RESPONSES,
    summary="Cast the caller's vote",
)
async def cast_vote(
    request_data: CastVoteRequest,
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> VoterResponse:
    try:
        voter = await controller.vote(caller_id, request_data.proposal_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return VoterResponse.from_domain(voter)


@router.post(
    "/phase/proposals-registration/open",
    response_model=PhaseTransitionResponse,
    responses=_ERROR_RESPONSES,
    summary="Open proposals registration (administrator only)",
)
async def open_proposals_registration(
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> PhaseTransitionResponse:
    try:
        transition = await controller.open_proposals_registration(caller_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return PhaseTransitionResponse.from_domain(transition)


@router.post(
    "/phase/proposals-registration/close",
    response_model=PhaseTransitionResponse,
    responses=_ERROR_RESPONSES,
    summary="Close proposals registration (administrator only)",
)
async def close_proposals_registration(
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> PhaseTransitionResponse:
    try:
        transition = await controller.close_proposals_registration(caller_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return PhaseTransitionResponse.from_domain(transition)


@router.post(
    "/phase/voting-session/open",
    response_model=PhaseTransitionResponse,
    responses=_ERROR_RESPONSES,
    summary="Open the voting session (administrator only)",
)
async def open_voting_session(
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> PhaseTransitionResponse:
    try:
        transition = await controller.open_voting_session(caller_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return PhaseTransitionResponse.from_domain(transition)


@router.post(
    "/phase/voting-session/close",
    response_model=PhaseTransitionResponse,
    responses=_ERROR_RESPONSES,
    summary="Close the voting session (administrator only)",
)
async def close_voting_session(
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> PhaseTransitionResponse:
    try:
        transition = await controller.close_voting_session(caller_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return PhaseTransitionResponse.from_domain(transition)


@router.post(
    "/phase/tally",
    response_model=TallyResultResponse,
    responses=_ERROR_RESPONSES,
    summary="Tally the votes (administrator only)",
)
async def start_counting(
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> TallyResultResponse:
    try:
        result = await controller.start_counting(caller_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return TallyResultResponse.from_domain(result)


@router.post(
    "/reset",
    response_model=PhaseTransitionResponse,
    responses=_ERROR_RESPONSES,
    summary="Start a new generation (administrator only)",
)
async def reset_campaign(
    request: Request,
    caller_id: str = Depends(get_caller_id),
    controller: CampaignController = Depends(get_campaign_controller),
) -> PhaseTransitionResponse:
    try:
        transition = await controller.reset_campaign(caller_id)
    except CampaignError as e:
        await _raise_problem(e, request, controller)
    return PhaseTransitionResponse.from_domain(transition)
