"""
Ballot Campaign - Administered single-round election campaigns.

A single administrator drives a campaign through a strictly ordered set of
phases. Voters are registered, submit proposals, cast one vote each, and the
campaign is tallied into a single winner or an explicit "no winner" result.

Operating Rules:
- Every mutation is gated by caller authority and the current phase
- Checks precede effects: a refused call changes nothing
- Ties never elect a winner
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
