"""Stub AdministratorCheck for single-owner deployments and testing.

The administrator is a single configured identity. Ownership transfer is
handled outside the campaign; ``set_administrator`` exists so tests and
bootstrap wiring can model a transfer that already happened.

WARNING: This stub performs no authentication. The caller identity it is
given must already have been authenticated by the transport layer.
"""

from __future__ import annotations

from ballot_campaign.application.ports.administrator_check import (
    AdministratorCheckProtocol,
)


class AdministratorCheckStub(AdministratorCheckProtocol):
    """Recognizes exactly one identity as administrator.

    Attributes:
        administrator_id: The identity currently recognized.
        checks: Every identity checked, in order (test inspection).
    """

    def __init__(self, administrator_id: str) -> None:
        """Initialize the stub.

        Args:
            administrator_id: Identity to recognize as administrator.

        Raises:
            ValueError: If administrator_id is empty.
        """
        if not administrator_id:
            raise ValueError("administrator_id must be a non-empty identity")
        self._administrator_id = administrator_id
        self.checks: list[str] = []

    @property
    def administrator_id(self) -> str:
        return self._administrator_id

    async def is_administrator(self, caller_id: str) -> bool:
        self.checks.append(caller_id)
        return caller_id == self._administrator_id

    async def get_administrator(self) -> str:
        return self._administrator_id

    def set_administrator(self, administrator_id: str) -> None:
        """Test helper: replace the recognized administrator.

        Args:
            administrator_id: New administrator identity.
        """
        if not administrator_id:
            raise ValueError("administrator_id must be a non-empty identity")
        self._administrator_id = administrator_id
