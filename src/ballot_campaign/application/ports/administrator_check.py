"""Administrator Check port - is this caller the campaign administrator?

Ownership of a campaign is managed outside the core. The controller only
consumes a yes/no capability for a caller identity before every
administrator-only action.
"""

from abc import ABC, abstractmethod


class AdministratorCheckProtocol(ABC):
    """Abstract interface for administrator identification.

    Exactly one identity is the administrator at any time. Implementations
    may delegate to an external access-control service.
    """

    @abstractmethod
    async def is_administrator(self, caller_id: str) -> bool:
        """Check if a caller identity is the administrator.

        Args:
            caller_id: Opaque caller identity.

        Returns:
            True if the caller is the administrator, False otherwise.
        """
        ...

    @abstractmethod
    async def get_administrator(self) -> str:
        """Get the identity currently recognized as administrator.

        Returns:
            Administrator identity.
        """
        ...
