"""Base exception classes for the ballot campaign domain layer."""


class CampaignError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application
    and lets the HTTP layer translate every refusal in one place.

    Attributes:
        error_code: Stable machine-readable error kind.
    """

    error_code: str = "CAMPAIGN_ERROR"

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
