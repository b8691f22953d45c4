"""Custom exceptions for blockchain operations."""


class ChainQueryError(Exception):
    """Base exception for chain query errors."""

    pass


class NetworkConfigError(ChainQueryError):
    """Raised when there are network configuration issues."""

    pass


class NetworkTimeError(ChainQueryError):
    """Raised when there are issues with network time calculations."""

    pass


class TransactionError(ChainQueryError):
    """Base class for transaction related errors."""

    pass


class TransactionSubmissionError(TransactionError):
    """Raised when transaction submission fails."""

    pass


class TransactionBuildError(TransactionError):
    """Raised when transaction building fails."""

    pass


class InvalidBuilderStateError(TransactionBuildError):
    """Raised when a builder is used before its required fields are set."""

    def __init__(self, field_name: str, message: str | None = None) -> None:
        self.field_name = field_name
        super().__init__(message or f"Missing required builder field: {field_name}")


class SigningError(TransactionError):
    """Raised when a transaction cannot be signed."""

    pass


class FeeCalculationError(TransactionError):
    """Raised when fee calculation fails."""

    pass
