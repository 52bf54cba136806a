"""Error taxonomy for wallet exploration."""
from __future__ import annotations

from enum import Enum


class UpstreamErrorKind(Enum):
    """Where an upstream call broke down."""

    CONNECTION = "connection"
    STATUS = "status"
    MALFORMED = "malformed"
    BUSINESS = "business"


class UpstreamError(Exception):
    """Classified failure of a call to the ledger node or the quote service."""

    def __init__(
        self,
        kind: UpstreamErrorKind,
        message: str,
        method: str = "",
        code: str | None = None,
        status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.method = method
        self.code = code
        self.status = status


class AccountNotFoundError(UpstreamError):
    """The ledger has no account for the requested address."""

    MESSAGE = "This XRP address does not exist or has never been activated"

    def __init__(self, method: str = "", code: str | None = None) -> None:
        super().__init__(UpstreamErrorKind.BUSINESS, self.MESSAGE, method, code=code)


class ExplorerError(Exception):
    """Error surfaced to callers of ``WalletExplorer.explore``."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ExplorerError):
    """Malformed address supplied by the client."""

    status_code = 422


class AccountNotFound(ExplorerError):
    """Balance lookup failed because the account was never activated."""


class UpstreamFailure(ExplorerError):
    """Balance lookup failed for any other upstream reason."""


class ConfigurationError(ExplorerError):
    """The configuration file is missing or holds an invalid value."""
