"""Unit tests for the error taxonomy."""
from __future__ import annotations

from xrp_explorer.errors import (
    AccountNotFound,
    AccountNotFoundError,
    ConfigurationError,
    ExplorerError,
    UpstreamError,
    UpstreamErrorKind,
    UpstreamFailure,
    ValidationError,
)


class TestUpstreamError:
    def test_carries_classification(self) -> None:
        err = UpstreamError(
            UpstreamErrorKind.STATUS, "boom", "account_info", status=503
        )
        assert err.kind is UpstreamErrorKind.STATUS
        assert err.method == "account_info"
        assert err.status == 503
        assert err.code is None
        assert str(err) == "boom"

    def test_account_not_found_is_business_error(self) -> None:
        err = AccountNotFoundError(method="account_info", code="actNotFound")
        assert isinstance(err, UpstreamError)
        assert err.kind is UpstreamErrorKind.BUSINESS
        assert err.message == (
            "This XRP address does not exist or has never been activated"
        )


class TestExplorerError:
    def test_status_codes(self) -> None:
        assert ValidationError("x").status_code == 422
        assert AccountNotFound("x").status_code == 500
        assert UpstreamFailure("x").status_code == 500
        assert ConfigurationError("x").status_code == 500

    def test_hierarchy(self) -> None:
        for cls in (ValidationError, AccountNotFound, UpstreamFailure, ConfigurationError):
            assert issubclass(cls, ExplorerError)
        assert not issubclass(UpstreamError, ExplorerError)
