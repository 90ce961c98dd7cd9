"""
Tests for the exception hierarchy and the DRF exception handler.
"""

from rest_framework.exceptions import NotFound

from core.exceptions import (
    ConfigurationError,
    LoyalError,
    ValidationError,
    loyal_exception_handler,
)


class TestExceptions:

    def test_validation_error_dict(self):
        error = ValidationError("Unknown operator '!='", field="totalValueOp")
        assert error.status_code == 400
        assert error.to_dict() == {
            "error": "validation_error",
            "message": "Unknown operator '!='",
            "detail": {"field": "totalValueOp"},
        }

    def test_configuration_error(self):
        error = ConfigurationError("bad window", setting="window_before")
        assert isinstance(error, LoyalError)
        assert error.status_code == 500
        assert error.details == {"setting": "window_before"}

    def test_no_detail_without_kwargs(self):
        assert "detail" not in LoyalError().to_dict()


class TestExceptionHandler:

    def test_loyal_error_response(self):
        response = loyal_exception_handler(ValidationError("bad", field="lang"), {})
        assert response.status_code == 400
        assert response.data["detail"] == {"field": "lang"}

    def test_drf_exception_falls_through(self):
        response = loyal_exception_handler(NotFound(), {})
        assert response.status_code == 404

    def test_unhandled_exception_returns_none(self):
        assert loyal_exception_handler(RuntimeError("boom"), {"view": None}) is None
