"""
Error taxonomy shared by the repository, service and API layers.

Every error maps to one HTTP status and one machine-readable ``code``. The
exception handlers in ``vendorhub.main`` render all of them with the same
payload shape: ``{"message", "code", "field"?, "details"?}``.
"""
from typing import Any, Optional


class AppError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, *, field: Optional[str] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_payload(self) -> dict:
        payload: dict = {"message": self.message, "code": self.code}
        if self.field is not None:
            payload["field"] = self.field
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(AppError):
    status_code = 400
    code = "VALIDATION_ERROR"


class InvalidTransitionError(ValidationError):
    code = "INVALID_TRANSITION"


class UnauthorizedError(AppError):
    status_code = 401
    code = "UNAUTHORIZED"


class ForbiddenError(AppError):
    status_code = 403
    code = "FORBIDDEN"


class NotApprovedError(ForbiddenError):
    """Tenant is authenticated but its onboarding status is not ``active``."""

    code = "NOT_APPROVED"

    def __init__(self, status: str):
        super().__init__(
            "Your business profile is not yet approved",
            details={"onboardingStatus": status},
        )


class FeatureDisabledError(ForbiddenError):
    code = "FEATURE_DISABLED"

    def __init__(self, feature: str):
        super().__init__(f"Feature disabled: {feature}", details={"feature": feature})


class NotFoundError(AppError):
    # Absent and out-of-scope rows are reported the same way
    status_code = 404
    code = "NOT_FOUND"
