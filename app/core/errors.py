from __future__ import annotations


class OptimizerError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code:
            self.status_code = status_code
        self.message = message


class ValidationError(OptimizerError, ValueError):
    """Input rejected before any calculation runs."""

    status_code = 422


class ConfigurationError(OptimizerError, RuntimeError):
    """Engine tables are missing or incomplete; raised at startup."""

    status_code = 500
