"""Exceptions raised by e2e_seed seeding strategies."""
from __future__ import annotations


class SeedingError(Exception):
    """Base class for all seeding failures."""


class ProvisioningError(SeedingError):
    """The provisioning API rejected a record with an unexpected status."""

    def __init__(self, endpoint: str, status_code: int, detail: str = "") -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        self.detail = detail
        message = f"POST {endpoint} returned {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DumpError(SeedingError):
    """A SQL dump could not be read or contained no statements."""
