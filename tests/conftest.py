"""Shared fixtures for e2e_seed tests."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from e2e_seed.factory import generate_users


API_BASE_URL = "http://provisioning.e2e.test"


@pytest.fixture
def reference_time() -> datetime:
    """Fixed 'now' so generated timestamps are reproducible."""
    return datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fake_users(reference_time: datetime) -> list[dict[str, Any]]:
    """Five deterministic fake users."""
    return generate_users(5, seed=1234, now=reference_time)


@pytest.fixture
def api_base_url() -> str:
    """Base URL of the mocked provisioning API."""
    return API_BASE_URL
