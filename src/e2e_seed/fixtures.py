"""Canonical e2e accounts: stable IDs and known credentials across all runs.

UI tests that need to log in MUST use these accounts rather than random
generated users. Stable accounts ensure:
- Login steps in UI tests can hardcode credentials
- Seeded database state matches what tests expect
- Failures are reproducible across CI machines

Account roles:
    ADMIN     - full access, used for admin-console journeys
    STANDARD  - regular signed-in user
    READ_ONLY - can browse but not edit
"""
from __future__ import annotations

from e2e_seed.factory import hash_password

# ---------------------------------------------------------------------------
# Stable user UUIDs
# ---------------------------------------------------------------------------

ADMIN_USER_ID: str     = "00000000-0000-4000-8000-000000000001"
STANDARD_USER_ID: str  = "00000000-0000-4000-8000-000000000002"
READ_ONLY_USER_ID: str = "00000000-0000-4000-8000-000000000003"

ADMIN_EMAIL: str     = "admin@e2e.test"
STANDARD_EMAIL: str  = "user@e2e.test"
READ_ONLY_EMAIL: str = "readonly@e2e.test"

# Test-only credentials; never valid outside seeded e2e environments
ADMIN_PASSWORD: str     = "e2e-admin-pass"
STANDARD_PASSWORD: str  = "e2e-user-pass"
READ_ONLY_PASSWORD: str = "e2e-readonly-pass"

SEED_TIMESTAMP: str = "2024-01-01T00:00:00+00:00"

# ---------------------------------------------------------------------------
# Structured seed data
# ---------------------------------------------------------------------------

SEED_USERS: list[dict[str, object]] = [
    {
        "id": ADMIN_USER_ID,
        "first_name": "Ada",
        "last_name": "Admin",
        "email": ADMIN_EMAIL,
        "password_hash": hash_password(ADMIN_PASSWORD),
        "created_at": SEED_TIMESTAMP,
        "updated_at": SEED_TIMESTAMP,
    },
    {
        "id": STANDARD_USER_ID,
        "first_name": "Sam",
        "last_name": "Standard",
        "email": STANDARD_EMAIL,
        "password_hash": hash_password(STANDARD_PASSWORD),
        "created_at": SEED_TIMESTAMP,
        "updated_at": SEED_TIMESTAMP,
    },
    {
        "id": READ_ONLY_USER_ID,
        "first_name": "Rory",
        "last_name": "Reader",
        "email": READ_ONLY_EMAIL,
        "password_hash": hash_password(READ_ONLY_PASSWORD),
        "created_at": SEED_TIMESTAMP,
        "updated_at": SEED_TIMESTAMP,
    },
]

SEED_PASSWORDS: dict[str, str] = {
    ADMIN_EMAIL: ADMIN_PASSWORD,
    STANDARD_EMAIL: STANDARD_PASSWORD,
    READ_ONLY_EMAIL: READ_ONLY_PASSWORD,
}
