"""Fake user factory for end-to-end test runs.

Builds user records with Faker and writes them to a seed file that the
seeding strategies in ``e2e_seed.seed`` can load.

Usage:
    from e2e_seed.factory import generate_users, write_users
    users = generate_users(10, seed=42)
    write_users(users, "build/seed/users.json")
"""
from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path

from faker import Faker

from e2e_seed.dump import USER_COLUMNS, render_sql_dump
from e2e_seed.errors import SeedingError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS: tuple[str, ...] = USER_COLUMNS

MAX_ACCOUNT_AGE = timedelta(days=365)


def hash_password(password: str) -> str:
    """Return the hex SHA-256 digest stored in ``password_hash``."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def _make_faker(seed: int | None, locale: str) -> Faker:
    fake = Faker(locale)
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def make_fake_user(
    fake: Faker,
    now: datetime,
    include_password: bool = False,
) -> dict[str, object]:
    """Build a single fake user record.

    Timestamps are drawn from the generator's own random state so a seeded
    Faker with a fixed ``now`` yields the same record every time.
    """
    password = fake.password(length=16)
    age_seconds = fake.random_int(0, int(MAX_ACCOUNT_AGE.total_seconds()))
    created_at = now - timedelta(seconds=age_seconds)
    updated_at = created_at + timedelta(seconds=fake.random_int(0, age_seconds))

    user: dict[str, object] = {
        "id": fake.uuid4(),
        "first_name": fake.first_name(),
        "last_name": fake.last_name(),
        "email": fake.unique.email(),
        "password_hash": hash_password(password),
        "created_at": created_at.isoformat(),
        "updated_at": updated_at.isoformat(),
    }
    if include_password:
        user["password"] = password
    return user


def generate_users(
    count: int,
    seed: int | None = None,
    locale: str = "en_US",
    now: datetime | None = None,
    include_password: bool = False,
) -> list[dict[str, object]]:
    """Generate ``count`` fake user records.

    Args:
        count: Number of records. Zero returns an empty list.
        seed: Faker seed. The same seed and ``now`` reproduce the same batch.
        locale: Faker locale used for names and emails.
        now: Reference time for ``created_at``/``updated_at``. Defaults to the
            current UTC time, truncated to whole seconds.
        include_password: Also emit the plaintext ``password`` so UI tests
            can log in as the generated user.

    Raises:
        ValueError: If ``count`` is negative or ``now`` is naive.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    if now is None:
        now = datetime.now(timezone.utc).replace(microsecond=0)
    elif now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    else:
        now = now.astimezone(timezone.utc)

    fake = _make_faker(seed, locale)
    users = [make_fake_user(fake, now, include_password=include_password) for _ in range(count)]
    logger.debug("Generated %d fake users (seed=%s, locale=%s)", len(users), seed, locale)
    return users


def write_users(users: list[dict[str, object]], path: str | Path) -> Path:
    """Write users to ``path`` as JSON (``.json``) or a SQL dump (``.sql``).

    Returns:
        The path written.
    """
    target = Path(path)
    suffix = target.suffix.lower()
    if suffix == ".json":
        content = json.dumps(users, indent=2) + "\n"
    elif suffix == ".sql":
        content = render_sql_dump(users)
    else:
        raise SeedingError(f"Unsupported seed file type {target.suffix!r} (use .json or .sql)")

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.info("Wrote %d users to %s", len(users), target)
    return target


def _is_iso_timestamp(value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def load_users(path: str | Path) -> list[dict[str, object]]:
    """Read a JSON seed file written by :func:`write_users`."""
    source = Path(path)
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SeedingError(f"{source} is not valid UTF-8 JSON: {exc}") from exc

    if not isinstance(data, list):
        raise SeedingError(f"{source} must contain a JSON array of users")

    for index, user in enumerate(data):
        if not isinstance(user, dict):
            raise SeedingError(f"{source}: record {index} is not an object")
        missing = [field for field in REQUIRED_FIELDS if field not in user]
        if missing:
            raise SeedingError(f"{source}: record {index} is missing {', '.join(missing)}")
        for field in ("created_at", "updated_at"):
            if not _is_iso_timestamp(user[field]):
                raise SeedingError(f"{source}: record {index} has invalid {field} {user[field]!r}")

    return data


def anonymize_users(
    users: list[dict[str, object]],
    seed: int | None = None,
    locale: str = "en_US",
) -> list[dict[str, object]]:
    """Replace PII in records copied from production with fake values.

    Keeps ``id`` and timestamps so relationships and ordering survive. Only
    the user columns are emitted; any other field (phone, address, a
    plaintext ``password``) is dropped.
    """
    fake = _make_faker(seed, locale)
    scrubbed: list[dict[str, object]] = []
    for user in users:
        clean: dict[str, object] = {
            "id": user["id"],
            "first_name": fake.first_name(),
            "last_name": fake.last_name(),
            "email": fake.unique.email(),
            "password_hash": hash_password(fake.password(length=16)),
            "created_at": user["created_at"],
            "updated_at": user["updated_at"],
        }
        scrubbed.append(clean)

    logger.info("Anonymized %d user records", len(scrubbed))
    return scrubbed
