"""Test data seeding for end-to-end UI test runs.

Provides:
- A Faker-backed factory script that writes fake users to a JSON or SQL file
- 3 stable accounts (admin, standard, read-only) with known credentials
- Idempotent seeding via direct database upserts, a provisioning API, or a SQL dump

Usage:
    # From Python (e.g. in a conftest.py fixture):
    from e2e_seed.factory import generate_users
    from e2e_seed.seed import seed_all
    await seed_all(generate_users(10, seed=42), engine=engine)

    # From shell:
    python -m e2e_seed.seed --count 10 --output build/users.json
"""
