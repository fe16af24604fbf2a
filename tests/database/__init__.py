"""Database seeding tests using real PostgreSQL via Testcontainers.

Covers:
- Direct upserts into e2e_users
- SQL dump replay
"""
