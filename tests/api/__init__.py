"""Provisioning API seeding tests, HTTP mocked with respx."""
