"""Unit tests: pure Python, no containers or network."""
