"""
Core utilities shared across the signup API.

This package hosts configuration helpers (env vars), logging setup, password
hashing and rate limit helpers. Other layers depend on these primitives instead
of reading the environment or touching argon2 directly.
"""
