"""
Core utilities shared across the Pals & Elements API.

This package hosts:
- configuration helpers (env vars, data file paths)
- the store error taxonomy
- logging setup

Routers and services depend on these primitives instead of reading the
environment themselves.
"""
