"""Pals & Elements API: JSON-file backed CRUD over pals and elements."""

__version__ = "1.0.0"
