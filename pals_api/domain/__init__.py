"""Pure domain helpers (identifier rules)."""
