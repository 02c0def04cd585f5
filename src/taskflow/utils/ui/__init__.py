"""UI helpers (Rich console and output formatting)."""
