"""Top-level minishift commands."""
