"""Profile management commands."""
