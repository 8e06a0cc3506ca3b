"""Core (non-CLI) building blocks of the minishift bootstrap."""
