"""Shared utilities for minishift core."""
