"""Persistent configuration commands for the selected profile."""
