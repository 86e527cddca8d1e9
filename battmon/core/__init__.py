"""Refresh scheduling and shared state."""
