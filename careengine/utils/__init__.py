"""Shared helpers: care plan text parsing and time handling."""
