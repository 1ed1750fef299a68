"""Shared test fixtures for sway-nav."""
