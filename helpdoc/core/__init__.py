"""Configuration and user-facing runners."""
