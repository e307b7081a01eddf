"""Configuration, preferences and logging."""
