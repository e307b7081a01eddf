"""Core domain: models, listing generation, usage tracking."""
