"""Constants package."""
