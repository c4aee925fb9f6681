"""Security helpers package."""
