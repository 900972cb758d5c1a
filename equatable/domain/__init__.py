"""Domain layer for equatable."""
