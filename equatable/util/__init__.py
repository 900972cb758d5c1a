"""Utilities: configuration errors, logging and observability."""
