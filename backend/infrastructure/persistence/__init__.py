"""Persistence adapters for the last health report."""
