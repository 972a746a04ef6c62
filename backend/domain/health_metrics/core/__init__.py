"""Core model of the health metrics domain."""
