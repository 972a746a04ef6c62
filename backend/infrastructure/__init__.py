"""Infrastructure layer: configuration and persistence adapters."""
