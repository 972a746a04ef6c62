"""Application layer: use cases over the health metrics domain."""
