"""Application layer for health metrics: analysis, persistence, restore."""
