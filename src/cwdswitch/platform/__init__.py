"""Cross-cutting platform services."""
