"""Infrastructure layer. Adapters for persistence and external systems."""
