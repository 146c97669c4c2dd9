"""Domain layer. Pure business logic without I/O."""
