"""Domain layer — entities and exceptions with no I/O."""
