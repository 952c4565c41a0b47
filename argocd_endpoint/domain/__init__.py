"""Domain layer - entities, value objects and rules with no I/O."""
