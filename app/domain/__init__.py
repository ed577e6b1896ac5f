"""Domain layer: entities, value objects, exceptions and port contracts."""
