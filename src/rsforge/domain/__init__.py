"""Domain layer: command records and the framework template registry."""
