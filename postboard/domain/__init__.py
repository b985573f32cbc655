"""Domain layer: entities, error types and protocols (ports)."""
