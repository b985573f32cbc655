"""Application layer: commands, handlers and services orchestrating the domain."""
