"""REST middleware and request-level dependencies."""
