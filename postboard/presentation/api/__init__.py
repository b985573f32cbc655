"""REST API presentation."""
