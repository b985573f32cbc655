"""Infrastructure layer: adapters for Redis, PostgreSQL, JWT, bcrypt and logging."""
