"""Deployment environments."""

from enum import Enum


class Environment(str, Enum):
    """Where the process runs. Selects log rendering and debug defaults."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"
