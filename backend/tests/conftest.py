"""Root conftest — shared test configuration."""

import os

# Tests must not depend on a developer's .env
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "text")
