"""Root conftest — shared test configuration."""

import os

# Keep tests independent of a developer's .env / shell
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("LOG_FORMAT", "json")
