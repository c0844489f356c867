"""Root conftest — shared test configuration."""

import os

# Keep tests independent of a developer's .env / shell settings
os.environ.setdefault("BASE_URL", "http://testserver")
os.environ.setdefault("API_PREFIX", "/api/v1")
os.environ.setdefault("LOG_FORMAT", "text")
