"""Root conftest — shared test configuration."""

import os

# Ensure tests never point at a real upstream
os.environ.setdefault("UPSTREAM_BASE_URL", "http://upstream.test")
os.environ.setdefault("LOG_FORMAT", "text")
