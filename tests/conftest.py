"""Root conftest — shared test configuration."""

import os

# Keep tests off real storage locations
os.environ.setdefault("STORAGE_ROOT", "/tmp/inference-gateway-test")
os.environ.setdefault("LOG_FORMAT", "text")
