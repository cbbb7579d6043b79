"""Root conftest — shared test configuration."""

import os

# Human-readable logs in test output; never fail fast unless a test asks for it
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("CONFORMANCE_FAIL_FAST", "false")
