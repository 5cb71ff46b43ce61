"""Root conftest — shared test configuration."""

import os

# Ensure tests never talk to a real database or email provider
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.pop("DATABASE_URL", None)
os.environ.pop("RESEND_API_KEY", None)
