"""Test environment: in-memory SQLite and a fixed session secret, set before app modules load."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ.setdefault("APP_ENV", "dev")
