# tests/conftest.py
import os

# Must be set before nextup.core.config is imported
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.pop("DEMO_USER_EMAIL", None)
os.environ.pop("DEMO_USER_PASSWORD", None)
