"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
