# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before the app is imported anywhere
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
