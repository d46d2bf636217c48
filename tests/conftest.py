"""Test configuration and fixtures."""

import os

import logfire

# Cheap password hashes for tests; must be set before Settings is loaded
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

logfire.configure(send_to_logfire=False, console=False)
