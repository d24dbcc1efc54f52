"""Test configuration and fixtures."""

import os

import logfire

# Quiet logging and keep telemetry local before any settings are loaded
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("OBSERVABILITY__SEND_TO_LOGFIRE", "false")

logfire.configure(send_to_logfire=False, console=False)
