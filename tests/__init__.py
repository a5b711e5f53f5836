"""
Test suite for the SmileCare booking service.

Contains unit and API tests for authentication, sessions and appointments.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
