"""Pytest configuration and fixtures shared across all test modules.

APP_ENV is pinned before any import that might load settings so a developer's
.env.development never leaks into the test run.
"""

import os

# CRITICAL: Set this before any imports that might load settings
os.environ["APP_ENV"] = "testing"

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from video_mock.core.app_factory import create_app


@pytest.fixture
def app() -> FastAPI:
    """Fresh application with an empty attempt counter."""
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client that does not follow the 307 redirects."""
    return TestClient(app, follow_redirects=False)
