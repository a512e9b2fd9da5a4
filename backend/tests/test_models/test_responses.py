"""Tests for API response models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fretnot.models.responses import HealthResponse


def test_health_requires_version():
    with pytest.raises(ValidationError):
        HealthResponse()


def test_health_defaults():
    health = HealthResponse(version="2.0.0")
    assert (health.status, health.version, health.env) == ("ok", "2.0.0", "development")
