# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from leaseline.core.lease import DEFAULT_RENEWAL_WINDOW_DAYS as CLASSIFIER_DEFAULT
from leaseline.core.primitives import DEFAULT_RENEWAL_WINDOW_DAYS, EngineSettings


def test_engine_settings_defaults():
    """Test that EngineSettings has the dashboard defaults."""
    settings = EngineSettings()
    assert settings.renewal_window_days == 90
    assert settings.default_timezone == "UTC"
    assert settings.maintenance_suppresses_expected_revenue is False
    assert settings.occupancy_counts_repairs is True


def test_renewal_window_default_is_shared_with_classifier():
    assert EngineSettings().renewal_window_days == DEFAULT_RENEWAL_WINDOW_DAYS
    assert CLASSIFIER_DEFAULT is DEFAULT_RENEWAL_WINDOW_DAYS


def test_engine_settings_custom_values():
    settings = EngineSettings(
        renewal_window_days=120,
        default_timezone="America/Chicago",
        maintenance_suppresses_expected_revenue=True,
    )
    assert settings.renewal_window_days == 120
    assert settings.default_timezone == "America/Chicago"
    assert settings.maintenance_suppresses_expected_revenue is True


def test_engine_settings_rejects_unknown_timezone():
    with pytest.raises(ValidationError):
        EngineSettings(default_timezone="Mars/Olympus_Mons")


def test_engine_settings_rejects_negative_window():
    with pytest.raises(ValidationError):
        EngineSettings(renewal_window_days=-1)


def test_engine_settings_is_frozen():
    settings = EngineSettings()
    with pytest.raises(ValidationError):
        settings.renewal_window_days = 30
