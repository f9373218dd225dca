# chromaslide test configuration and shared fixtures
from __future__ import annotations

import pytest

# ─────────────────────────────────────────────────────────────────────────────
# Channel fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def channel_options() -> dict:
    """Complete keyword arguments for a Cy5 channel."""
    return {
        "optical_path_identifier": "Cy5",
        "study_instance_uid": "1.2.3",
        "series_instance_uid": "1.2.3.4",
        "sop_instance_uids": ["1.2.3.4.5", "1.2.3.4.6"],
    }


@pytest.fixture
def channel_record() -> dict:
    """The same channel as an options record with camelCase keys."""
    return {
        "opticalPathIdentifier": "Cy5",
        "studyInstanceUID": "1.2.3",
        "seriesInstanceUID": "1.2.3.4",
        "sopInstanceUIDs": ["1.2.3.4.5"],
    }


# ─────────────────────────────────────────────────────────────────────────────
# Blending fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def blending_options() -> dict:
    """Complete keyword arguments for a red, fully opaque Cy5 channel."""
    return {
        "optical_path_identifier": "Cy5",
        "color": [255, 0, 0],
        "opacity": 1,
        "threshold_values": [0, 1],
        "limit_values": [0, 65535],
        "visible": True,
    }


@pytest.fixture
def blending_record() -> dict:
    """The same blending parameters with camelCase keys."""
    return {
        "opticalPathIdentifier": "Cy5",
        "color": [255, 0, 0],
        "opacity": 1,
        "thresholdValues": [0, 1],
        "limitValues": [0, 65535],
        "visible": True,
    }
