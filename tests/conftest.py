"""Pytest configuration and fixtures."""
import logging
import os
import sys

import pytest

# Ensure project root is on PYTHONPATH for package imports
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from lens_edge.frames import FrameRecord, new_frame_id  # noqa: E402
from lens_edge.geometry import Prescription  # noqa: E402
from lens_edge.materials import get_material  # noqa: E402


def pytest_configure(config):
    """Configure logging for test runs."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(logging.INFO)


@pytest.fixture
def make_frame():
    def _make(A=50.0, B=40.0, DBL=20.0, **kw):
        return FrameRecord(id=new_frame_id(), A=A, B=B, DBL=DBL, **kw)
    return _make


@pytest.fixture
def myope():
    """-6.00 DS both eyes, PD centered on a 64 mm frame PD."""
    return Prescription(sphere=-6.0, cylinder=0.0, monocular_pd=32.0)


@pytest.fixture
def mat160():
    return get_material("1.60")
