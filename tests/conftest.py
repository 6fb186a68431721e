"""
Pytest configuration and fixtures for the trip animation tests.

Provides small trip, point and stop datasets shared across test modules.
"""

import pytest

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from simulation.records import TemporalRecord, StopRecord


@pytest.fixture
def diagonal_trip():
    """Two-vertex trip from (0, 0) to (10, 10) between t=600 and t=610."""
    return TemporalRecord(timestamps=(600.0, 610.0), path=((0.0, 0.0), (10.0, 10.0)))


@pytest.fixture
def interval_record():
    """Point-style record active on [600, 650]."""
    return TemporalRecord(timestamps=(600.0, 650.0), coordinates=(1.0, 2.0))


@pytest.fixture
def datasets():
    """Dataset dict shaped like data_loader.load_all() output."""
    return {
        "trip_car": [
            TemporalRecord(timestamps=(600.0, 620.0), path=((0.0, 0.0), (20.0, 0.0))),
            TemporalRecord(timestamps=(700.0, 720.0), path=((0.0, 0.0), (0.0, 20.0))),
        ],
        "trip_foot": [
            TemporalRecord(timestamps=(605.0, 615.0), path=((1.0, 1.0), (2.0, 2.0))),
        ],
        "point_car": [
            TemporalRecord(timestamps=(600.0, 640.0), coordinates=(5.0, 5.0)),
            TemporalRecord(timestamps=(650.0, 660.0), coordinates=(6.0, 6.0)),
        ],
        "stop": [StopRecord(coordinates=(3.0, 3.0)), StopRecord(coordinates=(4.0, 4.0))],
    }
