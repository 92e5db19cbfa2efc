"""Fixtures for testing."""
import copy

import pytest

from config.vehicle_config import DEFAULT_CAR_CONFIG
from phev_analyzer.models.entries import Location
from tests.helpers import make_activity, make_place


@pytest.fixture
def car_config():
    """Default plug-in hybrid configuration, safe to modify."""
    return copy.deepcopy(DEFAULT_CAR_CONFIG)


@pytest.fixture
def exact_car_config(car_config):
    """Car configuration without distance correction."""
    car_config['distance_inaccuracy_coefficient'] = 1.0
    return car_config


@pytest.fixture
def home():
    return Location(address='Kotikatu 1, 02100 Espoo', name='Home')


@pytest.fixture
def mall():
    return Location(address='Piispansilta 11, 02230 Espoo', name='Iso Omena')


@pytest.fixture
def sample_timeline():
    """A week of driving between home, work and a mall with a fast charger."""
    return [
        make_place('Kotikatu 1, 02100 Espoo', 'Home',
                   '2023-05-08T16:00:00Z', '2023-05-09T06:30:00Z'),
        make_activity('2023-05-09T06:30:00Z', '2023-05-09T07:00:00Z', waypoint_distance=18000),
        make_place('Työkatu 5, 00100 Helsinki', 'Work',
                   '2023-05-09T07:00:00Z', '2023-05-09T15:00:00Z'),
        make_activity('2023-05-09T15:00:00Z', '2023-05-09T15:40:00Z', waypoint_distance=26000),
        make_place('Piispansilta 11, 02230 Espoo', 'Iso Omena',
                   '2023-05-09T15:40:00Z', '2023-05-09T16:45:00Z'),
        make_activity('2023-05-09T16:45:00Z', '2023-05-09T17:00:00Z', waypoint_distance=7000),
        make_place('Kotikatu 1, 02100 Espoo', 'Home',
                   '2023-05-09T17:00:00Z', '2023-05-10T06:00:00Z'),
        make_activity('2023-05-10T06:00:00Z', '2023-05-10T07:00:00Z', waypoint_distance=120000),
        make_place('Mökkitie 3, 10600 Tammisaari', 'Cottage',
                   '2023-05-10T07:00:00Z', '2023-05-10T12:00:00Z'),
        make_activity('2023-05-10T12:00:00Z', '2023-05-10T12:20:00Z', distance=800,
                      travel_mode='WALK', activity_type='WALKING'),
        make_activity('2023-05-10T12:30:00Z', '2023-05-10T13:40:00Z', waypoint_distance=121000),
        make_place('Kotikatu 1, 02100 Espoo', 'Home',
                   '2023-05-10T13:40:00Z', '2023-05-11T06:00:00Z'),
    ]


@pytest.fixture
def activity():
    return make_activity


@pytest.fixture
def place():
    return make_place
