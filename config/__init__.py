"""
Static configuration for the PHEV power source analyzer
"""

from .vehicle_config import (
    CAR_CONFIG_VERSION,
    SPEED_BANDS,
    DEFAULT_CAR_CONFIG,
    DEFAULT_CHARGING_CONFIG,
    SIMULATION_CONFIG,
)
from .temperature_config import (
    LOCAL_TIMEZONE,
    MONTHLY_MEAN_TEMPERATURE,
    TEMPERATURE_EFFICIENCY,
    CALIBRATION_EFFICIENCY,
)

__all__ = [
    'CAR_CONFIG_VERSION',
    'SPEED_BANDS',
    'DEFAULT_CAR_CONFIG',
    'DEFAULT_CHARGING_CONFIG',
    'SIMULATION_CONFIG',
    'LOCAL_TIMEZONE',
    'MONTHLY_MEAN_TEMPERATURE',
    'TEMPERATURE_EFFICIENCY',
    'CALIBRATION_EFFICIENCY',
]
