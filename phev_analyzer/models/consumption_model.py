"""
Speed and temperature dependent electric consumption model
Consumption figures are configured per speed band and scaled by a driving
efficiency curve over the estimated ambient temperature
"""
import math
from datetime import datetime
from typing import Any, Dict, Optional

import numpy as np

from config.temperature_config import (
    CALIBRATION_EFFICIENCY,
    DAY_STARTS_HOUR,
    DIURNAL_TEMPERATURE_OFFSET,
    LOCAL_TIMEZONE,
    NIGHT_STARTS_HOUR,
    TEMPERATURE_EFFICIENCY,
)
from config.logging_config import is_detailed_logging_enabled
from phev_analyzer.models.entries import Journey
from phev_analyzer.utils.logger import get_logger, log_detailed
from phev_analyzer.utils.time_utils import to_local_time

logger = get_logger('consumption_model')

# Speed bands, highest first; a band includes its lower bound
SPEED_BAND_THRESHOLDS = (120, 100, 80)
LOWEST_SPEED_BAND = 50

_TEMPERATURE_KEYS = sorted(TEMPERATURE_EFFICIENCY.keys())
MIN_TABLE_TEMPERATURE = _TEMPERATURE_KEYS[0]
MAX_TABLE_TEMPERATURE = _TEMPERATURE_KEYS[-1]


def _log_detailed(message: str):
    if is_detailed_logging_enabled('consumption_model'):
        log_detailed(message, "consumption_model")


def get_adjusted_distance_km(journey: Journey, car_config: Dict[str, Any]) -> float:
    """Recorded distance scaled by the distance inaccuracy coefficient"""
    return journey.distance_km * car_config['distance_inaccuracy_coefficient']


def get_average_speed_kmh(journey: Journey, car_config: Dict[str, Any]) -> float:
    """Average speed over the journey, NaN when the journey has no duration"""
    elapsed_hours = (journey.end_timestamp - journey.start_timestamp).total_seconds() / 3600
    if elapsed_hours <= 0:
        return math.nan
    return get_adjusted_distance_km(journey, car_config) / elapsed_hours


def get_speed_band_consumption(average_speed_kmh: float, car_config: Dict[str, Any]) -> float:
    """Configured kWh/100km for the band the average speed falls into"""
    consumption_at = car_config['electricity_consumption_kwh_per_100km_at']
    for threshold in SPEED_BAND_THRESHOLDS:
        if average_speed_kmh >= threshold:
            return consumption_at[threshold]
    return consumption_at[LOWEST_SPEED_BAND]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_temperature_c(start_timestamp: datetime,
                           temperature_config: Dict[int, float],
                           timezone: str = LOCAL_TIMEZONE) -> Optional[int]:
    """
    Estimate the ambient temperature at the start of a journey.

    The monthly mean is lowered by the diurnal offset at night and raised by it
    during the day, then rounded to a whole degree. Returns None when the month
    has no configured mean.
    """
    local_start = to_local_time(start_timestamp, timezone)
    monthly_mean = temperature_config.get(local_start.month)
    if monthly_mean is None:
        return None

    if local_start.hour < DAY_STARTS_HOUR or local_start.hour >= NIGHT_STARTS_HOUR:
        estimate = monthly_mean - DIURNAL_TEMPERATURE_OFFSET
    else:
        estimate = monthly_mean + DIURNAL_TEMPERATURE_OFFSET
    return _round_half_up(estimate)


def get_temperature_efficiency(temperature_c: int) -> float:
    """Efficiency percentage for a temperature, clamped to the table boundaries"""
    clamped = int(np.clip(temperature_c, MIN_TABLE_TEMPERATURE, MAX_TABLE_TEMPERATURE))
    return TEMPERATURE_EFFICIENCY[clamped]


def get_consumption_kwh_per_100km(journey: Journey,
                                  car_config: Dict[str, Any],
                                  temperature_config: Dict[int, float],
                                  timezone: str = LOCAL_TIMEZONE) -> float:
    """
    Electric consumption rate for a journey in kWh/100km.

    Zero-duration or zero-speed journeys consume nothing. Without a temperature
    estimate the speed band figure is used unadjusted.
    """
    average_speed = get_average_speed_kmh(journey, car_config)
    if not math.isfinite(average_speed) or average_speed == 0:
        logger.debug(f"Journey at {journey.start_timestamp} has no usable average speed, assuming no usage")
        return 0.0

    base_rate = get_speed_band_consumption(average_speed, car_config)

    temperature = estimate_temperature_c(journey.start_timestamp, temperature_config, timezone)
    if temperature is None:
        logger.debug(f"No temperature for journey at {journey.start_timestamp}, using unadjusted rate")
        return base_rate

    efficiency = get_temperature_efficiency(temperature)
    rate = base_rate / (efficiency / CALIBRATION_EFFICIENCY)

    _log_detailed(f"{journey.start_timestamp.isoformat()}: speed={average_speed:.1f}km/h, "
                  f"band rate={base_rate:.2f}kWh/100km, temp={temperature}°C, "
                  f"efficiency={efficiency}%, rate={rate:.2f}kWh/100km")
    return rate
