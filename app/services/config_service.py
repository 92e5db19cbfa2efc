from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, confloat, field_validator

from config.temperature_config import MONTHLY_MEAN_TEMPERATURE
from config.vehicle_config import (
    CAR_CONFIG_VERSION,
    DEFAULT_CAR_CONFIG,
    DEFAULT_CHARGING_CONFIG,
    SPEED_BANDS,
)
from phev_analyzer.utils.logger import get_logger

logger = get_logger('config_service')

USER_CONFIG_PATH = Path("config/user_config.yaml")


class CarConfigSchema(BaseModel):
    version: int = CAR_CONFIG_VERSION
    battery_capacity_kwh: confloat(gt=0, le=250) = DEFAULT_CAR_CONFIG['battery_capacity_kwh']
    electricity_consumption_kwh_per_100km_at: Dict[int, confloat(gt=0, le=100)] = Field(
        default_factory=lambda: dict(DEFAULT_CAR_CONFIG['electricity_consumption_kwh_per_100km_at'])
    )
    petrol_consumption_l_per_100km: confloat(ge=0, le=40) = DEFAULT_CAR_CONFIG['petrol_consumption_l_per_100km']
    is_pure_electric: bool = DEFAULT_CAR_CONFIG['is_pure_electric']
    electricity_price_euro_per_kwh: confloat(ge=0, le=10) = DEFAULT_CAR_CONFIG['electricity_price_euro_per_kwh']
    petrol_price_euro_per_liter: confloat(ge=0, le=20) = DEFAULT_CAR_CONFIG['petrol_price_euro_per_liter']
    max_charging_power_kw: confloat(ge=0, le=400) = DEFAULT_CAR_CONFIG['max_charging_power_kw']
    distance_inaccuracy_coefficient: confloat(gt=0, le=2) = DEFAULT_CAR_CONFIG['distance_inaccuracy_coefficient']

    @field_validator('electricity_consumption_kwh_per_100km_at')
    @classmethod
    def merge_speed_bands(cls, value: Dict[int, float]) -> Dict[int, float]:
        """Bands left out keep their default consumption"""
        unknown = sorted(band for band in value if band not in SPEED_BANDS)
        if unknown:
            raise ValueError(f"unknown speed bands {unknown}, expected {list(SPEED_BANDS)}")
        return {**DEFAULT_CAR_CONFIG['electricity_consumption_kwh_per_100km_at'], **value}


class UserConfig(BaseModel):
    car: CarConfigSchema = Field(default_factory=CarConfigSchema)
    # Only chargers that differ from the defaults are stored
    charging: Dict[str, confloat(ge=0, le=1000)] = Field(default_factory=dict)
    monthly_mean_temperature: Optional[Dict[int, confloat(ge=-60, le=60)]] = None

    @field_validator('monthly_mean_temperature')
    @classmethod
    def months_in_range(cls, value: Optional[Dict[int, float]]) -> Optional[Dict[int, float]]:
        if value is not None:
            invalid = sorted(month for month in value if not 1 <= month <= 12)
            if invalid:
                raise ValueError(f"months must be 1-12, got {invalid}")
        return value


def load_overrides(path: Union[str, Path, None] = None) -> UserConfig:
    """
    Read user configuration, falling back to defaults.

    A file written for another car configuration version is ignored.
    """
    path = Path(path) if path is not None else USER_CONFIG_PATH
    if not path.exists():
        return UserConfig()

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    stored_version = (data.get('car') or {}).get('version', CAR_CONFIG_VERSION)
    if stored_version != CAR_CONFIG_VERSION:
        logger.warning(f"Ignoring {path}: car configuration version {stored_version}, expected {CAR_CONFIG_VERSION}")
        return UserConfig()
    return UserConfig(**data)


def save_overrides(overrides: UserConfig, path: Union[str, Path, None] = None) -> None:
    path = Path(path) if path is not None else USER_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(overrides.model_dump(), sort_keys=False, allow_unicode=True), encoding="utf-8")


def set_charger_power(overrides: UserConfig, location: str, power_kw: float) -> UserConfig:
    """Copy of the overrides with the charger power at a location replaced"""
    charging = {**overrides.charging, location: power_kw}
    return overrides.model_copy(update={'charging': charging})


def merged_runtime_config(path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """Defaults with the stored user overrides applied, as plain dicts"""
    ui = load_overrides(path)

    car = {**DEFAULT_CAR_CONFIG, **ui.car.model_dump()}
    charging = {**DEFAULT_CHARGING_CONFIG, **ui.charging}
    # Months left out keep their default mean temperature
    temperature = {**MONTHLY_MEAN_TEMPERATURE, **(ui.monthly_mean_temperature or {})}

    return {
        "car": car,
        "charging": charging,
        "temperature": temperature,
    }
