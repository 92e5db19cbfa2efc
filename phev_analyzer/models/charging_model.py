"""
Charging power available at a parking location
"""
from typing import Any, Dict

from phev_analyzer.models.entries import Location


def get_charger_rating_kw(location: Location, charging_config: Dict[str, float]) -> float:
    """Rated charger power at a location, looked up by address and then by name"""
    rating = charging_config.get(location.address) if location.address else None
    # An address rated 0 kW does not hide a charger listed under the place name
    if not rating and location.name:
        rating = charging_config.get(location.name)
    return float(rating or 0)


def get_charging_power_kw(location: Location,
                          car_config: Dict[str, Any],
                          charging_config: Dict[str, float]) -> float:
    """Charging power at a location, limited by what the car accepts"""
    return min(car_config['max_charging_power_kw'], get_charger_rating_kw(location, charging_config))
