"""
Aggregate totals, costs and groupings over a simulated driving history
"""
from typing import Any, Dict, Optional

import pandas as pd

from config.temperature_config import LOCAL_TIMEZONE
from config.vehicle_config import SIMULATION_CONFIG, SPEED_BANDS
from phev_analyzer.models.entries import (
    ChargingParkingEntry,
    ConsumptionJourneyEntry,
    PowerSourceResult,
)

GROUP_BY_OPTIONS = ('year_month', 'month', 'length')

DISTANCE_COLUMNS = ['electric_distance_km', 'secondary_distance_km']


def get_secondary_price(car_config: Dict[str, Any]) -> float:
    """Price per unit of the secondary fuel: €/l petrol, or €/kWh for a pure electric car"""
    if car_config.get('is_pure_electric', False):
        return car_config['electricity_price_euro_per_kwh']
    return car_config['petrol_price_euro_per_liter']


def get_secondary_unit(car_config: Dict[str, Any]) -> str:
    if car_config.get('is_pure_electric', False):
        return SIMULATION_CONFIG['pure_electric_secondary_unit']
    return SIMULATION_CONFIG['secondary_fuel_unit']


def calculate_totals(result: PowerSourceResult, car_config: Dict[str, Any]) -> Dict[str, Any]:
    """Distance, energy and cost totals over all journeys"""
    journeys = result.journeys

    electric_distance = sum(j.electric_distance_km for j in journeys)
    secondary_distance = sum(j.secondary_distance_km for j in journeys)
    electric_consumption = sum(j.electric_consumption_kwh for j in journeys)
    secondary_consumption = sum(j.secondary_consumption for j in journeys)
    charged = sum(stop.charged_kwh for stop in result.charging_stops)

    total_distance = electric_distance + secondary_distance
    electric_share = electric_distance / total_distance if total_distance > 0 else 0.0

    electric_cost = electric_consumption * car_config['electricity_price_euro_per_kwh']
    secondary_cost = secondary_consumption * get_secondary_price(car_config)

    return {
        'journeys': len(journeys),
        'total_distance_km': total_distance,
        'electric_distance_km': electric_distance,
        'secondary_distance_km': secondary_distance,
        'electric_share': electric_share,
        'electric_consumption_kwh': electric_consumption,
        'secondary_consumption': secondary_consumption,
        'charged_kwh': charged,
        'electric_cost_euro': electric_cost,
        'secondary_cost_euro': secondary_cost,
        'total_cost_euro': electric_cost + secondary_cost,
    }


def get_electric_range_km(car_config: Dict[str, Any]) -> Dict[int, float]:
    """Electric range on a full battery for each speed band"""
    capacity = car_config['battery_capacity_kwh']
    consumption_at = car_config['electricity_consumption_kwh_per_100km_at']
    return {band: capacity / consumption_at[band] * 100 for band in SPEED_BANDS}


def entries_to_dataframe(result: PowerSourceResult) -> pd.DataFrame:
    """One row per journey or parking stop, in simulation order"""
    rows = []
    for entry in result.entries:
        if isinstance(entry, ConsumptionJourneyEntry):
            j = entry.journey
            rows.append({
                'type': entry.entry_type,
                'start_timestamp': j.start_timestamp,
                'end_timestamp': j.end_timestamp,
                'origin': _location_label(j.origin),
                'destination': _location_label(j.destination),
                'recorded_distance_km': j.recorded_distance_km,
                'distance_km': j.distance_km,
                'average_speed_kmh': j.average_speed_kmh,
                'consumption_kwh_per_100km': j.consumption_kwh_per_100km,
                'electric_distance_km': j.electric_distance_km,
                'electric_consumption_kwh': j.electric_consumption_kwh,
                'secondary_distance_km': j.secondary_distance_km,
                'secondary_consumption': j.secondary_consumption,
                'battery_left_kwh_before': j.battery_left_kwh_before,
                'battery_left_kwh_after': j.battery_left_kwh_after,
            })
        elif isinstance(entry, ChargingParkingEntry):
            p = entry.parking
            rows.append({
                'type': entry.entry_type,
                'location': _location_label(p.location),
                'duration_minutes': p.duration_minutes,
                'confidence': p.confidence.value,
                'charging_power_kw': p.charging_power_kw,
                'charging_duration_minutes': p.charging_duration_minutes,
                'charged_kwh': p.charged_kwh,
                'battery_left_kwh_before': p.battery_left_kwh_before,
                'battery_left_kwh_after': p.battery_left_kwh_after,
            })
        else:
            raise TypeError(f"Unknown consumption entry: {type(entry).__name__}")

    df = pd.DataFrame(rows)
    for column in ('start_timestamp', 'end_timestamp'):
        if column in df.columns:
            df[column] = pd.to_datetime(df[column], utc=True)
    return df


def _location_label(location) -> Optional[str]:
    if location is None:
        return None
    return location.name or location.address


def group_journeys(result: PowerSourceResult, by: str = 'year_month',
                   timezone: str = LOCAL_TIMEZONE) -> pd.DataFrame:
    """
    Electric and secondary distance per group of journeys.

    'year_month' and 'month' group by local start time, chronologically;
    'length' groups into 10 km buckets ('<10 km', '<20 km', ...).
    """
    if by not in GROUP_BY_OPTIONS:
        raise ValueError(f"Unknown grouping '{by}', expected one of {GROUP_BY_OPTIONS}")

    df = entries_to_dataframe(result)
    if df.empty or 'distance_km' not in df.columns:
        return pd.DataFrame(columns=['group'] + DISTANCE_COLUMNS)
    df = df[df['type'] == 'journey'].copy()

    if by == 'length':
        bucket = (df['distance_km'] // 10).astype(int) + 1
        df['group'] = '<' + (bucket * 10).astype(str) + ' km'
        df['order'] = bucket
    else:
        local_start = df['start_timestamp'].dt.tz_convert(timezone)
        if by == 'year_month':
            df['group'] = local_start.dt.strftime('%b %y')
            df['order'] = local_start.dt.year * 12 + local_start.dt.month
        else:
            df['group'] = local_start.dt.strftime('%b')
            df['order'] = local_start.dt.month

    grouped = df.groupby(['order', 'group'], sort=True)[DISTANCE_COLUMNS].sum().reset_index()
    return grouped.drop(columns='order')
