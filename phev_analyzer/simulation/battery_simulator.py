"""
Battery state-of-charge simulation over a driving history
Walks journeys and parking stops in order, draining the battery while driving
and charging it while parked
"""
import math
from typing import Any, Dict, List, Optional

from config.logging_config import is_detailed_logging_enabled
from config.temperature_config import LOCAL_TIMEZONE, MONTHLY_MEAN_TEMPERATURE
from config.vehicle_config import SIMULATION_CONFIG
from phev_analyzer.data_processing.gap_sequencer import build_journey_entries
from phev_analyzer.data_processing.journey_extractor import extract_journeys
from phev_analyzer.models.charging_model import get_charging_power_kw
from phev_analyzer.models.consumption_model import (
    get_adjusted_distance_km,
    get_average_speed_kmh,
    get_consumption_kwh_per_100km,
)
from phev_analyzer.models.entries import (
    ChargingEntry,
    ChargingParkingEntry,
    ConsumptionEntry,
    ConsumptionJourney,
    ConsumptionJourneyEntry,
    Journey,
    JourneyEntry,
    Parking,
    ParkingEntry,
    PowerSourceResult,
    TimelineEntry,
)
from phev_analyzer.utils.logger import get_logger, log_detailed

logger = get_logger('battery_simulator')


def _log_detailed(message: str):
    if is_detailed_logging_enabled('battery_simulation'):
        log_detailed(message, "battery_simulation")


def get_secondary_consumption(secondary_distance_km: float,
                              consumption_kwh_per_100km: float,
                              car_config: Dict[str, Any]) -> float:
    """Petrol litres, or grid kWh for a pure electric car, for the distance not covered by the battery"""
    if car_config.get('is_pure_electric', False):
        return secondary_distance_km / 100 * consumption_kwh_per_100km
    return secondary_distance_km / 100 * car_config['petrol_consumption_l_per_100km']


def simulate_journey(journey: Journey,
                     battery_left_kwh: float,
                     car_config: Dict[str, Any],
                     temperature_config: Dict[int, float],
                     timezone: str = LOCAL_TIMEZONE) -> ConsumptionJourney:
    """Drive one journey on the battery, falling back to the secondary fuel once it runs out"""
    distance_km = get_adjusted_distance_km(journey, car_config)
    rate = get_consumption_kwh_per_100km(journey, car_config, temperature_config, timezone)
    demand_kwh = distance_km / 100 * rate

    if not math.isfinite(demand_kwh):
        demand_kwh = 0.0

    if demand_kwh <= battery_left_kwh:
        electric_distance_km = distance_km
        electric_consumption_kwh = demand_kwh
        battery_left_after = battery_left_kwh - demand_kwh
    else:
        # Ran out of battery: only the distance the remaining charge covers is electric
        electric_distance_km = battery_left_kwh / rate * 100
        electric_consumption_kwh = battery_left_kwh
        battery_left_after = 0.0

    secondary_distance_km = distance_km - electric_distance_km
    secondary_consumption = get_secondary_consumption(secondary_distance_km, rate, car_config)

    return ConsumptionJourney(
        distance_km=distance_km,
        start_timestamp=journey.start_timestamp,
        end_timestamp=journey.end_timestamp,
        origin=journey.origin,
        destination=journey.destination,
        recorded_distance_km=journey.distance_km,
        average_speed_kmh=get_average_speed_kmh(journey, car_config),
        consumption_kwh_per_100km=rate,
        electric_distance_km=electric_distance_km,
        electric_consumption_kwh=electric_consumption_kwh,
        secondary_distance_km=secondary_distance_km,
        secondary_consumption=secondary_consumption,
        battery_left_kwh_before=battery_left_kwh,
        battery_left_kwh_after=battery_left_after,
    )


def simulate_parking(parking: Parking,
                     battery_left_kwh: float,
                     car_config: Dict[str, Any],
                     charging_config: Dict[str, float]) -> ChargingEntry:
    """Charge during a parking stop, minus the time it takes to plug in"""
    charging_minutes = max(0, parking.duration_minutes - SIMULATION_CONFIG['charging_setup_minutes'])
    max_chargeable_kwh = car_config['battery_capacity_kwh'] - battery_left_kwh
    charging_power_kw = get_charging_power_kw(parking.location, car_config, charging_config)
    charged_kwh = min(max_chargeable_kwh, charging_power_kw * charging_minutes / 60)
    battery_left_after = min(car_config['battery_capacity_kwh'], battery_left_kwh + charged_kwh)

    return ChargingEntry(
        location=parking.location,
        duration_minutes=parking.duration_minutes,
        confidence=parking.confidence,
        charging_power_kw=charging_power_kw,
        charging_duration_minutes=charging_minutes,
        charged_kwh=charged_kwh,
        battery_left_kwh_before=battery_left_kwh,
        battery_left_kwh_after=battery_left_after,
    )


def simulate_consumption(journey_entries: List[TimelineEntry],
                         car_config: Dict[str, Any],
                         charging_config: Dict[str, float],
                         temperature_config: Optional[Dict[int, float]] = None,
                         timezone: str = LOCAL_TIMEZONE) -> List[ConsumptionEntry]:
    """
    Run the battery forward through journeys and parking stops.

    The battery starts full. Each entry only sees the battery level left by the
    entry before it.
    """
    if temperature_config is None:
        temperature_config = MONTHLY_MEAN_TEMPERATURE

    battery_left_kwh = car_config['battery_capacity_kwh']
    consumption_entries: List[ConsumptionEntry] = []

    for entry in journey_entries:
        if isinstance(entry, JourneyEntry):
            journey = simulate_journey(entry.journey, battery_left_kwh, car_config, temperature_config, timezone)
            battery_left_kwh = journey.battery_left_kwh_after
            consumption_entries.append(ConsumptionJourneyEntry(journey=journey))
            _log_detailed(f"JOURNEY {journey.start_timestamp.isoformat()}: {journey.distance_km:.2f}km, "
                          f"electric={journey.electric_distance_km:.2f}km/{journey.electric_consumption_kwh:.3f}kWh, "
                          f"secondary={journey.secondary_distance_km:.2f}km, battery={battery_left_kwh:.3f}kWh")
        elif isinstance(entry, ParkingEntry):
            parking = simulate_parking(entry.parking, battery_left_kwh, car_config, charging_config)
            battery_left_kwh = parking.battery_left_kwh_after
            consumption_entries.append(ChargingParkingEntry(parking=parking))
            _log_detailed(f"PARKING {parking.location.name or parking.location.address}: "
                          f"{parking.duration_minutes}min @ {parking.charging_power_kw}kW, "
                          f"charged={parking.charged_kwh:.3f}kWh, battery={battery_left_kwh:.3f}kWh")
        else:
            raise TypeError(f"Unknown journey entry: {type(entry).__name__}")

    return consumption_entries


def calculate_power_source_result(timeline_objects: List[Dict[str, Any]],
                                  car_config: Dict[str, Any],
                                  charging_config: Dict[str, float],
                                  temperature_config: Optional[Dict[int, float]] = None,
                                  timezone: str = LOCAL_TIMEZONE) -> PowerSourceResult:
    """Full pipeline from sorted timeline objects to simulated consumption entries"""
    journeys = extract_journeys(timeline_objects)
    journey_entries = build_journey_entries(journeys)
    entries = simulate_consumption(journey_entries, car_config, charging_config, temperature_config, timezone)

    logger.info(f"Simulated {len(journeys)} journeys and {len(journey_entries) - len(journeys)} parking stops")
    return PowerSourceResult(entries=entries)
