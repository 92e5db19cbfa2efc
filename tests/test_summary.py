"""Tests for totals, costs and groupings."""
import pandas as pd
import pytest

from phev_analyzer.analysis.summary import (
    calculate_totals,
    entries_to_dataframe,
    get_electric_range_km,
    get_secondary_unit,
    group_journeys,
)
from phev_analyzer.data_processing.gap_sequencer import build_journey_entries
from phev_analyzer.models.entries import PowerSourceResult
from phev_analyzer.simulation.battery_simulator import (
    calculate_power_source_result,
    simulate_consumption,
)
from tests.helpers import make_journey, utc


def _simulate(journeys, car_config, chargers=None):
    entries = simulate_consumption(build_journey_entries(journeys), car_config, chargers or {}, {})
    return PowerSourceResult(entries=entries)


@pytest.fixture
def two_journeys(exact_car_config, home, mall):
    # 20 km at 40 km/h (17 kWh/100km), then 100 km at 100 km/h (21 kWh/100km)
    return _simulate([
        make_journey(20.0, utc(2023, 1, 20, 10, 0), utc(2023, 1, 20, 10, 30), home, mall),
        make_journey(100.0, utc(2023, 2, 3, 10, 0), utc(2023, 2, 3, 11, 0), mall, home),
    ], exact_car_config)


class TestTotals:
    """Aggregate distance, energy and cost."""

    def test_totals(self, two_journeys, exact_car_config):
        totals = calculate_totals(two_journeys, exact_car_config)

        # 3.4 kWh for the first journey leaves 8.1 kWh, enough for 38.57 km at 21 kWh/100km
        electric_km = 20.0 + 8.1 / 21.0 * 100
        secondary_km = 120.0 - electric_km
        petrol_l = secondary_km / 100 * 6.5

        assert totals['journeys'] == 2
        assert totals['total_distance_km'] == pytest.approx(120.0)
        assert totals['electric_distance_km'] == pytest.approx(electric_km)
        assert totals['secondary_distance_km'] == pytest.approx(secondary_km)
        assert totals['electric_share'] == pytest.approx(electric_km / 120.0)
        assert totals['electric_consumption_kwh'] == pytest.approx(11.5)
        assert totals['secondary_consumption'] == pytest.approx(petrol_l)
        assert totals['electric_cost_euro'] == pytest.approx(11.5 * 0.2)
        assert totals['secondary_cost_euro'] == pytest.approx(petrol_l * 2.5)
        assert totals['total_cost_euro'] == pytest.approx(11.5 * 0.2 + petrol_l * 2.5)
        assert totals['charged_kwh'] == 0

    def test_pure_electric_secondary_is_priced_as_electricity(self, exact_car_config, home, mall):
        exact_car_config['is_pure_electric'] = True
        result = _simulate([
            make_journey(100.0, utc(2023, 2, 3, 10, 0), utc(2023, 2, 3, 11, 0), home, mall),
        ], exact_car_config)

        totals = calculate_totals(result, exact_car_config)

        # 21 kWh needed, 11.5 kWh from the battery, the rest from the grid
        assert totals['secondary_consumption'] == pytest.approx(9.5)
        assert totals['secondary_cost_euro'] == pytest.approx(9.5 * 0.2)
        assert totals['total_cost_euro'] == pytest.approx(21.0 * 0.2)
        assert get_secondary_unit(exact_car_config) == 'kWh'

    def test_charged_energy(self, exact_car_config, home, mall):
        result = _simulate([
            make_journey(20.0, utc(2023, 1, 20, 10, 0), utc(2023, 1, 20, 10, 30), home, mall),
            make_journey(20.0, utc(2023, 1, 20, 11, 35), utc(2023, 1, 20, 12, 5), mall, home),
        ], exact_car_config, {'Iso Omena': 50})

        # 65 minute stop, 60 minutes at 3.7 kW, more than the 3.4 kWh used
        assert calculate_totals(result, exact_car_config)['charged_kwh'] == pytest.approx(3.4)

    def test_empty(self, car_config):
        totals = calculate_totals(PowerSourceResult(entries=[]), car_config)

        assert totals['journeys'] == 0
        assert totals['total_distance_km'] == 0
        assert totals['electric_share'] == 0
        assert totals['total_cost_euro'] == 0


class TestGroupings:
    """Distance grouped by time and journey length."""

    def test_year_month(self, two_journeys):
        grouped = group_journeys(two_journeys, by='year_month', timezone='UTC')

        assert list(grouped['group']) == ['Jan 23', 'Feb 23']
        assert grouped['electric_distance_km'].iloc[0] == pytest.approx(20.0)
        assert grouped['secondary_distance_km'].iloc[0] == 0

    def test_month_is_ordered_by_calendar(self, exact_car_config, home, mall):
        result = _simulate([
            make_journey(5.0, utc(2022, 12, 1, 10, 0), utc(2022, 12, 1, 10, 30), home, mall),
            make_journey(5.0, utc(2023, 3, 1, 10, 0), utc(2023, 3, 1, 10, 30), mall, home),
            make_journey(5.0, utc(2023, 12, 1, 10, 0), utc(2023, 12, 1, 10, 30), home, mall),
        ], exact_car_config)

        grouped = group_journeys(result, by='month', timezone='UTC')

        assert list(grouped['group']) == ['Mar', 'Dec']
        assert grouped['electric_distance_km'].iloc[1] == pytest.approx(10.0)

    def test_length_buckets(self, two_journeys):
        grouped = group_journeys(two_journeys, by='length')

        assert list(grouped['group']) == ['<30 km', '<110 km']
        total = grouped['electric_distance_km'] + grouped['secondary_distance_km']
        assert list(total) == pytest.approx([20.0, 100.0])

    def test_unknown_grouping(self, two_journeys):
        with pytest.raises(ValueError):
            group_journeys(two_journeys, by='week')

    def test_empty(self):
        grouped = group_journeys(PowerSourceResult(entries=[]), by='month')
        assert grouped.empty


class TestTables:
    """Entry table and range estimate."""

    def test_entries_to_dataframe(self, car_config, sample_timeline):
        result = calculate_power_source_result(sample_timeline, car_config, {'Iso Omena': 100})

        df = entries_to_dataframe(result)

        assert len(df) == 9
        assert list(df['type'][:3]) == ['journey', 'parking', 'journey']
        assert df.loc[1, 'location'] == 'Work'
        assert df.loc[1, 'confidence'] == 'high'
        assert df.loc[3, 'charging_power_kw'] == 3.7
        assert isinstance(df['start_timestamp'].dtype, pd.DatetimeTZDtype)

    def test_electric_range(self, car_config):
        ranges = get_electric_range_km(car_config)

        assert ranges[50] == pytest.approx(11.5 / 17 * 100)
        assert ranges[120] == pytest.approx(11.5 / 23 * 100)
