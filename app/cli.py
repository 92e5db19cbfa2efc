"""
Command line entry point: estimate the power source split of a driving history
"""
import argparse
import os
from typing import List, Optional

from dotenv import load_dotenv

from config.logging_config import get_logging_config, switch_logging_mode
from config.temperature_config import LOCAL_TIMEZONE
from app.services.config_service import merged_runtime_config
from phev_analyzer.analysis.summary import (
    GROUP_BY_OPTIONS,
    calculate_totals,
    entries_to_dataframe,
    get_electric_range_km,
    get_secondary_unit,
    group_journeys,
)
from phev_analyzer.data_processing.timeline_loader import load_timeline_files
from phev_analyzer.simulation.battery_simulator import calculate_power_source_result
from phev_analyzer.utils.logger import get_logger, print_summary, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate electric vs. secondary fuel usage from Google Semantic Location History files"
    )
    parser.add_argument('files', nargs='+', help='Semantic Location History JSON files (e.g. 2023_JANUARY.json)')
    parser.add_argument('--config', type=str, default=None, help='User configuration YAML file')
    parser.add_argument('--log-mode', type=str, default=None,
                        choices=['PRODUCTION', 'DEVELOPMENT', 'DEBUG', 'SILENT', 'TESTING'])
    parser.add_argument('--timezone', type=str, default=LOCAL_TIMEZONE,
                        help='Time zone used for month and hour of day')
    parser.add_argument('--group-by', type=str, choices=GROUP_BY_OPTIONS, default='year_month')
    parser.add_argument('--output-csv', type=str, default=None, help='Write every journey and stop to a CSV file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    log_mode = args.log_mode or os.getenv('PHEV_LOG_MODE')
    if log_mode:
        switch_logging_mode(log_mode)
    setup_logger(**get_logging_config())
    logger = get_logger('cli')

    runtime_config = merged_runtime_config(args.config or os.getenv('PHEV_CONFIG_PATH'))
    car_config = runtime_config['car']

    timeline_objects = load_timeline_files(args.files)
    result = calculate_power_source_result(
        timeline_objects,
        car_config,
        runtime_config['charging'],
        runtime_config['temperature'],
        timezone=args.timezone,
    )

    totals = calculate_totals(result, car_config)
    secondary_unit = get_secondary_unit(car_config)
    print_summary("POWER SOURCE SUMMARY", {
        'journeys': totals['journeys'],
        'total distance (km)': totals['total_distance_km'],
        'electric distance (km)': totals['electric_distance_km'],
        'secondary distance (km)': totals['secondary_distance_km'],
        'electric share (%)': totals['electric_share'] * 100,
        'electricity used (kWh)': totals['electric_consumption_kwh'],
        f'secondary fuel used ({secondary_unit})': totals['secondary_consumption'],
        'charged while parked (kWh)': totals['charged_kwh'],
        'electricity cost (€)': totals['electric_cost_euro'],
        'secondary fuel cost (€)': totals['secondary_cost_euro'],
        'total cost (€)': totals['total_cost_euro'],
        'final battery (kWh)': result.final_battery_kwh,
    })

    print_summary("ELECTRIC RANGE ON FULL BATTERY", {
        f'@ {band} km/h (km)': range_km for band, range_km in get_electric_range_km(car_config).items()
    })

    grouped = group_journeys(result, by=args.group_by, timezone=args.timezone)
    print_summary(f"DISTANCE BY {args.group_by.upper()}", {
        row['group']: f"{row['electric_distance_km']:.1f} km electric / {row['secondary_distance_km']:.1f} km secondary"
        for _, row in grouped.iterrows()
    })

    if args.output_csv:
        entries_to_dataframe(result).to_csv(args.output_csv, index=False)
        logger.info(f"Wrote {len(result.entries)} entries to {args.output_csv}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
