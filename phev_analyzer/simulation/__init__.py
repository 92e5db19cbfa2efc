from .battery_simulator import calculate_power_source_result, simulate_consumption

__all__ = ['calculate_power_source_result', 'simulate_consumption']
