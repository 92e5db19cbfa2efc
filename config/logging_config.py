"""
Logging configuration for the PHEV power source analyzer
Easy switching between different logging modes
"""

# =============================================================================
# LOGGING CONFIGURATIONS
# =============================================================================

# Production mode - minimal logging
PRODUCTION_LOGGING = {
    'log_level': 'WARNING',
    'enable_console': True,
    'enable_file': False,
    'detailed_logging': False,
    'log_format': 'minimal'
}

# Development mode - standard logging
DEVELOPMENT_LOGGING = {
    'log_level': 'INFO',
    'enable_console': True,
    'enable_file': True,
    'detailed_logging': False,
    'log_format': 'simple'
}

# Debug mode - detailed logging
DEBUG_LOGGING = {
    'log_level': 'DEBUG',
    'enable_console': True,
    'enable_file': True,
    'detailed_logging': True,
    'log_format': 'detailed'
}

# Silent mode - no logging
SILENT_LOGGING = {
    'log_level': 'CRITICAL',
    'enable_console': False,
    'enable_file': False,
    'detailed_logging': False,
    'log_format': 'minimal'
}

# Testing mode - file only logging
TESTING_LOGGING = {
    'log_level': 'DEBUG',
    'enable_console': False,
    'enable_file': True,
    'detailed_logging': True,
    'log_format': 'detailed'
}

LOGGING_MODES = {
    'PRODUCTION': PRODUCTION_LOGGING,
    'DEVELOPMENT': DEVELOPMENT_LOGGING,
    'DEBUG': DEBUG_LOGGING,
    'SILENT': SILENT_LOGGING,
    'TESTING': TESTING_LOGGING
}

# =============================================================================
# QUICK SWITCHES
# =============================================================================

# Change this to switch logging modes
CURRENT_LOGGING_MODE = 'PRODUCTION'  # Options: PRODUCTION, DEVELOPMENT, DEBUG, SILENT, TESTING

# =============================================================================
# DETAILED LOGGING SETTINGS
# =============================================================================

# Enable detailed logging for specific components
DETAILED_LOGGING_COMPONENTS = {
    'consumption_model': False,   # Per-journey speed band and temperature lookups
    'battery_simulation': True,   # Battery level after every journey and stop
    'timeline_loading': False,    # Files read and objects kept
}

# =============================================================================
# LOG FILE SETTINGS
# =============================================================================

LOG_DIR = "debug_logs"

# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def get_logging_config(mode: str = None) -> dict:
    """Get logging configuration for specified mode"""
    if mode is None:
        mode = CURRENT_LOGGING_MODE

    config = dict(LOGGING_MODES.get(mode.upper(), DEVELOPMENT_LOGGING))
    config['log_dir'] = LOG_DIR
    return config

def is_detailed_logging_enabled(component: str) -> bool:
    """Check if detailed logging is enabled for a specific component"""
    return DETAILED_LOGGING_COMPONENTS.get(component, False)

def switch_logging_mode(mode: str):
    """Switch to another logging mode"""
    global CURRENT_LOGGING_MODE
    if mode.upper() not in LOGGING_MODES:
        raise ValueError(f"Unknown logging mode: {mode}")
    CURRENT_LOGGING_MODE = mode.upper()
