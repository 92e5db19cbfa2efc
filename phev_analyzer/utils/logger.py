"""
Centralized logging module for the PHEV power source analyzer
Provides easy on/off switching and consistent logging across all modules
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional, Dict, Any


class PowerSourceLogger:
    """
    Centralized logger for the PHEV power source analyzer
    Provides easy switching between different logging levels and outputs
    """

    def __init__(self,
                 log_level: str = "INFO",
                 enable_console: bool = True,
                 enable_file: bool = False,
                 log_dir: str = "debug_logs",
                 detailed_logging: bool = False,
                 log_format: str = "detailed"):
        """
        Initialize the logger

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            enable_console: Whether to log to console
            enable_file: Whether to log to files
            log_dir: Directory for log files
            detailed_logging: Enable detailed per-component log files
            log_format: Log format style ("simple", "detailed", "minimal")
        """
        self.log_level = getattr(logging, log_level.upper())
        self.enable_console = enable_console
        self.enable_file = enable_file
        self.log_dir = log_dir
        self.detailed_logging = detailed_logging
        self.log_format = log_format

        # Create log directory if needed
        if self.enable_file or self.detailed_logging:
            os.makedirs(self.log_dir, exist_ok=True)

        self._setup_loggers()

        # Track detailed logging files
        self.detailed_log_files = {}

    def _setup_loggers(self):
        """Setup the package logger with proper configuration"""

        self.logger = logging.getLogger('phev_analyzer')
        self.logger.setLevel(self.log_level)

        # Clear any existing handlers
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        if self.log_format == "detailed":
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
            )
        elif self.log_format == "simple":
            formatter = logging.Formatter('%(levelname)s - %(message)s')
        else:  # minimal
            formatter = logging.Formatter('%(message)s')

        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.log_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if self.enable_file:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            log_file = os.path.join(self.log_dir, f'phev_analyzer_{timestamp}.log')

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

            self.log_file = log_file
        else:
            self.log_file = None

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def get_logger(self, name: str = None) -> logging.Logger:
        """Get a logger instance for a specific module"""
        if name:
            return logging.getLogger(f'phev_analyzer.{name}')
        return self.logger

    def print_summary(self, title: str, data: Dict[str, Any]):
        """Print a formatted summary"""
        print(f"\n{'='*50}")
        print(title)
        print(f"{'='*50}")

        for key, value in data.items():
            if isinstance(value, float):
                print(f"  {key}: {value:,.2f}")
            elif isinstance(value, int) and value >= 1000:
                print(f"  {key}: {value:,}")
            else:
                print(f"  {key}: {value}")

        print(f"{'='*50}")

    def create_detailed_log_file(self, name: str, run_id: str = "default") -> Optional[str]:
        """Create a detailed log file for a specific component"""
        if not self.detailed_logging:
            return None

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        filepath = os.path.join(self.log_dir, f"{name}_{run_id}_{timestamp}.log")

        self.detailed_log_files[name] = filepath

        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(f"Detailed Log: {name}\n")
            f.write(f"Run: {run_id}\n")
            f.write(f"Timestamp: {datetime.now().isoformat()}\n")
            f.write(f"{'='*60}\n\n")

        return filepath

    def log_detailed(self, message: str, log_name: str, run_id: str = "default"):
        """Log detailed message to specific log file"""
        if not self.detailed_logging:
            return

        if log_name not in self.detailed_log_files:
            self.create_detailed_log_file(log_name, run_id)

        with open(self.detailed_log_files[log_name], 'a', encoding='utf-8') as f:
            f.write(f"{message}\n")


# Global logger instance
_global_logger = None

def get_logger(name: str = None) -> logging.Logger:
    """Get a module logger from the global logger instance"""
    return get_global_logger().get_logger(name)

def setup_logger(**kwargs) -> PowerSourceLogger:
    """Setup the global logger with custom configuration"""
    global _global_logger
    _global_logger = PowerSourceLogger(**kwargs)
    return _global_logger

def get_global_logger() -> PowerSourceLogger:
    """Get the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = PowerSourceLogger()
    return _global_logger

# Convenience functions
def print_summary(title: str, data: Dict[str, Any]):
    """Print a formatted summary"""
    get_global_logger().print_summary(title, data)

def log_detailed(message: str, log_name: str, run_id: str = "default"):
    """Log detailed message"""
    get_global_logger().log_detailed(message, log_name, run_id)
