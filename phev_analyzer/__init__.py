"""
PHEV power source analyzer
Estimates how much of a recorded driving history ran on electricity
"""

__version__ = "1.0.0"
