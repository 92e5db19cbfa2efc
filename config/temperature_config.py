# Ambient temperature inputs for the consumption model

# Local time zone used to derive calendar month and hour of day from UTC timestamps
LOCAL_TIMEZONE = 'Europe/Helsinki'

# Mean monthly temperature (°C) by calendar month, Helsinki
MONTHLY_MEAN_TEMPERATURE = {
    1: -4.0,
    2: -5.0,
    3: -1.5,
    4: 4.0,
    5: 10.0,
    6: 14.5,
    7: 17.5,
    8: 16.0,
    9: 11.0,
    10: 6.0,
    11: 1.5,
    12: -2.0,
}

# Diurnal offset applied to the monthly mean
DIURNAL_TEMPERATURE_OFFSET = 2.5    # °C
NIGHT_STARTS_HOUR = 21              # night is NIGHT_STARTS_HOUR..DAY_STARTS_HOUR
DAY_STARTS_HOUR = 9

# Efficiency value the speed-band consumption figures were measured at
CALIBRATION_EFFICIENCY = 113

# Driving efficiency (%) by ambient temperature (°C), 100% at 10°C
TEMPERATURE_EFFICIENCY = {
    -25: 58, -24: 59, -23: 60, -22: 61, -21: 62,
    -20: 63, -19: 64, -18: 65, -17: 66, -16: 67,
    -15: 68, -14: 69, -13: 70, -12: 72, -11: 73,
    -10: 74, -9: 76, -8: 77, -7: 79, -6: 80,
    -5: 82, -4: 83, -3: 85, -2: 86, -1: 88,
    0: 89, 1: 90, 2: 91, 3: 92, 4: 93,
    5: 94, 6: 95, 7: 96, 8: 97, 9: 99,
    10: 100, 11: 102, 12: 103, 13: 105, 14: 106,
    15: 108, 16: 109, 17: 111, 18: 112, 19: 113,
    20: 115, 21: 115, 22: 114, 23: 114, 24: 113,
    25: 112, 26: 111, 27: 110, 28: 109, 29: 108,
    30: 107, 31: 106, 32: 104, 33: 103, 34: 102,
    35: 100, 36: 99, 37: 97, 38: 96, 39: 94,
    40: 93,
}
