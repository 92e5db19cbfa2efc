"""
Vehicle and charger configuration for the PHEV power source analyzer
Defaults describe a typical plug-in hybrid and the chargers along its usual routes
"""

# Bump when the shape of CAR_CONFIG changes; stored overrides with another version are discarded
CAR_CONFIG_VERSION = 2

# Speed bands (km/h) for which an electric consumption figure is configured
SPEED_BANDS = (50, 80, 100, 120)

# Plug-in hybrid defaults
DEFAULT_CAR_CONFIG = {
    'version': CAR_CONFIG_VERSION,
    'battery_capacity_kwh': 11.5,
    'electricity_consumption_kwh_per_100km_at': {
        50: 17.0,
        80: 19.0,
        100: 21.0,
        120: 23.0,
    },
    'petrol_consumption_l_per_100km': 6.5,
    'is_pure_electric': False,           # True: secondary fuel is grid electricity (kWh)
    'electricity_price_euro_per_kwh': 0.2,
    'petrol_price_euro_per_liter': 2.5,
    'max_charging_power_kw': 3.7,        # on-board charger limit
    'distance_inaccuracy_coefficient': 1.05,  # location history under-reports distance
}

# Rated charger power (kW) by place address or place name
DEFAULT_CHARGING_CONFIG = {
    'K-Supermarket Raisio Center': 50,
    'Mylly': 22,
    'Sello': 22,
    'Shopping Center Sello': 22,
    'Nauvon vierassatama': 22,
    'Pizzeria Najaden': 22,
    'K-Supermarket Mankkaa': 50,
    'Shopping Center Grani': 50,
    'Lidl Laajalahti Bredis': 22,
    'K-Citymarket Nummela': 50,
    'K-Citymarket Vichtis Nummela': 50,
    'K-Supermarket Jakobacka': 11,
    'Kauppakeskus Kaari': 20,
    'K-Citymarket Rauma': 50,
    'Maritime Centre Vellamo': 22,
    'Haminan Sotilaskotiyhdistys Ry': 22,
    'Restaurant mon ami': 22,
    'Hotel Haikko Manor': 22,
    'Hotel Amandis': 22,
    'Porvoon Paahtimo Bar & Café': 22,
    'ABC Renkomäki Lahtis': 150,
    'Kärkkäinen Lahtis': 60,
    'Teboil Huttula': 22,
    'ABC Heinola': 150,
    'Iso Omena': 100,
    'Motonet': 22,
    'Ravintola Siilinpesä': 22,
    'Prisma Kirkkonummi': 100,
    'Verkkokauppa.com': 22,
}

# Simulation Parameters
SIMULATION_CONFIG = {
    'charging_setup_minutes': 5,         # parking time lost to plugging in
    'secondary_fuel_unit': 'l',
    'pure_electric_secondary_unit': 'kWh',
}

# Export all configurations
__all__ = [
    'CAR_CONFIG_VERSION',
    'SPEED_BANDS',
    'DEFAULT_CAR_CONFIG',
    'DEFAULT_CHARGING_CONFIG',
    'SIMULATION_CONFIG',
]
