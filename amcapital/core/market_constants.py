"""Estimation tables for the mocked market-data layer.

These feed the rent and short-term estimators, not the calculator itself.
"""

from types import MappingProxyType

# Purchase price per m² by city (€)
CITY_PRICES_PER_SQM = MappingProxyType({
    "paris": 10500,
    "lyon": 4800,
    "marseille": 3200,
    "toulouse": 3500,
    "nice": 5200,
    "nantes": 3800,
    "montpellier": 3900,
    "strasbourg": 3300,
    "bordeaux": 4500,
    "lille": 3400,
    "rennes": 3600,
    "reims": 2800,
    "saint-etienne": 1500,
    "toulon": 3000,
    "grenoble": 3100,
    "dijon": 2600,
    "angers": 3200,
    "nimes": 2400,
    "villeurbanne": 3700,
    "clermont-ferrand": 2200,
    "cannes": 6800,
    "antibes": 5500,
    "biarritz": 6200,
    "la-rochelle": 3900,
    "saint-malo": 4100,
    "deauville": 5800,
    "arcachon": 5400,
})
DEFAULT_PRICE_PER_SQM = 3500

# Annual rent per m² approximated as price per m² / 20 (5% gross yield)
PRICE_TO_RENT_DIVISOR = 20

# Short-term revenue vs. long-term rent, by tourist appeal
SHORT_TERM_CITY_MULTIPLIERS = MappingProxyType({
    "paris": 3.5,
    "lyon": 2.8,
    "marseille": 2.5,
    "toulouse": 2.4,
    "nice": 3.8,
    "nantes": 2.3,
    "montpellier": 2.6,
    "strasbourg": 2.5,
    "bordeaux": 2.7,
    "lille": 2.2,
    "cannes": 4.2,
    "antibes": 3.9,
    "biarritz": 4.0,
    "deauville": 3.7,
    "arcachon": 3.5,
    "saint-malo": 3.3,
    "la-rochelle": 3.0,
})
DEFAULT_SHORT_TERM_MULTIPLIER = 3.0

# Average occupancy (%)
OCCUPANCY_RATES = MappingProxyType({
    "paris": 75,
    "lyon": 68,
    "marseille": 65,
    "nice": 72,
    "cannes": 78,
    "bordeaux": 70,
    "toulouse": 66,
    "montpellier": 69,
    "strasbourg": 67,
    "biarritz": 74,
})
DEFAULT_OCCUPANCY_RATE = 70

# January .. December
SEASONALITY = (0.7, 0.75, 0.85, 0.95, 1.1, 1.3, 1.5, 1.5, 1.2, 0.95, 0.8, 0.9)

# Short-term operating costs
CLEANING_COST_PER_SQM = 2       # € per turnover
CLEANINGS_PER_MONTH = 4
SHORT_TERM_MANAGEMENT_RATE = 0.20
MONTHLY_SUPPLIES = 50
MONTHLY_UTILITIES = 100

DEFAULT_BASE_MONTHLY_RENT = 1750
