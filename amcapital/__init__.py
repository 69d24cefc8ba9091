"""
amcapital - Rental Investment Simulator

Profitability engine behind the A&M Capital simulator.

Modules:
    - core: Reference tables, loan maths, validation, settings, logging
    - domain: Pydantic models and the revenue resolver / returns calculator
    - application: Simulation, comparison, taxation, projections, market data
    - services: JSON and PDF report export
    - ui: Streamlit pages and UI components
"""

__version__ = "1.4.0"
