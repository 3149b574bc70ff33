"""Fleetboard: API backend for the fleet-management dashboard."""

__version__ = "1.0.0"
