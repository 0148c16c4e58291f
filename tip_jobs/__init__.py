"""Spark ML jobs for the NYC taxi tip-amount analysis."""

__version__ = "0.1.0"
