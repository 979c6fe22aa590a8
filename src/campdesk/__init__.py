"""CampDesk - camp registration and organization permission service."""

__version__ = "0.1.0"
