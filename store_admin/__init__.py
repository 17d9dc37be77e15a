"""Store administration backend: stores, employees, packages and bookings."""

__version__ = "0.1.0"
