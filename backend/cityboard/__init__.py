"""City dashboard: weather, news and exchange rates for a city behind one API."""

__version__ = "1.0.0"
