"""Destination autocomplete: curated gazetteer first, filtered geocoder fallback."""

__version__ = "0.1.0"
