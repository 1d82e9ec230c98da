"""Identity verification ROI calculator."""

__version__ = "0.2.0"
