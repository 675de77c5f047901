"""Catálogo SCIAN → BMX — keyword lookup over the activity-code catalog."""
__version__ = "1.0.0"
