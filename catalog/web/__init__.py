"""Couche de transport HTTP (FastAPI) du catalogue."""
