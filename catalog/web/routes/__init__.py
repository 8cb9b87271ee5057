"""Routeurs HTTP de l'API catalogue."""
