"""Shared helpers for LightBnB API."""
