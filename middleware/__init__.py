"""HTTP middleware for LightBnB API."""
