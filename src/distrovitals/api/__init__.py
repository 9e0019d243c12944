"""Backend API access."""

from distrovitals.api.client import ApiError, DistroVitalsClient

__all__ = ["ApiError", "DistroVitalsClient"]
