"""Terminal client for DistroVitals distribution health rankings."""

__version__ = "0.1.0"
