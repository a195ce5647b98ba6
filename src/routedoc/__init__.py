"""routedoc — render API reference documentation from a service description."""

__version__ = "0.3.0"
