"""Direct-route fare and timing search over a rail network."""

__version__ = "1.0.0"
