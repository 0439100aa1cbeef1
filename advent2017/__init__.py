"""Solutions to days 1 to 20 of the 2017 programming puzzle calendar."""

__version__ = "1.0.0"