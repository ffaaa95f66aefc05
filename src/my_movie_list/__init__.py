"""My Movie List - social movie watchlist backend."""

__version__ = "0.1.0"
