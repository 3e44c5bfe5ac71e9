"""Route group exports."""

from . import geo, health, pricing, quotes

__all__ = ["pricing", "quotes", "geo", "health"]
