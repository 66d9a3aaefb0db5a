"""Items, ships, skills, commodity markets, orders and contracts for a space trading simulation."""

__version__ = "0.1.0"