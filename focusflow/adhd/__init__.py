"""ADHD support - energy-matched suggestions and brief, filler-free replies

Components:
    energy.py: Suggestion bundle for a self-reported energy level
    formatter.py: Strip preamble and cap sentence count on generated text
"""

ENERGY_LEVELS = ("low", "medium", "high")

__all__ = ["ENERGY_LEVELS"]
