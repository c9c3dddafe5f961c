"""
Service Layer Package

- GardenContext: explicit engine state (profile, store, clock, rules, events)
- GardenService: user actions on top of the progression engine
"""

from garden.services.context import GardenContext
from garden.services.garden_service import GardenService

__all__ = [
    "GardenContext",
    "GardenService",
]
