"""Self-Care Garden: a persisted wellness-gamification engine"""

__version__ = "2.0.0"
