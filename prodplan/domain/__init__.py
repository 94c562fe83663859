"""Domain layer.

Modules:
- ProductionPlan: production baseline plus an append-only adjustment history
- Adjustment: signed delta applied to a production figure
"""
__all__ = ["ProductionPlan", "Adjustment"]
