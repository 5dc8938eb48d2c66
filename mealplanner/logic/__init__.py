"""Core planning logic layer.

Subpackages:
- calendar: week boundaries and date keys
- reporting: nutrition rollups for weeks and plans
- shopping: ingredient aggregation into shopping lists
- planning: importing meal-prep plans into calendar weeks
- catalog: filtering the plan catalog
"""
__all__ = ["calendar", "reporting", "shopping", "planning", "catalog"]
