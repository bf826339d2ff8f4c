"""Core business logic layer.

Subpackages:
- dietary: translating a dietary preference into provider vocabularies
- planning: calorie allocation, ingredient resolution and plan composition
"""
__all__ = ["dietary", "planning"]
