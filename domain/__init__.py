"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for the Category -> Subcategory -> Item tree
- taxonomy: Normalization, merge, split, specialization and dedupe stages
"""

from domain.schemas import Category, Item, Subcategory

__all__ = [
    "Category",
    "Subcategory",
    "Item",
]
