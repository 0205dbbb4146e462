"""Shared enums for models."""

from enum import Enum


class CatalogCollection(str, Enum):
    """The five read-only catalog collections.

    Values double as table names, URL segments and project selection fields.
    """

    THEMES = "themes"
    DECORATIONS = "decorations"
    FOOD = "food"
    DRINKS = "drinks"
    ACTIVITIES = "activities"
