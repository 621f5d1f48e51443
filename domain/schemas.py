"""Pydantic models for the canonical taxonomy tree (Category -> Subcategory -> Item)."""

from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Leaf node of the taxonomy."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name, trimmed.")
    id: str = Field(..., description="Stable identifier derived from the name (see slugify).")


class Subcategory(BaseModel):
    """Second level of the taxonomy: an ordered group of items."""

    model_config = ConfigDict(frozen=True)

    name: str
    id: str
    items: tuple[Item, ...] = Field(
        default_factory=tuple,
        description="Items in first-seen order. Unique by id once the tree has been deduplicated.",
    )


class Category(BaseModel):
    """Top-level node of the taxonomy."""

    model_config = ConfigDict(frozen=True)

    name: str
    id: str
    subcategories: tuple[Subcategory, ...] = Field(default_factory=tuple)
