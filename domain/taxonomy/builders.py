"""Node constructors: build canonical nodes from display names."""

from collections.abc import Iterable

from domain.schemas import Category, Item, Subcategory
from domain.taxonomy.slug import slugify


def make_item(name: str) -> Item:
    name = name.strip()
    return Item(name=name, id=slugify(name))


def make_subcategory(name: str, items: Iterable[Item] = ()) -> Subcategory:
    name = name.strip()
    return Subcategory(name=name, id=slugify(name), items=tuple(items))


def make_category(name: str, subcategories: Iterable[Subcategory] = ()) -> Category:
    name = name.strip()
    return Category(name=name, id=slugify(name), subcategories=tuple(subcategories))
