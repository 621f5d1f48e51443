"""Static composition rules: compound-category splits and content-based specializations."""

from pydantic import BaseModel, Field, model_validator

from domain.taxonomy.slug import slugify

# Keyword deciding whether an item belongs to the belts side ("Correias") of the
# belts/conveyors composite. Case-insensitive substring match on the item name.
BELT_KEYWORD = "correia"

# Source category id -> ordered target display names
SPLIT_TABLE: dict[str, tuple[str, ...]] = {
    "separadores-magneticos-e-detectores": ("Separadores Magnéticos", "Detectores de Metais"),
    "correias-e-transportadores": ("Correias", "Transportadores"),
    "linha-amarela-fora-de-estrada": ("Caminhões Linha Amarela", "Caminhões Fora de Estrada"),
}


class SubcategoryRoute(BaseModel):
    """Filter the items of ``source`` into an output subcategory named ``target``."""

    source: str
    target: str


class SpecializationRule(BaseModel):
    """
    Content-aware rebuild of one category's subcategories.

    Items of routed subcategories are kept when ``keyword in name.lower()`` equals
    ``keep_matching``; ``carry`` subcategories are copied as-is. Subcategories named
    by neither list are not carried over.
    """

    category: str
    keyword: str = BELT_KEYWORD
    keep_matching: bool = True
    routes: list[SubcategoryRoute] = Field(default_factory=list)
    carry: list[str] = Field(default_factory=list)
    placeholder: str | None = Field(
        default=None,
        description="Empty subcategory emitted when no output subcategory has items.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "SpecializationRule":
        if not slugify(self.category):
            raise ValueError("specialization category must have a non-empty name")
        if not self.keyword.strip():
            raise ValueError(f"specialization keyword for {self.category!r} must not be empty")
        self.keyword = self.keyword.strip().lower()
        return self

    @property
    def category_id(self) -> str:
        return slugify(self.category)

    def matches(self, item_name: str) -> bool:
        return self.keyword in item_name.lower()

    def keeps(self, item_name: str) -> bool:
        return self.matches(item_name) == self.keep_matching


def default_specializations(keyword: str = BELT_KEYWORD) -> list[SpecializationRule]:
    """Belts vs. conveyors: the two halves of the split belts/conveyors composite."""
    return [
        SpecializationRule(
            category="Correias",
            keyword=keyword,
            keep_matching=True,
            routes=[
                SubcategoryRoute(source="Transportadores", target="Correias"),
                SubcategoryRoute(source="Peças", target="Peças"),
            ],
            carry=["Serviços", "Outros"],
            placeholder="Correias",
        ),
        SpecializationRule(
            category="Transportadores",
            keyword=keyword,
            keep_matching=False,
            routes=[
                SubcategoryRoute(source="Transportadores", target="Transportadores"),
                SubcategoryRoute(source="Peças", target="Peças"),
            ],
            carry=["Serviços", "Outros"],
        ),
    ]


SPECIALIZATION_RULES: tuple[SpecializationRule, ...] = tuple(default_specializations())


class TaxonomyRules(BaseModel):
    """Composition rules applied after normalization and merge."""

    split_table: dict[str, tuple[str, ...]] = Field(default_factory=lambda: dict(SPLIT_TABLE))
    specializations: list[SpecializationRule] = Field(default_factory=default_specializations)
