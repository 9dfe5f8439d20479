"""Registry of documentation targets."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

# Product id -> documentation entry point
ZOHO_PRODUCTS: Mapping[str, str] = MappingProxyType(
    {
        "crm": "https://www.zoho.com/crm/developer/docs/api/v8/",
        "books": "https://www.zoho.com/books/api/v3/",
        "desk": "https://desk.zoho.com/DeskAPIDocument",
        "analytics": "https://www.zoho.com/analytics/api/",
        "campaigns": "https://www.zoho.com/campaigns/help/developers/api/",
        "salesiq": "https://www.zoho.com/salesiq/help/developer-section/",
        "flow": "https://www.zoho.com/flow/help/api.html",
        "people": "https://www.zoho.com/people/api/",
        "recruit": "https://www.zoho.com/recruit/developer-guide/",
        "inventory": "https://www.zoho.com/inventory/api/v1/",
        "sign": "https://www.zoho.com/sign/api/",
        "invoice": "https://www.zoho.com/invoice/api/v3/",
        "expense": "https://www.zoho.com/expense/api/v1/",
        "subscriptions": "https://www.zoho.com/subscriptions/api/v1/",
        "projects": "https://www.zoho.com/projects/help/rest-api/",
        "creator": "https://www.zoho.com/creator/help/api/",
        "cliq": "https://www.zoho.com/cliq/help/platform/api-overview.html",
        "mail": "https://www.zoho.com/mail/help/api/",
        "meeting": "https://www.zoho.com/meeting/api-integration.html",
        "connect": "https://www.zoho.com/connect/api/",
        "workdrive": "https://workdrive.zoho.com/apidocs/",
        "sprints": "https://www.zoho.com/sprints/api/",
        "writer": "https://www.zoho.com/writer/api/",
        "sheet": "https://www.zoho.com/sheet/api/",
        "show": "https://www.zoho.com/show/api/",
        "forms": "https://www.zoho.com/forms/help/api/",
        "survey": "https://www.zoho.com/survey/help/api/",
        "deluge": "https://www.zoho.com/deluge/help/",
    }
)

# Only checked when asked for explicitly
DEFAULT_EXCLUDED = frozenset({"deluge"})


@dataclass(frozen=True)
class ProductSelection:
    """Outcome of resolving requested product names against a registry."""

    products: tuple[str, ...]
    unknown: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.products


@dataclass(frozen=True)
class ProductRegistry:
    """Immutable mapping of product ids to documentation URLs.

    Attributes:
        products: Product id -> documentation URL, in check order
        excluded: Ids left out of the default "all products" selection
    """

    products: Mapping[str, str] = field(default_factory=lambda: ZOHO_PRODUCTS)
    excluded: frozenset[str] = DEFAULT_EXCLUDED

    def __post_init__(self) -> None:
        object.__setattr__(self, "products", MappingProxyType(dict(self.products)))
        object.__setattr__(self, "excluded", frozenset(self.excluded))

    def __contains__(self, product: object) -> bool:
        return product in self.products

    def __len__(self) -> int:
        return len(self.products)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.products)

    def url_for(self, product: str) -> str | None:
        """Get the documentation URL for a product, or None if unknown."""
        return self.products.get(product)

    def resolve(
        self, requested: Iterable[str] = (), include_excluded: bool = False
    ) -> ProductSelection:
        """Turn CLI product arguments into the list of products to check.

        Explicitly requested names are kept in the given order, unknown ones
        are reported separately. Without any request every product is
        selected except the excluded ones, unless ``include_excluded`` is set.

        Args:
            requested: Product ids given by the user
            include_excluded: Also select excluded products in the default run

        Returns:
            ProductSelection with the known and unknown names
        """
        requested = list(requested)
        if requested:
            known = tuple(p for p in requested if p in self.products)
            unknown = tuple(p for p in requested if p not in self.products)
            return ProductSelection(products=known, unknown=unknown)

        if include_excluded:
            return ProductSelection(products=self.names)
        return ProductSelection(
            products=tuple(p for p in self.products if p not in self.excluded)
        )


DEFAULT_REGISTRY = ProductRegistry()
