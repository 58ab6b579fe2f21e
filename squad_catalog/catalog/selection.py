"""
Variant selection helpers.

Used when a participant picks a size and colour of a catalog product
before adding it to the squad list.
"""

from typing import List, Optional

from ..common.constants import DEFAULT_SELECTION
from ..common.text_utils import html_to_text
from ..models import CatalogProduct, CatalogVariant, SelectedVariant, SquadItem, new_id


def _unique(values) -> List[str]:
    seen = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return seen


def available_sizes(product: CatalogProduct) -> List[str]:
    """Distinct variant sizes in first-seen order."""
    return _unique(v.size for v in product.variants)


def available_colors(product: CatalogProduct) -> List[str]:
    """Distinct variant colours in first-seen order."""
    return _unique(v.color for v in product.variants)


def find_variant(
    product: CatalogProduct,
    size: Optional[str] = None,
    color: Optional[str] = None,
) -> Optional[CatalogVariant]:
    """
    Find the first variant matching the selection.

    An empty size or colour matches any variant.

    Returns:
        Matching variant or None
    """
    for variant in product.variants:
        if size and variant.size != size:
            continue
        if color and variant.color != color:
            continue
        return variant
    return None


def selected_price(
    product: CatalogProduct,
    size: Optional[str] = None,
    color: Optional[str] = None,
) -> float:
    """Price of the selected variant, or the product's base price."""
    variant = find_variant(product, size, color)
    if variant is not None and variant.price:
        return variant.price
    return product.base_price


def to_squad_item(
    product: CatalogProduct,
    added_by: str,
    size: Optional[str] = None,
    color: Optional[str] = None,
    now=None,
) -> SquadItem:
    """
    Turn a catalog product and a size/colour choice into a squad list item.

    Args:
        product: Catalog product picked by the participant
        added_by: Participant id
        size: Selected size (recorded as "Default" when empty)
        color: Selected colour (recorded as "Default" when empty)
        now: Timestamp for added_at (defaults to current UTC time)

    Returns:
        SquadItem priced from the selected variant
    """
    item = SquadItem(
        id=new_id(),
        title=product.title,
        price=selected_price(product, size, color),
        added_by=added_by,
        images=list(product.images),
        description=html_to_text(product.body),
        vendor=product.vendor,
        product_type=product.product_type,
        selected_variant=SelectedVariant(
            size=size or DEFAULT_SELECTION,
            color=color or DEFAULT_SELECTION,
        ),
    )
    if now is not None:
        item.added_at = now
    return item
