"""
Catalog data models.

Pure data classes for the normalized product catalog.
Only the mapping to and from the stored document layout lives here.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def new_id() -> str:
    """Generate a random identifier for products and SKU-less variants."""
    return str(uuid.uuid4())


@dataclass
class CatalogVariant:
    """One purchasable variant of a catalog product."""
    id: str
    sku: str
    price: float
    option1_name: str = ""
    option1_value: str = ""
    option2_name: str = ""
    option2_value: str = ""
    option3_name: Optional[str] = None   # None when the column is absent or blank
    option3_value: Optional[str] = None
    inventory_quantity: int = 0
    image_src: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None

    def options(self) -> List[tuple]:
        """Option (name, value) pairs in slot order."""
        return [
            (self.option1_name, self.option1_value),
            (self.option2_name, self.option2_value),
            (self.option3_name, self.option3_value),
        ]

    def has_option_value(self) -> bool:
        """True when at least one option slot carries a value."""
        return any(value for _, value in self.options())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'sku': self.sku,
            'option1Name': self.option1_name,
            'option1Value': self.option1_value,
            'option2Name': self.option2_name,
            'option2Value': self.option2_value,
            'option3Name': self.option3_name,
            'option3Value': self.option3_value,
            'price': self.price,
            'inventoryQuantity': self.inventory_quantity,
            'imageSrc': self.image_src,
            'size': self.size,
            'color': self.color,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CatalogVariant':
        sku = data.get('sku') or ''
        return cls(
            id=data.get('id') or sku or new_id(),
            sku=sku,
            price=float(data.get('price') or 0),
            option1_name=data.get('option1Name') or '',
            option1_value=data.get('option1Value') or '',
            option2_name=data.get('option2Name') or '',
            option2_value=data.get('option2Value') or '',
            option3_name=data.get('option3Name') or None,
            option3_value=data.get('option3Value') or None,
            inventory_quantity=int(data.get('inventoryQuantity') or 0),
            image_src=data.get('imageSrc') or None,
            size=data.get('size') or None,
            color=data.get('color') or None,
        )


@dataclass
class CatalogProduct:
    """
    Normalized catalog product built from all CSV rows sharing a handle.

    Field Groups:
    - Identity: generated id and the handle (natural key)
    - Metadata: taken from the first row of the handle
    - Images: unique URLs in first-seen order
    - Variants: accepted variants in processing order
    - base_price: cheapest accepted variant, 0 without variants
    """

    handle: str
    title: str
    id: str = field(default_factory=new_id)
    body: str = ""              # "Body (HTML)"
    vendor: str = ""
    product_type: str = ""
    tags: List[str] = field(default_factory=list)
    published: bool = False
    images: List[str] = field(default_factory=list)
    variants: List[CatalogVariant] = field(default_factory=list)
    base_price: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'handle': self.handle,
            'title': self.title,
            'body': self.body,
            'vendor': self.vendor,
            'productType': self.product_type,
            'tags': list(self.tags),
            'published': self.published,
            'variants': [v.to_dict() for v in self.variants],
            'images': list(self.images),
            'basePrice': self.base_price,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CatalogProduct':
        return cls(
            id=data.get('id') or new_id(),
            handle=data.get('handle') or '',
            title=data.get('title') or '',
            body=data.get('body') or '',
            vendor=data.get('vendor') or '',
            product_type=data.get('productType') or '',
            tags=list(data.get('tags') or []),
            published=data.get('published') is True,
            images=list(data.get('images') or []),
            variants=[CatalogVariant.from_dict(v) for v in data.get('variants') or []],
            base_price=float(data.get('basePrice') or 0),
        )


@dataclass
class ImportSummary:
    """Counts reported after a successful catalog import."""
    product_count: int
    variant_count: int
