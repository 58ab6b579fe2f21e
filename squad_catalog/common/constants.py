"""
Shared constants for the project.

Column names of the Shopify-style product export. Matching is case-sensitive.
"""

COL_HANDLE = 'Handle'
COL_TITLE = 'Title'
COL_BODY = 'Body (HTML)'
COL_VENDOR = 'Vendor'
COL_PRODUCT_TYPE = 'Product Type'
COL_TAGS = 'Tags'
COL_PUBLISHED = 'Published'
COL_IMAGE_SRC = 'Image Src'
COL_VARIANT_SKU = 'Variant SKU'
COL_OPTION1_NAME = 'Option1 Name'
COL_OPTION1_VALUE = 'Option1 Value'
COL_OPTION2_NAME = 'Option2 Name'
COL_OPTION2_VALUE = 'Option2 Value'
COL_OPTION3_NAME = 'Option3 Name'
COL_OPTION3_VALUE = 'Option3 Value'
COL_VARIANT_PRICE = 'Variant Price'
COL_VARIANT_INVENTORY_QTY = 'Variant Inventory Qty'

CATALOG_COLUMNS = [
    COL_HANDLE, COL_TITLE, COL_BODY, COL_VENDOR, COL_PRODUCT_TYPE, COL_TAGS,
    COL_PUBLISHED, COL_IMAGE_SRC, COL_VARIANT_SKU,
    COL_OPTION1_NAME, COL_OPTION1_VALUE,
    COL_OPTION2_NAME, COL_OPTION2_VALUE,
    COL_OPTION3_NAME, COL_OPTION3_VALUE,
    COL_VARIANT_PRICE, COL_VARIANT_INVENTORY_QTY,
]

# Option name substrings used for attribute inference
SIZE_KEYWORDS = ('size',)
COLOR_KEYWORDS = ('color', 'colour')

# Document path of the stored catalog: collection / document
CATALOG_COLLECTION = 'catalog'
CATALOG_DOCUMENT = 'products'

# Recorded on squad items when a product has no size/colour choice
DEFAULT_SELECTION = 'Default'
