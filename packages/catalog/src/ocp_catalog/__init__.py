from .criteria import ColorSpecification, NameSpecification, SizeSpecification
from .products import Color, Product, Size

__all__ = [
    "Color",
    "Size",
    "Product",
    "ColorSpecification",
    "SizeSpecification",
    "NameSpecification",
]
