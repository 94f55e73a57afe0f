"""
Attribute-path leaves for ``ocp_specifications``.

The engine needs none of this: it is one way for a caller to write leaves
without a class per criterion.
"""

from .attribute import AttributeSpecification, resolve_path
from .builder import SpecificationBuilder
from .exceptions import FieldNotFoundError, OperatorNotFoundError
from .operators import AttributeOperator
from .predicates import build_default_registry
from .registry import OperatorRegistry, Predicate

__all__ = [
    "AttributeOperator",
    "AttributeSpecification",
    "SpecificationBuilder",
    "OperatorRegistry",
    "Predicate",
    "build_default_registry",
    "resolve_path",
    "OperatorNotFoundError",
    "FieldNotFoundError",
]
