from .base import (
    AlwaysSatisfied,
    AndSpecification,
    BaseSpecification,
    NeverSatisfied,
    NotSpecification,
    OrSpecification,
    all_of,
    and_,
    any_of,
    not_,
    or_,
)
from .exceptions import (
    ConstructionError,
    EvaluationError,
    FilterEvaluationError,
    InvalidSpecificationError,
    MissingSpecificationError,
    SpecificationError,
)
from .filtering import IFilter, SpecificationFilter, filter_by, first_match
from .specification import ISpecification, require_specification

__all__ = [
    # Core types
    "ISpecification",
    "BaseSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "AlwaysSatisfied",
    "NeverSatisfied",
    "require_specification",
    # Combinators
    "and_",
    "or_",
    "not_",
    "all_of",
    "any_of",
    # Filter engine
    "IFilter",
    "SpecificationFilter",
    "filter_by",
    "first_match",
    # Exceptions
    "SpecificationError",
    "ConstructionError",
    "MissingSpecificationError",
    "InvalidSpecificationError",
    "EvaluationError",
    "FilterEvaluationError",
]
