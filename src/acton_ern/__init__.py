"""Acton ERN - Entity Resource Names

This package provides hierarchical, colon- and slash-delimited resource
identifiers with an ordered builder, a strict parser and type-tagged,
generated root ids.
"""

import logging

from .errors import (
    ErnError,
    ErnFormatError,
    IllegalPartFormatError,
    InvalidDomainError,
    ParseError,
    InvalidPrefixError,
    UnexpectedPartError,
    MissingPartError,
    IdGenerationError,
    OrderingError,
)
from .id_types import DEFAULT_ID_TYPE, IdType, TypeSafeId
from .model import (
    ERN_PREFIX,
    Domain,
    Category,
    Account,
    Part,
    Parts,
    Root,
    Ern,
)
from .builder import BuilderState, ErnBuilder
from .parser import ErnParser, parse_ern

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "2.1.0"

__all__ = [
    "Ern",
    "ErnBuilder",
    "BuilderState",
    "ErnParser",
    "parse_ern",
    "Domain",
    "Category",
    "Account",
    "Part",
    "Parts",
    "Root",
    "ERN_PREFIX",
    "IdType",
    "TypeSafeId",
    "DEFAULT_ID_TYPE",
    "ErnError",
    "ErnFormatError",
    "IllegalPartFormatError",
    "InvalidDomainError",
    "ParseError",
    "InvalidPrefixError",
    "UnexpectedPartError",
    "MissingPartError",
    "IdGenerationError",
    "OrderingError",
]
