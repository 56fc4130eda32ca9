"""Parser for serialized ERNs

Format: ``eid:<domain>:<category>:<account>:<root>[/<part>...]``

Segments go through the same constructors the builder uses, so anything
rejected here could never have been built. The root is the exception to
re-generation: a parsed root is stored exactly as written.
"""

import logging

from .errors import ErnFormatError, ParseError
from .id_types import DEFAULT_ID_TYPE, IdType
from .model import (
    ERN_PREFIX,
    HIERARCHY_SEPARATOR,
    SEGMENT_SEPARATOR,
    Account,
    Category,
    Domain,
    Ern,
    Parts,
    Root,
)

logger = logging.getLogger(__name__)


class ErnParser:
    """Parses one serialized ERN string"""

    def __init__(self, value: str, id_type: IdType = DEFAULT_ID_TYPE):
        self.value = value
        self.id_type = IdType.resolve(id_type)

    def parse(self) -> Ern:
        """Parse the string into an Ern; raises ParseError naming the bad field"""
        s = self.value
        if not s.startswith(ERN_PREFIX):
            raise ParseError("prefix", f"expected '{ERN_PREFIX}' at start of '{s}'")

        remainder = s[len(ERN_PREFIX):]
        if not remainder:
            raise ParseError("format", "nothing after prefix")

        fields = remainder.split(SEGMENT_SEPARATOR, 3)
        if len(fields) < 4:
            raise ParseError(
                "format",
                f"expected domain:category:account:root, got {len(fields)} field(s) in '{s}'",
            )
        domain_str, category_str, account_str, tail = fields

        root_str, sep, parts_str = tail.partition(HIERARCHY_SEPARATOR)
        if not root_str:
            raise ParseError("root", "root is empty")

        try:
            domain = Domain(domain_str)
        except ErnFormatError as e:
            raise ParseError("domain", str(e)) from e

        if sep and not parts_str:
            raise ParseError("parts", "trailing '/' with no part")
        try:
            parts = Parts.from_string(parts_str)
        except ErnFormatError as e:
            raise ParseError("parts", str(e)) from e

        ern = Ern(
            domain,
            Category(category_str),
            Account(account_str),
            Root.from_string(root_str, self.id_type),
            parts,
        )
        logger.debug("parsed %s into %d part(s)", s, len(parts))
        return ern


def parse_ern(value: str, id_type: IdType = DEFAULT_ID_TYPE) -> Ern:
    """Parse a serialized ERN"""
    return ErnParser(value, id_type).parse()
