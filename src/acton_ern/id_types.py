"""Unique-value generation for ERN roots

A root is rendered as a type-tagged id: ``<tag>_<suffix>`` where the suffix is
the 26-character lowercase Crockford base32 form of a UUID. The UUID flavour
is selected by an :class:`IdType` member:

- ``UNIX_TIME``: UUIDv7, time-ordered on the Unix epoch (default)
- ``TIMESTAMP``: UUIDv6, time-ordered on the Gregorian timestamp
- ``RANDOM``: UUIDv4, opaque random
"""

import logging
import re
import uuid
from enum import Enum
from typing import Callable, Dict

import uuid6
from ulid import ULID

from .errors import IdGenerationError

logger = logging.getLogger(__name__)

_TAG_MAX_LENGTH = 63
_TAG_PATTERN = re.compile(r"^[a-z]([a-z_]*[a-z])?$")
_SUFFIX_LENGTH = 26
_SEPARATOR = "_"


class IdType(str, Enum):
    """Generation strategy for root ids"""

    UNIX_TIME = "unix_time"
    TIMESTAMP = "timestamp"
    RANDOM = "random"

    @classmethod
    def from_name(cls, name: str) -> 'IdType':
        """Resolve a strategy from a member name or value, case-insensitive"""
        key = name.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise IdGenerationError(f"Unknown id type: '{name}'")

    @classmethod
    def resolve(cls, id_type) -> 'IdType':
        """Accept an IdType member or its name/value as a string"""
        if isinstance(id_type, cls):
            return id_type
        if not isinstance(id_type, str):
            raise IdGenerationError(f"Unknown id type: {id_type!r}")
        return cls.from_name(id_type)

    def generate_uuid(self) -> uuid.UUID:
        """Mint one fresh UUID with this strategy"""
        try:
            return _GENERATORS[self]()
        except Exception as e:
            raise IdGenerationError(f"Root Error - Generating an Id failed: {e}") from e


_GENERATORS: Dict[IdType, Callable[[], uuid.UUID]] = {
    IdType.UNIX_TIME: uuid6.uuid7,
    IdType.TIMESTAMP: uuid6.uuid6,
    IdType.RANDOM: uuid.uuid4,
}

DEFAULT_ID_TYPE = IdType.UNIX_TIME


def validate_tag(tag: str) -> str:
    """Check a type tag: lowercase letters and '_', no leading/trailing '_'"""
    if len(tag) > _TAG_MAX_LENGTH:
        raise IdGenerationError(f"Type tag longer than {_TAG_MAX_LENGTH} characters: '{tag}'")
    if not _TAG_PATTERN.match(tag):
        raise IdGenerationError(f"Type tag must be lowercase letters and '_': '{tag}'")
    return tag


class TypeSafeId:
    """A UUID tagged with a type name, e.g. ``acton_01h455vb4pex5vsknk084sn02q``"""

    def __init__(self, tag: str, value: uuid.UUID):
        self.tag = validate_tag(tag)
        self.uuid = value

    @classmethod
    def generate(cls, tag: str, id_type: IdType = DEFAULT_ID_TYPE) -> 'TypeSafeId':
        """Mint a fresh id for tag; the generator is called exactly once"""
        tag = validate_tag(tag)
        id_type = IdType.resolve(id_type)
        tsid = cls(tag, id_type.generate_uuid())
        logger.debug("generated %s id %s", id_type.value, tsid)
        return tsid

    @classmethod
    def from_string(cls, s: str) -> 'TypeSafeId':
        """Decode a rendered type-tagged id"""
        tag, sep, suffix = s.rpartition(_SEPARATOR)
        if not sep or not tag:
            raise IdGenerationError(f"Type-safe id must have the form <tag>_<suffix>: '{s}'")
        if len(suffix) != _SUFFIX_LENGTH or suffix != suffix.lower():
            raise IdGenerationError(f"Type-safe id suffix must be {_SUFFIX_LENGTH} lowercase characters: '{s}'")
        try:
            value = ULID.from_str(suffix.upper()).to_uuid()
        except ValueError as e:
            raise IdGenerationError(f"Type-safe id suffix is not valid base32: '{s}'") from e
        return cls(tag, value)

    def to_string(self) -> str:
        suffix = str(ULID.from_uuid(self.uuid)).lower()
        return f"{self.tag}{_SEPARATOR}{suffix}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TypeSafeId('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeSafeId):
            return False
        return self.tag == other.tag and self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash((self.tag, self.uuid))
