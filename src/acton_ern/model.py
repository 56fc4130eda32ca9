"""ERN segment types and the ERN value itself

An ERN renders as::

    eid:<domain>:<category>:<account>:<root>[/<part>[/<part>...]]

Every type here is a frozen dataclass; operations that "change" an ERN
return a new instance.
"""

import dataclasses
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterable, Iterator, Optional, Tuple, Union

from .errors import IllegalPartFormatError, InvalidDomainError
from .id_types import DEFAULT_ID_TYPE, IdType, TypeSafeId

ERN_PREFIX = "eid:"
SEGMENT_SEPARATOR = ":"
HIERARCHY_SEPARATOR = "/"
DEFAULT_DOMAIN = "acton"
DEFAULT_ROOT_TAG = "acton"


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class _Segment:
    """String-valued segment; compares and hashes by kind and value"""

    value: str

    @classmethod
    def from_string(cls, s: str):
        return cls(s)

    @staticmethod
    def prefix() -> str:
        """Routing token used by the builder for this segment kind"""
        return ""

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.value}')"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))


@dataclass(frozen=True, eq=False, repr=False)
class Domain(_Segment):
    """First ERN segment; must be non-empty and free of ':' and '/'"""

    def __post_init__(self):
        if not self.value or SEGMENT_SEPARATOR in self.value or HIERARCHY_SEPARATOR in self.value:
            raise InvalidDomainError(self.value)

    @classmethod
    def default(cls) -> 'Domain':
        return cls(DEFAULT_DOMAIN)

    @staticmethod
    def prefix() -> str:
        """The serialization prefix doubles as the domain's routing token"""
        return ERN_PREFIX


@dataclass(frozen=True, eq=False, repr=False)
class Category(_Segment):
    """Free-form segment; any string including the empty string"""

    @classmethod
    def default(cls) -> 'Category':
        return cls("")


@dataclass(frozen=True, eq=False, repr=False)
class Account(_Segment):
    """Free-form segment; any string including the empty string"""

    @classmethod
    def default(cls) -> 'Account':
        return cls("")


@dataclass(frozen=True, eq=False, repr=False)
class Part(_Segment):
    """One path component beneath the root

    Rejected when empty, when it starts with ':' or when it contains '/'.
    """

    def __post_init__(self):
        if not self.value or self.value.startswith(SEGMENT_SEPARATOR) or HIERARCHY_SEPARATOR in self.value:
            raise IllegalPartFormatError(self.value)

    @staticmethod
    def prefix() -> str:
        return HIERARCHY_SEPARATOR


@dataclass(frozen=True, order=True, repr=False)
class Parts:
    """Ordered sequence of Part; empty means no hierarchy"""

    parts: Tuple[Part, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "parts", tuple(self.parts))

    @classmethod
    def from_strings(cls, values: Iterable[str]) -> 'Parts':
        """Validate every value as a Part; the first bad one aborts"""
        return cls(tuple(Part(v) for v in values))

    @classmethod
    def from_string(cls, s: str) -> 'Parts':
        """Parse 'a/b/c'; the empty string gives no parts"""
        if not s:
            return cls()
        return cls.from_strings(s.split(HIERARCHY_SEPARATOR))

    @classmethod
    def default(cls) -> 'Parts':
        return cls()

    def add_part(self, part: Part) -> 'Parts':
        return Parts(self.parts + (part,))

    def is_empty(self) -> bool:
        return not self.parts

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self) -> Iterator[Part]:
        return iter(self.parts)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return Parts(self.parts[index])
        return self.parts[index]

    def startswith(self, other: 'Parts') -> bool:
        return self.parts[:len(other.parts)] == other.parts

    def __str__(self) -> str:
        return HIERARCHY_SEPARATOR.join(p.value for p in self.parts)

    def __repr__(self) -> str:
        return f"Parts({list(self.parts)!r})"


@dataclass(frozen=True, eq=False, repr=False)
class Root(_Segment):
    """Root segment, bound to the IdType that minted it

    ``Root(value)`` and ``Root.from_string(value)`` store the value verbatim;
    ``Root.new(tag)`` synthesizes a fresh type-tagged id instead.
    """

    id_type: IdType = DEFAULT_ID_TYPE

    def __post_init__(self):
        object.__setattr__(self, "id_type", IdType.resolve(self.id_type))

    @classmethod
    def from_string(cls, s: str, id_type: IdType = DEFAULT_ID_TYPE) -> 'Root':
        return cls(s, id_type)

    @classmethod
    def new(cls, tag: str = "", id_type: IdType = DEFAULT_ID_TYPE) -> 'Root':
        """Synthesize a root from tag (or "acton" if empty) and a fresh unique id

        The caller's tag is never stored verbatim, so two calls with the same
        tag give different roots.
        """
        tsid = TypeSafeId.generate(tag or DEFAULT_ROOT_TAG, id_type)
        return cls(str(tsid), id_type)

    @classmethod
    def default(cls, id_type: IdType = DEFAULT_ID_TYPE) -> 'Root':
        return cls.new("", id_type)

    def type_id(self) -> TypeSafeId:
        """Decode the stored value as a type-tagged id"""
        return TypeSafeId.from_string(self.value)

    def __repr__(self) -> str:
        return f"Root('{self.value}', {self.id_type.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Root):
            return NotImplemented
        return self.value == other.value and self.id_type == other.id_type

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Root):
            return NotImplemented
        return (self.value, self.id_type.value) < (other.value, other.id_type.value)

    def __hash__(self) -> int:
        return hash(("Root", self.value, self.id_type))


@dataclass(frozen=True, order=True, repr=False)
class Ern:
    """Entity Resource Name: domain, category, account, root and parts

    Equality, hashing and ordering are structural over the five fields.

    Examples:
    - `eid:acton:hr:company123:acton_01h455vb4pex5vsknk084sn02q`
    - `eid:acton-internal:hr:company123:root/departmentA/team1`
    """

    domain: Domain
    category: Category
    account: Account
    root: Root
    parts: Parts = field(default_factory=Parts)

    def __post_init__(self):
        if self.parts is None:
            object.__setattr__(self, "parts", Parts())

    @property
    def id_type(self) -> IdType:
        return self.root.id_type

    @classmethod
    def default(cls, id_type: IdType = DEFAULT_ID_TYPE) -> 'Ern':
        """ERN built from each segment's default, with a freshly minted root"""
        return cls(Domain.default(), Category.default(), Account.default(),
                   Root.default(id_type), Parts())

    @classmethod
    def with_domain(cls, domain: str, id_type: IdType = DEFAULT_ID_TYPE) -> 'Ern':
        return cls(Domain(domain), Category.default(), Account.default(),
                   Root.default(id_type))

    @classmethod
    def with_category(cls, category: str, id_type: IdType = DEFAULT_ID_TYPE) -> 'Ern':
        return cls(Domain.default(), Category(category), Account.default(),
                   Root.default(id_type))

    @classmethod
    def with_account(cls, account: str, id_type: IdType = DEFAULT_ID_TYPE) -> 'Ern':
        return cls(Domain.default(), Category.default(), Account(account),
                   Root.default(id_type))

    @classmethod
    def with_root(cls, root: str, id_type: IdType = DEFAULT_ID_TYPE) -> 'Ern':
        """Default ERN whose root is synthesized from the given tag"""
        return cls(Domain.default(), Category.default(), Account.default(),
                   Root.new(root, id_type))

    @classmethod
    def from_string(cls, s: str, id_type: IdType = DEFAULT_ID_TYPE) -> 'Ern':
        """Parse a serialized ERN (see ErnParser)"""
        from .parser import ErnParser
        return ErnParser(s, id_type).parse()

    def with_new_root(self, root: str) -> 'Ern':
        """Copy of this ERN with a freshly synthesized root"""
        return dataclasses.replace(self, root=Root.new(root, self.id_type))

    def add_part(self, part: str) -> 'Ern':
        """Copy of this ERN with one more part appended"""
        return dataclasses.replace(self, parts=self.parts.add_part(Part(part)))

    def with_parts(self, parts: Iterable[str]) -> 'Ern':
        """Copy of this ERN with the parts fully replaced"""
        return dataclasses.replace(self, parts=Parts.from_strings(parts))

    def is_child_of(self, other: 'Ern') -> bool:
        """True if other shares identity and its parts are a strict prefix of ours"""
        return (
            self.domain == other.domain
            and self.category == other.category
            and self.account == other.account
            and self.root == other.root
            and len(other.parts) < len(self.parts)
            and self.parts.startswith(other.parts)
        )

    def parent(self) -> Optional['Ern']:
        """ERN one level up, or None when there are no parts"""
        if self.parts.is_empty():
            return None
        return dataclasses.replace(self, parts=self.parts[:-1])

    def __add__(self, other: object) -> 'Ern':
        # Only the hierarchy merges; other's identity segments are dropped
        if not isinstance(other, Ern):
            return NotImplemented
        return dataclasses.replace(self, parts=Parts(self.parts.parts + other.parts.parts))

    def to_string(self) -> str:
        s = f"{ERN_PREFIX}{self.domain}:{self.category}:{self.account}:{self.root}"
        if not self.parts.is_empty():
            s = f"{s}{HIERARCHY_SEPARATOR}{self.parts}"
        return s

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Ern('{self.to_string()}')"
