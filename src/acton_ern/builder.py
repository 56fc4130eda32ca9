"""Ordered builder for ERNs

Components must be supplied in the order Domain, Category, Account, Root,
then any number of Parts. The builder is a small state machine: each state
accepts exactly one component kind, and anything else raises OrderingError.

    ern = (ErnBuilder()
           .with_domain("acton-internal")
           .with_category("hr")
           .with_account("company123")
           .with_root("root")
           .with_part("departmentA")
           .build())

A builder is single-use. After a failed transition or a successful build()
it refuses further calls.
"""

import logging
from enum import Enum
from typing import Dict, Optional, Tuple, Type

from .errors import (
    ErnError,
    InvalidPrefixError,
    MissingPartError,
    OrderingError,
    UnexpectedPartError,
)
from .id_types import DEFAULT_ID_TYPE, IdType
from .model import Account, Category, Domain, Ern, Part, Parts, Root

logger = logging.getLogger(__name__)


class BuilderState(Enum):
    """Builder states, named after the last component supplied"""
    START = 1
    DOMAIN = 2
    CATEGORY = 3
    ACCOUNT = 4
    ROOT = 5
    PARTS = 6
    FAILED = 7
    BUILT = 8


# state -> (component kind accepted, state after accepting it)
_TRANSITIONS: Dict[BuilderState, Tuple[type, BuilderState]] = {
    BuilderState.START: (Domain, BuilderState.DOMAIN),
    BuilderState.DOMAIN: (Category, BuilderState.CATEGORY),
    BuilderState.CATEGORY: (Account, BuilderState.ACCOUNT),
    BuilderState.ACCOUNT: (Root, BuilderState.ROOT),
    BuilderState.ROOT: (Part, BuilderState.PARTS),
    BuilderState.PARTS: (Part, BuilderState.PARTS),
}


class _ErnAccumulator:
    """Slots filled by the builder, routed by each component's prefix"""

    def __init__(self, id_type: IdType):
        self.id_type = id_type
        self.domain: Optional[Domain] = None
        self.category: Optional[Category] = None
        self.account: Optional[Account] = None
        self.root: Optional[Root] = None
        self.parts = Parts()

    def add(self, prefix: str, value: str) -> None:
        if prefix == Domain.prefix():
            if self.domain is not None:
                raise UnexpectedPartError(f"domain already set, got '{value}'")
            self.domain = Domain(value)
        elif prefix == "":
            # Untagged values fill the next empty slot by position
            if self.domain is None:
                raise UnexpectedPartError(f"'{value}' supplied before domain")
            elif self.category is None:
                self.category = Category(value)
            elif self.account is None:
                self.account = Account(value)
            elif self.root is None:
                self.root = Root.new(value, self.id_type)
            else:
                self.parts = self.parts.add_part(Part(value))
        elif prefix == Part.prefix():
            self.parts = self.parts.add_part(Part(value))
        else:
            raise InvalidPrefixError(prefix)

    def build(self) -> Ern:
        if self.domain is None:
            raise MissingPartError("domain")
        if self.category is None:
            raise MissingPartError("category")
        if self.account is None:
            raise MissingPartError("account")
        if self.root is None:
            raise MissingPartError("root")
        return Ern(self.domain, self.category, self.account, self.root, self.parts)


class ErnBuilder:
    """Builder for creating ERNs in the fixed component order"""

    def __init__(self, id_type: IdType = DEFAULT_ID_TYPE):
        """Create a builder; id_type selects how the root id is generated"""
        self._accumulator = _ErnAccumulator(IdType.resolve(id_type))
        self._state = BuilderState.START

    @property
    def state(self) -> BuilderState:
        return self._state

    def with_(self, component: Type, value: str) -> 'ErnBuilder':
        """Supply the next component, e.g. ``with_(Domain, "acton")``

        Raises OrderingError if component is not the kind the current state
        accepts. Any failure leaves the builder unusable.
        """
        if self._state not in _TRANSITIONS:
            raise OrderingError(self._state.name, getattr(component, "__name__", repr(component)))

        expected, next_state = _TRANSITIONS[self._state]
        if not (isinstance(component, type) and issubclass(component, expected)):
            failed_in = self._state
            self._state = BuilderState.FAILED
            name = getattr(component, "__name__", repr(component))
            raise OrderingError(failed_in.name, name)

        try:
            self._accumulator.add(component.prefix(), value)
        except ErnError:
            self._state = BuilderState.FAILED
            raise

        logger.debug("builder %s -> %s with %r", self._state.name, next_state.name, value)
        self._state = next_state
        return self

    def with_domain(self, value: str) -> 'ErnBuilder':
        return self.with_(Domain, value)

    def with_category(self, value: str) -> 'ErnBuilder':
        return self.with_(Category, value)

    def with_account(self, value: str) -> 'ErnBuilder':
        return self.with_(Account, value)

    def with_root(self, value: str) -> 'ErnBuilder':
        """Supply the root tag; the stored root is a freshly generated id"""
        return self.with_(Root, value)

    def with_part(self, value: str) -> 'ErnBuilder':
        return self.with_(Part, value)

    def build(self) -> Ern:
        """Build the ERN

        Raises MissingPartError naming the first unset component, checked in
        the order domain, category, account, root.
        """
        if self._state in (BuilderState.FAILED, BuilderState.BUILT):
            raise OrderingError(self._state.name, "build")
        try:
            ern = self._accumulator.build()
        except MissingPartError:
            self._state = BuilderState.FAILED
            raise
        self._state = BuilderState.BUILT
        logger.debug("built %s", ern)
        return ern
