"""Declaration model: the checkable units (methods, properties, fields) handed over by a host."""

import sys
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


class DeclarationKind(Enum):
    """Kinds of member declarations the rules know how to check."""
    METHOD = "method"
    PROPERTY = "property"
    FIELD = "field"


class ModifierKind(Enum):
    """Modifier keywords a declaration can carry."""
    PUBLIC = "public"
    PRIVATE = "private"
    INTERNAL = "internal"
    PROTECTED = "protected"
    CONST = "const"
    STATIC = "static"
    READONLY = "readonly"
    ABSTRACT = "abstract"
    VIRTUAL = "virtual"
    OVERRIDE = "override"
    SEALED = "sealed"
    NEW = "new"
    ASYNC = "async"
    EXTERN = "extern"
    PARTIAL = "partial"
    VOLATILE = "volatile"
    UNSAFE = "unsafe"
    REQUIRED = "required"
    FILE = "file"

    @classmethod
    def from_keyword(cls, keyword: str) -> "ModifierKind":
        """Look up a modifier by its source keyword. Raises ValueError for unknown keywords."""
        try:
            return cls(keyword.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown modifier keyword: {keyword!r}") from None


@dataclass(frozen=True)
class Location:
    """A source span as reported by the host. Lines and columns are 1-based."""
    path: str
    line: int
    column: int = 1
    end_line: Optional[int] = None
    end_column: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"

    @property
    def end(self) -> tuple[int, int]:
        """
        Last position of the span.

        A point location ends where it starts. An end line without an end column
        runs to the end of that line.
        """
        if self.end_line is None:
            return (self.line, self.end_column if self.end_column is not None else self.column)
        return (self.end_line, self.end_column if self.end_column is not None else sys.maxsize)

    def contains(self, other: "Location") -> bool:
        """True if `other` starts inside this span (same file)."""
        if other.path != self.path:
            return False
        start = (other.line, other.column)
        return (self.line, self.column) <= start <= self.end


@dataclass(frozen=True)
class Modifier:
    """A single modifier token plus the whitespace that follows it in the source."""
    kind: ModifierKind
    location: Optional[Location] = None
    whitespace_after: str = " "

    @property
    def code(self) -> str:
        return self.kind.value + self.whitespace_after


@dataclass(frozen=True)
class ModifierSet:
    """
    Modifiers of one declaration in source order.

    Order only matters when the set is rendered back to source; membership
    checks ignore it.
    """
    modifiers: tuple[Modifier, ...] = ()

    @classmethod
    def of(cls, *kinds: ModifierKind) -> "ModifierSet":
        return cls(tuple(Modifier(kind) for kind in kinds))

    def __iter__(self):
        return iter(self.modifiers)

    def __len__(self) -> int:
        return len(self.modifiers)

    def __contains__(self, kind: object) -> bool:
        return any(m.kind is kind for m in self.modifiers)

    @property
    def kinds(self) -> tuple[ModifierKind, ...]:
        return tuple(m.kind for m in self.modifiers)

    def first(self, kind: ModifierKind) -> Optional[Modifier]:
        """Return the first modifier token of the given kind, if any."""
        return next((m for m in self.modifiers if m.kind is kind), None)

    def without(self, kind: ModifierKind) -> "ModifierSet":
        """Return a copy with every occurrence of `kind` dropped, trailing whitespace included."""
        if kind not in self:
            return self
        return ModifierSet(tuple(m for m in self.modifiers if m.kind is not kind))

    @property
    def code(self) -> str:
        return "".join(m.code for m in self.modifiers)


@dataclass(frozen=True)
class Declaration:
    """
    A method, property or field under analysis.

    `identifier` is the name the rules check. Fields declaring several names in
    one statement keep all of them in `identifiers`, but only the first one is
    checked.
    """
    kind: DeclarationKind
    identifier: str
    modifiers: ModifierSet = field(default_factory=ModifierSet)
    is_const: Optional[bool] = None
    location: Optional[Location] = None
    identifier_location: Optional[Location] = None
    leading_trivia: str = ""
    identifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # frozen: derived defaults go through object.__setattr__
        if self.is_const is None:
            object.__setattr__(self, "is_const", ModifierKind.CONST in self.modifiers)
        if not self.identifiers:
            object.__setattr__(self, "identifiers", (self.identifier,))

    @property
    def name_location(self) -> Optional[Location]:
        return self.identifier_location or self.location

    def with_modifiers(self, modifiers: ModifierSet) -> "Declaration":
        return replace(self, modifiers=modifiers)

    def contains(self, location: Location) -> bool:
        """True if the location falls inside this declaration's span."""
        if self.location is None:
            return False
        return self.location.contains(location)

    @property
    def header_code(self) -> str:
        """Leading trivia and modifiers as they appear in front of the declaration's type."""
        return self.leading_trivia + self.modifiers.code
