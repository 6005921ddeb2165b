"""IR models for type identities and target-neutral data types.

`TypeRef` identifies a named type; `DataType` classifies the value an
argument carries before it is spelled in the target language.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Rust module under which the generated type tree is mounted.
TYPES_MODULE_PATH = "crate::generated::types"


@dataclass(frozen=True, order=True)
class TypeRef:
    """Resolved identity of a named type.

    Ordered lexicographically on module path, then type name, which fixes
    the processing and output order of the resolver.

    Attributes
    ----------
        module_path: Path segments of the owning data types document
            (``types/evse/board.yaml`` is ``("evse", "board")``).
        type_name: Local name of the type within that document.

    """

    module_path: tuple[str, ...]
    type_name: str

    @property
    def document_name(self) -> str:
        """Logical name of the owning data types document."""
        return "/".join(self.module_path)

    @property
    def module_name(self) -> str:
        """Fully-qualified Rust module holding the type."""
        return "::".join((TYPES_MODULE_PATH, *self.module_path))

    @property
    def absolute_type_path(self) -> str:
        """Fully-qualified Rust path of the type."""
        return f"{self.module_name}::{self.type_name}"

    def __str__(self) -> str:
        return f"/{self.document_name}#/{self.type_name}"


class ScalarKind(Enum):
    """Scalar classification of an argument.

    DYNAMIC is the opaque-value fallback for untyped arrays and objects and
    for unions of kinds.
    """

    UNIT = "unit"
    BOOLEAN = "boolean"
    TEXT = "text"
    FLOAT = "float"
    INTEGER = "integer"
    SEQUENCE = "sequence"
    NAMED = "named"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class DataType:
    """A target-neutral data type.

    Attributes
    ----------
        kind: Scalar classification.
        item: Element type, for SEQUENCE only.
        type_ref: Referenced named type, for NAMED only.

    """

    kind: ScalarKind
    item: DataType | None = None
    type_ref: TypeRef | None = None

    def __post_init__(self) -> None:
        if (self.kind == ScalarKind.SEQUENCE) != (self.item is not None):
            raise ValueError("Only SEQUENCE data types carry an item type")
        if (self.kind == ScalarKind.NAMED) != (self.type_ref is not None):
            raise ValueError("Only NAMED data types carry a type reference")

    @classmethod
    def sequence(cls, item: DataType) -> DataType:
        """Create a sequence of `item`."""
        return cls(ScalarKind.SEQUENCE, item=item)

    @classmethod
    def named(cls, type_ref: TypeRef) -> DataType:
        """Create a reference to a named type."""
        return cls(ScalarKind.NAMED, type_ref=type_ref)
