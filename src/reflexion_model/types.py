"""Shared primitive types for the reflexion model."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Identifiers are opaque integers scoped to one graph instance.
NodeId = int
EdgeId = int
Counter = int


class SubgraphKind(str, Enum):
    """Which view of the system a node or edge belongs to."""
    ARCHITECTURE = "architecture"
    IMPLEMENTATION = "implementation"
    PROPAGATED = "propagated"


@dataclass(frozen=True)
class EdgeKind:
    """
    Relationship kind tag.

    Three kinds are named (``contains``, ``calls``, ``depends_on``); any other
    non-empty label is accepted as a caller-defined kind. Kinds compare and
    hash by label.
    """
    label: str

    CONTAINS = "contains"
    CALLS = "calls"
    DEPENDS_ON = "depends_on"

    def __post_init__(self):
        if not isinstance(self.label, str) or not self.label:
            raise ValueError(f"Edge kind label must be a non-empty string, got {self.label!r}")

    @classmethod
    def contains(cls) -> "EdgeKind":
        return cls(cls.CONTAINS)

    @classmethod
    def calls(cls) -> "EdgeKind":
        return cls(cls.CALLS)

    @classmethod
    def depends_on(cls) -> "EdgeKind":
        return cls(cls.DEPENDS_ON)

    @property
    def is_builtin(self) -> bool:
        """True for the three named kinds."""
        return self.label in (self.CONTAINS, self.CALLS, self.DEPENDS_ON)

    def __str__(self) -> str:
        return self.label


class NodeCategory(str, Enum):
    ARCHITECTURE_NODE = "architecture_node"
    IMPLEMENTATION_NODE = "implementation_node"
    DATASTORE = "datastore"
    SERVICE = "service"
    UI = "ui"
    MODULE = "module"
    CLASS = "class"
    PACKAGE = "package"
    FUNCTION = "function"
    CUSTOM = "custom"


@dataclass(frozen=True)
class NodeKind:
    """
    Node kind tag: one closed category, or ``CUSTOM`` with a free label.

    Not interpreted by the graph store; part of the vocabulary shared with
    extractors and reporting.
    """
    category: NodeCategory
    label: Optional[str] = None

    def __post_init__(self):
        category = NodeCategory(self.category)
        object.__setattr__(self, "category", category)
        if category is NodeCategory.CUSTOM:
            if not self.label:
                raise ValueError("Custom node kind requires a non-empty label")
        elif self.label is not None:
            raise ValueError(f"Built-in node kind {category.value} does not take a label")

    @classmethod
    def custom(cls, label: str) -> "NodeKind":
        """Create an open-ended node kind, e.g. ``NodeKind.custom("Repository")``."""
        return cls(NodeCategory.CUSTOM, label)

    @property
    def is_custom(self) -> bool:
        return self.category is NodeCategory.CUSTOM

    def __str__(self) -> str:
        return self.label if self.is_custom else self.category.value
