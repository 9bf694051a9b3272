"""Classification taxonomies for edges and nodes.

Every state is declared together with the group it belongs to, so the three
predicates of each taxonomy are mutually exclusive and exhaustive by
construction:

- PROBLEM: architectural debt (edge violations, unmapped or unimplemented nodes)
- UNKNOWN: tooling or modeling debt (analysis incomplete or impossible)
- OK: no action needed
"""

from enum import Enum
from typing import List


class StateGroup(str, Enum):
    PROBLEM = "problem"
    UNKNOWN = "unknown"
    OK = "ok"


class _GroupedState(Enum):
    """
    Enum whose members carry their ``StateGroup`` next to their value.

    Members are not ``str`` so states of different taxonomies sharing a
    value (``EdgeState.UNMAPPED``, ``NodeState.UNMAPPED``) never compare equal.
    """

    def __new__(cls, value: str, group: StateGroup):
        member = object.__new__(cls)
        member._value_ = value
        member.group = group
        return member

    @classmethod
    def in_group(cls, group: StateGroup) -> List["_GroupedState"]:
        """Members belonging to ``group``, in declaration order."""
        return [member for member in cls if member.group is group]

    @property
    def is_unknown(self) -> bool:
        return self.group is StateGroup.UNKNOWN

    @property
    def is_ok(self) -> bool:
        return self.group is StateGroup.OK


class EdgeState(_GroupedState):
    """Outcome of comparing one edge against the other view."""

    # No classification yet, or data missing
    UNDEFINED = ("undefined", StateGroup.UNKNOWN)
    # Architecture edge recorded, comparison pending
    SPECIFIED = ("specified", StateGroup.UNKNOWN)
    # Specified and found in the code
    CONVERGENT = ("convergent", StateGroup.OK)
    # Specified but not found in the code
    ABSENT = ("absent", StateGroup.PROBLEM)
    # Optional in the architecture and missing in the code
    ALLOWED_ABSENT = ("allowed_absent", StateGroup.OK)
    # Not specified, but permitted by the architecture
    ALLOWED = ("allowed", StateGroup.OK)
    # Found in the code, neither specified nor allowed
    DIVERGENT = ("divergent", StateGroup.PROBLEM)
    # Endpoint mapping missing, comparison impossible
    UNMAPPED = ("unmapped", StateGroup.UNKNOWN)

    @property
    def is_violation(self) -> bool:
        return self.group is StateGroup.PROBLEM


class NodeState(_GroupedState):
    """Mapping status of an architecture or implementation node."""

    MAPPED = ("mapped", StateGroup.OK)
    UNMAPPED = ("unmapped", StateGroup.PROBLEM)
    SPECIFIED_ONLY = ("specified_only", StateGroup.PROBLEM)
    UNDEFINED = ("undefined", StateGroup.UNKNOWN)

    @property
    def is_problem(self) -> bool:
        return self.group is StateGroup.PROBLEM
