"""Tests for the edge and node classification taxonomies."""

from collections import Counter

from hypothesis import given, strategies as st

from reflexion_model.state import EdgeState, NodeState, StateGroup


@given(state=st.sampled_from(list(EdgeState)))
def test_edge_state_predicates_are_exclusive_and_exhaustive(state):
    """Exactly one of is_violation, is_unknown, is_ok holds for every edge state."""
    flags = [state.is_violation, state.is_unknown, state.is_ok]
    assert flags.count(True) == 1


@given(state=st.sampled_from(list(NodeState)))
def test_node_state_predicates_are_exclusive_and_exhaustive(state):
    """Exactly one of is_problem, is_unknown, is_ok holds for every node state."""
    flags = [state.is_problem, state.is_unknown, state.is_ok]
    assert flags.count(True) == 1


class TestEdgeState:
    """Test edge state grouping."""

    def test_has_eight_states(self):
        assert len(EdgeState) == 8

    def test_violations(self):
        assert EdgeState.in_group(StateGroup.PROBLEM) == [EdgeState.ABSENT, EdgeState.DIVERGENT]
        assert EdgeState.ABSENT.is_violation
        assert EdgeState.DIVERGENT.is_violation

    def test_non_violations(self):
        for state in (EdgeState.UNDEFINED, EdgeState.SPECIFIED, EdgeState.CONVERGENT,
                      EdgeState.ALLOWED_ABSENT, EdgeState.ALLOWED, EdgeState.UNMAPPED):
            assert not state.is_violation

    def test_acceptable_states(self):
        assert set(EdgeState.in_group(StateGroup.OK)) == {
            EdgeState.CONVERGENT, EdgeState.ALLOWED, EdgeState.ALLOWED_ABSENT,
        }

    def test_undecided_states(self):
        assert set(EdgeState.in_group(StateGroup.UNKNOWN)) == {
            EdgeState.UNDEFINED, EdgeState.UNMAPPED, EdgeState.SPECIFIED,
        }

    def test_lookup_by_value(self):
        assert EdgeState("allowed_absent") is EdgeState.ALLOWED_ABSENT
        assert EdgeState.CONVERGENT.group is StateGroup.OK


def test_taxonomies_never_compare_equal():
    """Edge and node states sharing a value stay distinct, also as dict keys."""
    assert EdgeState.UNMAPPED != NodeState.UNMAPPED
    assert EdgeState.UNDEFINED != NodeState.UNDEFINED
    assert EdgeState.UNMAPPED != "unmapped"

    tally = Counter([EdgeState.UNMAPPED, NodeState.UNMAPPED, EdgeState.UNDEFINED,
                     NodeState.UNDEFINED])
    assert len(tally) == 4


class TestNodeState:
    """Test node state grouping."""

    def test_groups(self):
        assert NodeState.MAPPED.is_ok
        assert NodeState.UNMAPPED.is_problem
        assert NodeState.SPECIFIED_ONLY.is_problem
        assert NodeState.UNDEFINED.is_unknown

    def test_every_group_covered(self):
        covered = set()
        for group in StateGroup:
            covered.update(NodeState.in_group(group))
        assert covered == set(NodeState)
