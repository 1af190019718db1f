import pytest

from nfa import (
    EPSILON,
    Automaton,
    ConsumedAutomatonError,
    Transition,
    concat,
    literal,
    star,
    union,
)


def test_empty():
    nfa = Automaton.empty()
    assert nfa.state_count() == 0
    assert nfa.transition_list() == []
    assert nfa.final_state is None
    assert nfa.is_empty()


def test_sized():
    nfa = Automaton.sized(4)
    assert list(nfa.states) == [0, 1, 2, 3]
    assert nfa.transition_list() == []


def test_literal():
    nfa = literal("a")
    assert nfa.state_count() == 2
    assert nfa.transition_list() == [Transition(0, "a", 1)]
    assert nfa.final_state == 1
    assert nfa.display() == ["(0, a, 1)"]


def test_star_shape():
    nfa = star(literal("a"))
    assert nfa.state_count() == 4
    assert nfa.final_state == 3
    assert nfa.transition_list() == [
        Transition(0, EPSILON, 1),
        Transition(1, "a", 2),
        Transition(2, EPSILON, 3),
        Transition(2, EPSILON, 1),
        Transition(0, EPSILON, 3),
    ]


def test_concat_merges_initial_into_final():
    nfa = concat(literal("a"), literal("b"))
    assert nfa.state_count() == 3
    assert nfa.final_state == 2
    assert nfa.transition_list() == [Transition(0, "a", 1), Transition(1, "b", 2)]


def test_concat_with_starred_right_side():
    nfa = concat(literal("a"), star(literal("b")))
    # 2 + 4 - 1 states, final at the last index
    assert nfa.state_count() == 5
    assert nfa.final_state == 4
    assert Transition(1, EPSILON, 2) in nfa.transition_list()
    assert Transition(2, "b", 3) in nfa.transition_list()


def test_union_shape():
    nfa = union(literal("a"), literal("b"))
    assert nfa.state_count() == 6
    assert nfa.final_state == 5
    assert nfa.transition_list() == [
        Transition(0, EPSILON, 1),
        Transition(1, "a", 2),
        Transition(2, EPSILON, 5),
        Transition(0, EPSILON, 3),
        Transition(3, "b", 4),
        Transition(4, EPSILON, 5),
    ]


def test_primitives_consume_their_inputs():
    a, b = literal("a"), literal("b")
    result = union(a, b)
    with pytest.raises(ConsumedAutomatonError):
        a.transition_list()
    with pytest.raises(ConsumedAutomatonError):
        concat(b, literal("c"))
    assert result.state_count() == 6
    assert "consumed" in repr(a)


def test_epsilon_literal():
    nfa = literal(EPSILON)
    assert nfa.transition_list() == [Transition(0, EPSILON, 1)]
