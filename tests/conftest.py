import pytest
from click.testing import CliRunner

from app import create_app
from nfa import EPSILON


def _epsilon_closure(nfa, states):
    stack, closure = list(states), set(states)
    while stack:
        s = stack.pop()
        for t in nfa.transition_list():
            if t.state_from == s and t.symbol == EPSILON and t.state_to not in closure:
                closure.add(t.state_to)
                stack.append(t.state_to)
    return closure


def _accepts(nfa, text):
    current = _epsilon_closure(nfa, {nfa.initial_state})
    for ch in text:
        moved = {
            t.state_to
            for t in nfa.transition_list()
            if t.state_from in current and t.symbol == ch
        }
        current = _epsilon_closure(nfa, moved)
        if not current:
            return False
    return nfa.final_state in current


@pytest.fixture
def accepts():
    return _accepts


@pytest.fixture
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


@pytest.fixture
def runner():
    return CliRunner()
