from collections import namedtuple

EPSILON = "E"
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

Transition = namedtuple("Transition", ["state_from", "symbol", "state_to"])


class ConsumedAutomatonError(RuntimeError):
    pass


class Automaton:
    """NFA with dense integer states 0..size-1, initial state 0 and one final state.

    Construction primitives consume the automata they are given: once an
    automaton has been spliced into another one it can no longer be read.
    """

    initial_state = 0

    def __init__(self, size=0, transitions=None, final_state=None):
        self._size = size
        self._transitions = list(transitions) if transitions is not None else []
        self._final_state = final_state
        self._consumed = False

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def sized(cls, n):
        return cls(size=n)

    @classmethod
    def literal(cls, symbol):
        return cls(size=2, transitions=[Transition(0, symbol, 1)], final_state=1)

    def _check(self):
        if self._consumed:
            raise ConsumedAutomatonError(
                "automaton was already consumed by a construction primitive"
            )

    def _consume(self):
        self._check()
        self._consumed = True
        return self._size, self._transitions, self._final_state

    @property
    def states(self):
        self._check()
        return range(self._size)

    @property
    def final_state(self):
        self._check()
        return self._final_state

    def state_count(self):
        self._check()
        return self._size

    def transition_list(self):
        self._check()
        return list(self._transitions)

    def is_empty(self):
        return self.state_count() == 0

    def add_transition(self, src, symbol, dst):
        self._check()
        self._transitions.append(Transition(src, symbol, dst))

    def display(self):
        return [f"({t.state_from}, {t.symbol}, {t.state_to})" for t in self.transition_list()]

    def __repr__(self):
        if self._consumed:
            return "Automaton(<consumed>)"
        return (
            f"Automaton(states={self._size}, "
            f"final={self._final_state}, "
            f"transitions={self._transitions})"
        )


def _shifted(transitions, offset):
    return [Transition(t.state_from + offset, t.symbol, t.state_to + offset) for t in transitions]


# Thompson's construction. Each primitive places the final state at the last
# index, which concat relies on when it drops b's initial state.


def literal(symbol):
    return Automaton.literal(symbol)


def star(a):
    n, a_trans, a_final = a._consume()
    result = Automaton.sized(n + 2)
    result.add_transition(0, EPSILON, 1)
    result._transitions.extend(_shifted(a_trans, 1))
    # old final -> new final, loop back, and skip for zero repetitions
    result.add_transition(a_final + 1, EPSILON, n + 1)
    result.add_transition(a_final + 1, EPSILON, 1)
    result.add_transition(0, EPSILON, n + 1)
    result._final_state = n + 1
    return result


def concat(a, b):
    n, a_trans, a_final = a._consume()
    m, b_trans, b_final = b._consume()
    # b's initial state becomes a's final state
    offset = n - 1
    result = Automaton(size=n + m - 1, transitions=a_trans)
    result._transitions.extend(_shifted(b_trans, offset))
    result._final_state = b_final + offset
    return result


def union(a, b):
    n, a_trans, a_final = a._consume()
    m, b_trans, b_final = b._consume()
    final = n + m + 1
    result = Automaton.sized(n + m + 2)

    result.add_transition(0, EPSILON, 1)
    result._transitions.extend(_shifted(a_trans, 1))
    result.add_transition(a_final + 1, EPSILON, final)

    result.add_transition(0, EPSILON, n + 1)
    result._transitions.extend(_shifted(b_trans, n + 1))
    result.add_transition(b_final + n + 1, EPSILON, final)

    result._final_state = final
    return result
