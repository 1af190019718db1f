import logging
from collections import namedtuple

from nfa import ALPHABET, EPSILON, Automaton, concat, literal, star, union

logger = logging.getLogger(__name__)

OPERATORS = "()*|"
SYMBOLS = ALPHABET + EPSILON


class RegexError(ValueError):
    kind = "regex_error"

    def __init__(self, message, position=None):
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position})"


class InvalidInput(RegexError):
    kind = "invalid_input"


class UnbalancedParentheses(RegexError):
    kind = "unbalanced_parentheses"


class StackImbalance(RegexError):
    kind = "stack_imbalance"


def first_invalid(regex):
    for i, c in enumerate(regex):
        if c not in SYMBOLS and c not in OPERATORS:
            return i
    return None


def is_valid(regex):
    return bool(regex) and first_invalid(regex) is None


Literal = namedtuple("Literal", ["symbol"])
Star = namedtuple("Star", ["inner"])
Concat = namedtuple("Concat", ["left", "right"])
Union = namedtuple("Union", ["left", "right"])

# "." is implicit concatenation; "*" is applied as soon as it is read
PRECEDENCE = {"*": 3, ".": 2, "|": 1}
_NODES = {".": Concat, "|": Union}


def _reduce(operators, operands):
    op = operators.pop()
    right = operands.pop()
    left = operands.pop()
    operands.append(_NODES[op](left, right))


def _push_operator(op, operators, operands):
    while (
        operators
        and operators[-1] != "("
        and PRECEDENCE[operators[-1]] >= PRECEDENCE[op]
    ):
        _reduce(operators, operands)
    operators.append(op)


def parse(regex):
    """Turn a validated regex into a tree of Literal/Star/Concat/Union nodes.

    Raises UnbalancedParentheses or StackImbalance on malformed structure.
    """
    operands, operators = [], []
    concat_pending = False
    depth = 0

    for i, c in enumerate(regex):
        if c in SYMBOLS or c == "(":
            if concat_pending:
                _push_operator(".", operators, operands)
            if c == "(":
                operators.append(c)
                depth += 1
                concat_pending = False
            else:
                operands.append(Literal(c))
                concat_pending = True
        elif c == "*":
            if not concat_pending:
                raise StackImbalance("nothing to repeat", i)
            operands.append(Star(operands.pop()))
        elif c == "|":
            if not concat_pending:
                raise StackImbalance("'|' is missing its left operand", i)
            _push_operator(c, operators, operands)
            concat_pending = False
        elif c == ")":
            if depth == 0:
                raise UnbalancedParentheses("more ')' than '('", i)
            if not concat_pending:
                raise StackImbalance("empty group or dangling operator before ')'", i)
            while operators[-1] != "(":
                _reduce(operators, operands)
            operators.pop()
            depth -= 1
            # a closed group is an operand: it can be starred or concatenated
            concat_pending = True

    if depth > 0:
        raise UnbalancedParentheses(f"{depth} unclosed '('", len(regex))
    if not concat_pending:
        raise StackImbalance("expression ends with a dangling operator", len(regex))
    while operators:
        _reduce(operators, operands)
    return operands[0]


def build(tree):
    """Apply the construction primitives in post-order, without recursion."""
    built = []
    stack = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if isinstance(node, Literal):
            built.append(literal(node.symbol))
        elif not expanded:
            stack.append((node, True))
            if isinstance(node, Star):
                stack.append((node.inner, False))
            else:
                stack.append((node.right, False))
                stack.append((node.left, False))
        elif isinstance(node, Star):
            built.append(star(built.pop()))
        else:
            b = built.pop()
            a = built.pop()
            built.append(concat(a, b) if isinstance(node, Concat) else union(a, b))
    return built.pop()


class CompileResult(namedtuple("CompileResult", ["automaton", "error"])):
    __slots__ = ()

    @property
    def ok(self):
        return self.error is None


def regex_to_nfa(regex):
    if not is_valid(regex):
        pos = first_invalid(regex)
        if pos is None:
            raise InvalidInput("empty regular expression")
        raise InvalidInput(f"unexpected character {regex[pos]!r}", pos)
    nfa = build(parse(regex))
    logger.debug(
        "compiled %r: %d states, %d transitions",
        regex,
        nfa.state_count(),
        len(nfa.transition_list()),
    )
    return nfa


def compile_regex(regex):
    """Compile *regex*; failures come back as CompileResult.error with an empty NFA."""
    try:
        return CompileResult(regex_to_nfa(regex), None)
    except RegexError as e:
        logger.warning("rejected regex %r: %s", regex, e)
        return CompileResult(Automaton.empty(), e)


def format_transitions(nfa):
    return "\n".join(["NFA:"] + nfa.display())


def build_machine_json(nfa):
    transitions, symbols = [], set()
    for n, t in enumerate(nfa.transition_list()):
        if t.symbol != EPSILON:
            symbols.add(t.symbol)
        transitions.append(
            {
                "from": t.state_from,
                "to": t.state_to,
                "symbol": t.symbol,
                "id": f"{t.state_from}_{t.state_to}_{t.symbol}_{n}",
            }
        )
    final = nfa.final_state
    return {
        "states": list(nfa.states),
        "start": None if nfa.is_empty() else nfa.initial_state,
        "accepting": [] if final is None else [final],
        "transitions": transitions,
        "symbols": sorted(symbols),
    }
