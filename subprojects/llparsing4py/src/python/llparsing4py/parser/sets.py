import logging
from collections import deque
from typing import Iterable, Iterator

from llparsing4py.core.errors import LeftRecursionError
from llparsing4py.parser.struct import Grammar
from llparsing4py.parser.symbols import NonTerminal, SpecialTerminal, Symbol, Terminal

logger = logging.getLogger(__name__)


def chainFirst(
    chain: Iterable[Symbol], firstSets: dict[Symbol, set[Terminal]]
) -> set[Terminal]:
    """
    FIRST set of a sequence of symbols: the FIRST sets of its symbols are merged
    from left to right as long as the previous ones contain EPSILON. EPSILON is
    part of the result only when every symbol of the chain can derive the empty
    string, which is trivially the case for an empty chain.
    """
    epsilon = SpecialTerminal.EPSILON()
    result: set[Terminal] = set()

    for symbol in chain:
        symbolFirst = firstSets[symbol]
        result.update(terminal for terminal in symbolFirst if terminal != epsilon)

        if epsilon not in symbolFirst:
            return result

    result.add(epsilon)
    return result


class SetSolver:

    def __init__(self, grammar: Grammar):
        self.grammar: Grammar = grammar

        # Computed
        self.firstSets: dict[Symbol, frozenset[Terminal]] = {}
        self.followSets: dict[NonTerminal, frozenset[Terminal]] = {}

    def solve(self) -> "SetSolver":
        self._computeFirstSets()
        self._computeFollowSets()
        return self

    def first(self, chain: Iterable[Symbol]) -> frozenset[Terminal]:
        return frozenset(chainFirst(chain, self.firstSets))

    def follow(self, nonTerminal: NonTerminal) -> frozenset[Terminal]:
        return self.followSets[nonTerminal]

    def isNullable(self, symbol: Symbol) -> bool:
        return SpecialTerminal.EPSILON() in self.firstSets[symbol]

    def _computeFirstSets(self):
        firstSets: dict[Symbol, set[Terminal]] = {}

        for symbol in self.grammar.alphabet:
            firstSets[symbol] = set([symbol]) if symbol.isTerminal else set()

        iterations = 0
        changed = True
        while changed:
            changed = False
            iterations += 1

            for rule in self.grammar.rules:
                targetSet = firstSets[rule.left]
                previousLength = len(targetSet)

                targetSet.update(chainFirst(rule.right, firstSets))

                changed |= previousLength != len(targetSet)

        logger.debug("FIRST sets stable after %d iteration(s)", iterations)

        self.firstSets = {
            symbol: frozenset(targetSet) for symbol, targetSet in firstSets.items()
        }

    def _computeFollowSets(self):
        epsilon = SpecialTerminal.EPSILON()
        followSets: dict[NonTerminal, set[Terminal]] = {
            nonTerminal: set() for nonTerminal in self.grammar.nonTerminals
        }

        followSets[self.grammar.startSymbol].add(SpecialTerminal.END_OF_PROGRAM())

        iterations = 0
        changed = True
        while changed:
            changed = False
            iterations += 1

            for rule in self.grammar.rules:
                for position, symbol in enumerate(rule.right):
                    if not symbol.isNonTerminal:
                        continue

                    targetSet = followSets[symbol]
                    previousLength = len(targetSet)

                    restFirst = chainFirst(rule.right[position + 1 :], self.firstSets)
                    if epsilon in restFirst:
                        restFirst.remove(epsilon)
                        targetSet.update(followSets[rule.left])
                    targetSet.update(restFirst)

                    changed |= previousLength != len(targetSet)

        logger.debug("FOLLOW sets stable after %d iteration(s)", iterations)

        self.followSets = {
            nonTerminal: frozenset(targetSet)
            for nonTerminal, targetSet in followSets.items()
        }

    def _computeLeftCorners(self) -> dict[NonTerminal, list[NonTerminal]]:
        leftCorners: dict[NonTerminal, list[NonTerminal]] = {
            nonTerminal: [] for nonTerminal in self.grammar.nonTerminals
        }

        for rule in self.grammar.rules:
            corners = leftCorners[rule.left]

            for symbol in rule.right:
                if symbol.isNonTerminal and symbol not in corners:
                    corners.append(symbol)

                if not self.isNullable(symbol):
                    break

        return leftCorners

    def checkLeftRecursion(self):
        """
        Raises a LeftRecursionError if a nonterminal can derive a string starting
        with itself, possibly through other nonterminals or nullable prefixes.
        """
        if not self.firstSets:
            self._computeFirstSets()

        VISITING = 1
        DONE = 2

        leftCorners = self._computeLeftCorners()
        states: dict[NonTerminal, int] = {}

        for root in self.grammar.nonTerminals:
            if root in states:
                continue

            path: list[NonTerminal] = [root]
            stack: deque[Iterator[NonTerminal]] = deque()
            stack.append(iter(leftCorners[root]))
            states[root] = VISITING

            while stack:
                corner = next(stack[-1], None)

                if corner is None:
                    stack.pop()
                    states[path.pop()] = DONE
                    continue

                state = states.get(corner)

                if state == VISITING:
                    raise LeftRecursionError(path[path.index(corner) :] + [corner])

                if state is None:
                    states[corner] = VISITING
                    path.append(corner)
                    stack.append(iter(leftCorners[corner]))
