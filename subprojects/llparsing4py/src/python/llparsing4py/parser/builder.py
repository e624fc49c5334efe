import logging
from enum import Enum

from llparsing4py.core.errors import TableConflictError
from llparsing4py.parser.mapping import TokenTerminalMapper
from llparsing4py.parser.parser import Parser, ParsingTable
from llparsing4py.parser.sets import SetSolver
from llparsing4py.parser.struct import Grammar, Rule
from llparsing4py.parser.symbols import NonTerminal, SpecialTerminal, Terminal

logger = logging.getLogger(__name__)


class ConflictPolicy(Enum):
    """
    What the builder does when two different rules claim the same table entry.
    LAST_WINS keeps the rule registered last, FAIL raises a TableConflictError.
    """

    LAST_WINS = 0
    FAIL = 1


class ParserBuilder:

    def __init__(self, grammar: Grammar):
        self.grammar: Grammar = grammar
        self.conflictPolicy: ConflictPolicy = ConflictPolicy.LAST_WINS
        self.mapper: TokenTerminalMapper = None

        # Computed
        self.solver: SetSolver = None
        self.table: ParsingTable = None

    def build(self) -> Parser:
        self._computeSets()
        self._computeTable()
        return Parser(self.grammar, self.table, self.mapper)

    def _computeSets(self):
        self.solver = SetSolver(self.grammar)
        self.solver.checkLeftRecursion()
        self.solver.solve()

    def _computeTable(self):
        epsilon = SpecialTerminal.EPSILON()
        self.table = ParsingTable()

        for rule in self.grammar.rules:
            ruleFirst = self.solver.first(rule.right)

            for terminal in ruleFirst:
                if terminal != epsilon:
                    self._setEntry(rule.left, terminal, rule)

            if epsilon in ruleFirst:
                for terminal in self.solver.follow(rule.left):
                    self._setEntry(rule.left, terminal, rule)

        logger.debug(
            "Built parsing table with %d entries and %d conflict(s)",
            len(self.table),
            len(self.table.conflicts),
        )

    def _setEntry(self, nonTerminal: NonTerminal, terminal: Terminal, rule: Rule):
        previous = self.table.get(nonTerminal, terminal)

        if previous is None or previous == rule:
            self.table.put(nonTerminal, terminal, rule)
            return

        if self.conflictPolicy is ConflictPolicy.FAIL:
            raise TableConflictError(nonTerminal, terminal, previous, rule)

        logger.warning(
            "Conflict on (%s, %s): rule %d '%s' replaces rule %d '%s'",
            nonTerminal.name,
            terminal.name,
            rule.index,
            rule,
            previous.index,
            previous,
        )
        self.table.put(nonTerminal, terminal, rule)
        self.table.conflicts.append((nonTerminal, terminal, previous, rule))
