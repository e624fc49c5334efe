import logging
from collections import deque
from typing import Iterable

from llparsing4py.core.errors import (
    IncompleteParseError,
    MissingTableEntryError,
    UnexpectedTerminalError,
)
from llparsing4py.core.token import Token
from llparsing4py.parser.mapping import TokenTerminalMapper
from llparsing4py.parser.struct import Grammar, Rule
from llparsing4py.parser.symbols import NonTerminal, SpecialTerminal, Symbol, Terminal
from llparsing4py.tokenizer.tokentype import TokenType

logger = logging.getLogger(__name__)


class ParsingTable:

    def __init__(self):
        self.entries: dict[tuple[NonTerminal, Terminal], Rule] = {}

        # (nonTerminal, terminal, replaced rule, kept rule)
        self.conflicts: list[tuple[NonTerminal, Terminal, Rule, Rule]] = []

    def get(self, nonTerminal: NonTerminal, terminal: Terminal) -> Rule:
        return self.entries.get((nonTerminal, terminal))

    def put(self, nonTerminal: NonTerminal, terminal: Terminal, rule: Rule) -> Rule:
        """Stores `rule` and returns the rule previously stored for the key, if any"""
        previous = self.entries.get((nonTerminal, terminal))
        self.entries[(nonTerminal, terminal)] = rule
        return previous

    def __contains__(self, key: tuple[NonTerminal, Terminal]) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return "ParsingTable(entries={}, conflicts={})".format(
            len(self.entries), len(self.conflicts)
        )


class Parser:

    def __init__(
        self,
        grammar: Grammar,
        table: ParsingTable,
        mapper: TokenTerminalMapper = None,
    ):
        self.grammar: Grammar = grammar
        self.table: ParsingTable = table

        if mapper is None:
            mapper = TokenTerminalMapper(grammar)
        self.mapper: TokenTerminalMapper = mapper

    def parse(self, terminals: Iterable[Terminal]) -> list[Rule]:
        """
        Parses a sequence of terminals and returns the rules of its leftmost
        derivation, in the order they were applied.
        """
        return self._run([(terminal, None) for terminal in terminals])

    def parseTokens(self, tokens: Iterable[Token[TokenType]]) -> list[Rule]:
        """
        Same as `parse` for scanner tokens. Auxiliary tokens are skipped and
        errors report the line and column of the offending token.
        """
        return self._run(self.mapper.mapTokens(tokens))

    def _run(self, items: list[tuple[Terminal, Token[TokenType]]]) -> list[Rule]:
        endOfProgram = SpecialTerminal.END_OF_PROGRAM()
        epsilon = SpecialTerminal.EPSILON()

        inputStack: deque[tuple[Terminal, Token[TokenType]]] = deque()
        inputStack.append((endOfProgram, None))
        inputStack.extend(reversed(items))

        symbolStack: deque[Symbol] = deque()
        symbolStack.append(endOfProgram)
        symbolStack.append(self.grammar.startSymbol)

        derivation: list[Rule] = []
        position = 0

        while symbolStack and inputStack:
            top = symbolStack[-1]
            lookahead, token = inputStack[-1]

            if top.isTerminal:
                if top != lookahead:
                    raise UnexpectedTerminalError(top, lookahead, position, token)

                symbolStack.pop()
                inputStack.pop()
                position += 1
                continue

            rule = self.table.get(top, lookahead)

            if rule is None:
                raise MissingTableEntryError(top, lookahead, position, token)

            symbolStack.pop()
            for symbol in reversed(rule.right):
                if symbol != epsilon:
                    symbolStack.append(symbol)

            derivation.append(rule)
            logger.debug("Applied rule %d: %s", rule.index, rule)

        if inputStack:
            raise IncompleteParseError(
                [terminal for terminal, _ in reversed(inputStack)], position
            )

        return derivation
