"""
Loader for grammar descriptions.

A grammar description holds one production head per line:

    Goal -> A
    A -> ( A ) | Two
    Two -> a | EPSILON

Names are separated by blanks. Names starting with an uppercase letter are
nonterminals, every other name is a terminal and `EPSILON` denotes the empty
string. The head of the first line is the start symbol. Blank lines and lines
starting with '#' are ignored.
"""

import logging
import os
from io import TextIOBase

from llparsing4py.core.charflow import CharFlow
from llparsing4py.core.errors import CharFlowError, GrammarFileError
from llparsing4py.parser.builder import ConflictPolicy, ParserBuilder
from llparsing4py.parser.parser import Parser
from llparsing4py.parser.struct import Grammar, GrammarBuilder, isNonTerminalName
from llparsing4py.parser.symbols import Symbol

logger = logging.getLogger(__name__)

ARROW = "->"
SEPARATOR = "|"


def loadGrammar(inputStream: TextIOBase) -> Grammar:
    flow = CharFlow(inputStream)
    builder = GrammarBuilder()

    try:
        flow.skipBlanksAndComments()
        while flow.hasMore():
            _readProduction(flow, builder)
            flow.skipBlanksAndComments()
    except CharFlowError as e:
        raise GrammarFileError(str(e), e.line, e.column) from e

    grammar = builder.build()
    logger.debug("Loaded %s", grammar)
    return grammar


def loadGrammarFile(path: str) -> Grammar:
    if not os.path.isfile(path):
        raise GrammarFileError("Grammar file '{}' cannot be found".format(path))

    try:
        with open(path, "r", encoding="utf-8") as inputStream:
            return loadGrammar(inputStream)
    except OSError as e:
        raise GrammarFileError(
            "Grammar file '{}' cannot be read: {}".format(path, e)
        ) from e


def loadParser(
    inputStream: TextIOBase, conflictPolicy: ConflictPolicy = ConflictPolicy.LAST_WINS
) -> Parser:
    parserBuilder = ParserBuilder(loadGrammar(inputStream))
    parserBuilder.conflictPolicy = conflictPolicy
    return parserBuilder.build()


@CharFlow.skipBlanksDecorator
def _readName(flow: CharFlow) -> tuple[str, int]:
    column = flow.column
    return flow.readWord(), column


def _readProduction(flow: CharFlow, builder: GrammarBuilder) -> None:
    line = flow.line

    # Reading head
    head, column = _readName(flow)

    if not isNonTerminalName(head):
        raise GrammarFileError(
            "Head '{}' is not a nonterminal name".format(head), line, column
        )

    left = builder.getNonTerminal(head)

    # Reading arrow
    arrow, column = _readName(flow)

    if arrow != ARROW:
        raise GrammarFileError(
            "Expected '{}' after '{}' but got '{}'".format(ARROW, head, arrow),
            line,
            column,
        )

    # Reading alternatives
    right: list[Symbol] = []

    while True:
        name, column = _readName(flow)

        if name == SEPARATOR or not name:
            if not right:
                raise GrammarFileError(
                    "Empty alternative for '{}'".format(head), line, column
                )

            builder.addRule(left, right)
            right = []

            if not name:
                return
            continue

        right.append(builder.getSymbol(name))
