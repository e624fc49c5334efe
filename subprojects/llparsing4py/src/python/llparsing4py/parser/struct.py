from typing import Iterable

from llparsing4py.core.errors import GrammarFileError
from llparsing4py.parser.symbols import (
    NonTerminal,
    SpecialTerminal,
    Symbol,
    Terminal,
)


class Rule:

    def __init__(self, index: int, left: NonTerminal, right: tuple[Symbol, ...]):
        self.index: int = index
        self.left: NonTerminal = left
        self.right: tuple[Symbol, ...] = right

    @property
    def isEmpty(self) -> bool:
        return self.right == (SpecialTerminal.EPSILON(),)

    def describe(self) -> tuple[int, str, tuple[str, ...]]:
        return self.index, self.left.name, tuple(symbol.name for symbol in self.right)

    def __hash__(self) -> int:
        return self.index

    def __eq__(self, value: object) -> bool:
        return (
            isinstance(value, Rule)
            and self.index == value.index
            and self.left == value.left
            and self.right == value.right
        )

    def __str__(self) -> str:
        return "{} -> {}".format(
            self.left.name, " ".join(symbol.name for symbol in self.right)
        )

    def __repr__(self) -> str:
        return "Rule({}, '{}')".format(self.index, self)


class Grammar:
    """
    A loaded grammar: the alphabet, the rules in file order and the start symbol.
    Instances are built once by a GrammarBuilder and never modified afterwards.
    """

    def __init__(
        self,
        symbols: dict[str, Symbol],
        rules: Iterable[Rule],
        startSymbol: NonTerminal,
    ):
        self.symbols: dict[str, Symbol] = dict(symbols)
        self.rules: tuple[Rule, ...] = tuple(rules)
        self.startSymbol: NonTerminal = startSymbol

        ordered = sorted(self.symbols.values(), key=lambda symbol: symbol.code)
        self.terminals: tuple[Terminal, ...] = tuple(
            symbol
            for symbol in ordered
            if symbol.isTerminal and not isinstance(symbol, SpecialTerminal)
        )
        self.nonTerminals: tuple[NonTerminal, ...] = tuple(
            symbol for symbol in ordered if symbol.isNonTerminal
        )

        generators: dict[NonTerminal, list[Rule]] = {
            nonTerminal: [] for nonTerminal in self.nonTerminals
        }
        for rule in self.rules:
            generators[rule.left].append(rule)

        self.generators: dict[NonTerminal, tuple[Rule, ...]] = {
            nonTerminal: tuple(rules) for nonTerminal, rules in generators.items()
        }

    @property
    def alphabet(self) -> tuple[Symbol, ...]:
        return (
            (SpecialTerminal.EPSILON(), SpecialTerminal.END_OF_PROGRAM())
            + self.terminals
            + self.nonTerminals
        )

    def getRules(self, nonTerminal: NonTerminal) -> tuple[Rule, ...]:
        return self.generators.get(nonTerminal, ())

    def getTerminal(self, name: str) -> Terminal:
        """Returns the terminal named `name`, sentinels excluded, or None"""
        symbol = self.symbols.get(name)

        if (
            symbol is None
            or not symbol.isTerminal
            or isinstance(symbol, SpecialTerminal)
        ):
            return None

        return symbol

    def __repr__(self) -> str:
        return "Grammar(start='{}', rules={}, terminals={}, nonTerminals={})".format(
            self.startSymbol.name,
            len(self.rules),
            len(self.terminals),
            len(self.nonTerminals),
        )


def isNonTerminalName(name: str) -> bool:
    return name[0].isupper() and name != "EPSILON"


class GrammarBuilder:

    def __init__(self):
        self.symbols: dict[str, Symbol] = {"EPSILON": SpecialTerminal.EPSILON()}
        self.rules: list[Rule] = []
        self.startSymbol: NonTerminal = None

        self.nextCode: int = 1

    def getSymbol(self, name: str) -> Symbol:
        if name not in self.symbols:
            if isNonTerminalName(name):
                self.symbols[name] = NonTerminal(self.nextCode, name)
            else:
                self.symbols[name] = Terminal(self.nextCode, name)
            self.nextCode += 1

        return self.symbols[name]

    def getNonTerminal(self, name: str) -> NonTerminal:
        symbol = self.getSymbol(name)

        if not symbol.isNonTerminal:
            raise GrammarFileError(
                "'{}' cannot be the head of a rule, it is a terminal".format(name)
            )

        return symbol

    def addRule(self, left: NonTerminal, right: Iterable[Symbol]) -> Rule:
        right = tuple(right)

        if not right:
            raise GrammarFileError(
                "Rule of '{}' has an empty right side, use EPSILON".format(left.name)
            )

        if self.startSymbol is None:
            self.startSymbol = left

        rule = Rule(len(self.rules), left, right)
        self.rules.append(rule)
        return rule

    def build(self) -> Grammar:
        if not self.rules:
            raise GrammarFileError("The grammar does not contain any rule")

        return Grammar(self.symbols, self.rules, self.startSymbol)
