from enum import Enum


class SymbolKind(Enum):
    TERMINAL = 0
    NON_TERMINAL = 1


class Symbol:
    """
    Grammar symbol. Symbols are identified by their kind and their code, the
    name is only used for lookups and display.
    """

    kind: SymbolKind = None

    def __init__(self, code: int, name: str):
        self.code: int = code
        self.name: str = name

    @property
    def isTerminal(self) -> bool:
        return self.kind is SymbolKind.TERMINAL

    @property
    def isNonTerminal(self) -> bool:
        return self.kind is SymbolKind.NON_TERMINAL

    def __hash__(self) -> int:
        return hash((self.kind, self.code))

    def __eq__(self, value: object) -> bool:
        return (
            isinstance(value, Symbol)
            and self.kind is value.kind
            and self.code == value.code
        )

    def __str__(self) -> str:
        return self.name


class Terminal(Symbol):

    kind: SymbolKind = SymbolKind.TERMINAL

    def __repr__(self) -> str:
        return "Terminal(code={}, name='{}')".format(self.code, self.name)


class NonTerminal(Symbol):

    kind: SymbolKind = SymbolKind.NON_TERMINAL

    def __repr__(self) -> str:
        return "NonTerminal(code={}, name='{}')".format(self.code, self.name)


class SpecialTerminal(Terminal):

    EPSILON_CODE = 0
    END_OF_PROGRAM_CODE = -1

    _EPSILON_INSTANCE = None
    _END_OF_PROGRAM_INSTANCE = None

    def __repr__(self) -> str:
        return "SpecialTerminal({})".format(self.name)

    def EPSILON():
        if SpecialTerminal._EPSILON_INSTANCE is None:
            SpecialTerminal._EPSILON_INSTANCE = SpecialTerminal(
                SpecialTerminal.EPSILON_CODE, "EPSILON"
            )

        return SpecialTerminal._EPSILON_INSTANCE

    def END_OF_PROGRAM():
        if SpecialTerminal._END_OF_PROGRAM_INSTANCE is None:
            SpecialTerminal._END_OF_PROGRAM_INSTANCE = SpecialTerminal(
                SpecialTerminal.END_OF_PROGRAM_CODE, "ENDOFPROGRAM"
            )

        return SpecialTerminal._END_OF_PROGRAM_INSTANCE
