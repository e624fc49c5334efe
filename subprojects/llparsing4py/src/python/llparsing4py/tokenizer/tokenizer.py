import re
from typing import Callable, Generic, Iterable, TypeVar
from typing_extensions import Self

from llparsing4py.core.errors import LexicalError
from llparsing4py.core.token import Token

T = TypeVar("T")


class TokenizerBuilder(Generic[T]):

    def __init__(self):
        self.entries: list[tuple[re.Pattern, T]] = []

    def addRawPattern(self, pattern: str, value: T) -> Self:
        self.entries.append((re.compile(pattern), value))
        return self

    def build(
        self, skipper: Callable[[Token[T]], bool] = lambda token: False
    ) -> "Tokenizer[T]":
        return Tokenizer(list(self.entries), skipper=skipper)


class Tokenizer(Generic[T]):
    """
    Splits lines into tokens by trying the registered patterns in order at the
    current column. The first pattern matching there wins, even if a later one
    would match a longer text.
    """

    def __init__(
        self,
        entries: list[tuple[re.Pattern, T]],
        skipper: Callable[[Token[T]], bool] = lambda token: False,
    ):
        self.entries: list[tuple[re.Pattern, T]] = entries
        self.skipper: Callable[[Token[T]], bool] = skipper

    def readToken(self, line: str, lineNumber: int, column: int) -> Token[T]:
        for pattern, value in self.entries:
            match = pattern.match(line, column)

            # An empty match would never advance the cursor
            if match is not None and match.end() > column:
                return Token(value, match.group(), lineNumber, column)

        raise LexicalError(lineNumber, column, line[column : column + 1])

    def tokenizeLine(self, line: str, lineNumber: int) -> list[Token[T]]:
        tokens: list[Token[T]] = []
        column = 0

        while column < len(line):
            token = self.readToken(line, lineNumber, column)
            tokens.append(token)
            column = token.end

        return tokens

    def filter(self, tokens: Iterable[Token[T]]) -> list[Token[T]]:
        return [token for token in tokens if not self.skipper(token)]
