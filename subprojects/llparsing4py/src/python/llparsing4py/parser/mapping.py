from typing import Iterable

from llparsing4py.core.errors import InternalConfigurationError
from llparsing4py.core.token import Token
from llparsing4py.parser.struct import Grammar
from llparsing4py.parser.symbols import Terminal
from llparsing4py.tokenizer.tokentype import TokenType

CATEGORY_TERMINALS: dict[TokenType, str] = {
    TokenType.Identifier: "id",
    TokenType.IntConstant: "intConst",
    TokenType.DoubleConstant: "doubleConst",
}


class TokenTerminalMapper:
    """
    Turns scanner tokens into grammar terminals. Keywords and punctuation are
    found by their text among the terminal names of the grammar, identifiers and
    constants through the terminal of their category.
    """

    def __init__(self, grammar: Grammar, categories: dict[TokenType, str] = None):
        self.grammar: Grammar = grammar

        if categories is None:
            categories = CATEGORY_TERMINALS
        self.categories: dict[TokenType, str] = dict(categories)

    def map(self, token: Token[TokenType]) -> Terminal:
        terminal = self.grammar.getTerminal(token.data)

        if terminal is not None:
            return terminal

        name = self.categories.get(token.key)

        if name is None:
            raise InternalConfigurationError(token.key)

        terminal = self.grammar.getTerminal(name)

        if terminal is None:
            raise InternalConfigurationError(token.key, name)

        return terminal

    def mapTokens(
        self, tokens: Iterable[Token[TokenType]]
    ) -> list[tuple[Terminal, Token[TokenType]]]:
        return [
            (self.map(token), token) for token in tokens if not token.key.isAuxiliary()
        ]
