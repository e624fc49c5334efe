import logging
from typing import Iterable

from llparsing4py.core.errors import LexicalError
from llparsing4py.core.token import Token
from llparsing4py.tokenizer.tokenizer import Tokenizer, TokenizerBuilder
from llparsing4py.tokenizer.tokentype import TokenType

logger = logging.getLogger(__name__)

KEYWORDS: dict[TokenType, str] = {
    TokenType.Int: "int",
    TokenType.Double: "double",
    TokenType.Void: "void",
    TokenType.False_: "false",
    TokenType.True_: "true",
    TokenType.Null: "null",
    TokenType.Return: "return",
    TokenType.Function: "fun",
    TokenType.Class: "class",
    TokenType.If: "if",
    TokenType.While: "while",
    TokenType.Else: "else",
}

PATTERNS: dict[TokenType, str] = {
    TokenType.BlockComment: r"/\*.*?\*/",
    TokenType.LineComment: r"//[^\r\n]*(\r?\n)?",
    TokenType.WhiteSpace: r"[ \r\f\v]+",
    TokenType.Tab: r"\t",
    TokenType.NewLine: r"\n",
    TokenType.RightParen: r"\)",
    TokenType.LeftParen: r"\(",
    TokenType.LeftBrace: r"\{",
    TokenType.RightBrace: r"\}",
    TokenType.DoubleConstant: r"\b[0-9]{1,9}\.[0-9]{1,32}\b",
    TokenType.IntConstant: r"\b[0-9]{1,9}\b",
    TokenType.Plus: r"\+",
    TokenType.Minus: r"-",
    TokenType.Multiply: r"\*",
    TokenType.Divide: r"/",
    TokenType.Point: r"\.",
    TokenType.EqualEqual: r"==",
    TokenType.Equal: r"=",
    TokenType.ExclameEqual: r"!=",
    TokenType.Greater: r">",
    TokenType.Less: r"<",
    **{
        tokenType: r"\b{}\b".format(keyword)
        for tokenType, keyword in KEYWORDS.items()
    },
    TokenType.Semicolon: r";",
    TokenType.Comma: r",",
    TokenType.Identifier: r"\b[a-zA-Z][0-9a-zA-Z_]{0,31}\b",
}


def isAuxiliary(token: Token[TokenType]) -> bool:
    return token.key.isAuxiliary()


def buildDefaultTokenizer() -> Tokenizer[TokenType]:
    builder = TokenizerBuilder[TokenType]()

    for tokenType in TokenType:
        builder.addRawPattern(PATTERNS[tokenType], tokenType)

    return builder.build(skipper=isAuxiliary)


class Scanner:
    """
    Tokenizes a source one line at a time. Tokens never span several lines; the
    scanner only keeps the line counter and the tokens read so far.
    """

    def __init__(self, tokenizer: Tokenizer[TokenType] = None):
        if tokenizer is None:
            tokenizer = buildDefaultTokenizer()

        self.tokenizer: Tokenizer[TokenType] = tokenizer
        self.lineNumber: int = 0
        self.tokens: list[Token[TokenType]] = []

    def scanLine(self, line: str) -> list[Token[TokenType]]:
        self.lineNumber += 1

        try:
            tokens = self.tokenizer.tokenizeLine(line, self.lineNumber)
        except LexicalError as e:
            logger.debug("Line %d rejected: %s", self.lineNumber, e)
            raise

        self.tokens.extend(tokens)

        logger.debug("Line %d: %d token(s)", self.lineNumber, len(tokens))
        return tokens

    def scanLines(self, lines: Iterable[str]) -> list[Token[TokenType]]:
        tokens: list[Token[TokenType]] = []

        for line in lines:
            tokens.extend(self.scanLine(line))

        return tokens

    def filteredTokens(self) -> list[Token[TokenType]]:
        return self.tokenizer.filter(self.tokens)
