from enum import Enum, auto


class TokenType(Enum):
    """
    Token kinds of the language. The declaration order is the order in which
    the tokenizer tries the patterns.
    """

    BlockComment = auto()
    LineComment = auto()
    WhiteSpace = auto()
    Tab = auto()
    NewLine = auto()
    RightParen = auto()
    LeftParen = auto()
    LeftBrace = auto()
    RightBrace = auto()
    DoubleConstant = auto()
    IntConstant = auto()
    Plus = auto()
    Minus = auto()
    Multiply = auto()
    Divide = auto()
    Point = auto()
    EqualEqual = auto()
    Equal = auto()
    ExclameEqual = auto()
    Greater = auto()
    Less = auto()
    Int = auto()
    Double = auto()
    Void = auto()
    False_ = auto()
    True_ = auto()
    Null = auto()
    Return = auto()
    Function = auto()
    Class = auto()
    If = auto()
    While = auto()
    Else = auto()
    Semicolon = auto()
    Comma = auto()
    Identifier = auto()

    def isAuxiliary(self) -> bool:
        return self in AUXILIARY_TYPES

    def __repr__(self) -> str:
        return "TokenType.{}".format(self.name)


AUXILIARY_TYPES: frozenset[TokenType] = frozenset(
    [
        TokenType.BlockComment,
        TokenType.LineComment,
        TokenType.WhiteSpace,
        TokenType.Tab,
        TokenType.NewLine,
    ]
)
