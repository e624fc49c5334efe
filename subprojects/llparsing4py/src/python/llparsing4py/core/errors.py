"""Errors raised by the tokenizer, the grammar loader and the parser"""


class LLParsingError(Exception):
    pass


class CharFlowError(LLParsingError):

    def __init__(self, message: str, line: int, column: int):
        LLParsingError.__init__(
            self, "At line {}, column {}, {}".format(line, column, message)
        )
        self.line: int = line
        self.column: int = column


class LexicalError(LLParsingError):

    def __init__(self, line: int, column: int, text: str = ""):
        LLParsingError.__init__(
            self,
            "Unable to tokenize '{}' at line {}, column {}".format(text, line, column),
        )
        self.line: int = line
        self.column: int = column
        self.text: str = text


class GrammarFileError(LLParsingError):

    def __init__(self, reason: str, line: int = None, column: int = None):
        if line is None:
            message = reason
        elif column is None:
            message = "Line {}: {}".format(line, reason)
        else:
            message = "Line {}, column {}: {}".format(line, column, reason)

        LLParsingError.__init__(self, message)
        self.reason: str = reason
        self.line: int = line
        self.column: int = column


class LeftRecursionError(GrammarFileError):
    """
    The grammar contains a nonterminal that can derive itself as its leftmost
    symbol. ``cycle`` lists the nonterminals of one such derivation, the first
    one repeated at the end.
    """

    def __init__(self, cycle: list):
        GrammarFileError.__init__(
            self,
            "Left recursion is not supported: {}".format(
                " -> ".join(symbol.name for symbol in cycle)
            ),
        )
        self.cycle: list = cycle


class TableConflictError(LLParsingError):

    def __init__(self, nonTerminal, terminal, existing, candidate):
        LLParsingError.__init__(
            self,
            "LL(1) conflict on ({}, {}) between rule {} '{}' and rule {} '{}'".format(
                nonTerminal.name,
                terminal.name,
                existing.index,
                existing,
                candidate.index,
                candidate,
            ),
        )
        self.nonTerminal = nonTerminal
        self.terminal = terminal
        self.existing = existing
        self.candidate = candidate


class ParserSyntaxError(LLParsingError):
    """
    Base class of the errors raised by the predictive parser when the input does
    not belong to the language. ``position`` is the number of terminals consumed
    before the failure, ``token`` the source token being looked at, if known.
    """

    def __init__(self, message: str, position: int, token=None):
        if token is not None:
            message = "{} (line {}, column {})".format(
                message, token.line, token.column
            )
        LLParsingError.__init__(self, message)
        self.position: int = position
        self.token = token


class UnexpectedTerminalError(ParserSyntaxError):

    def __init__(self, expected, found, position: int, token=None):
        ParserSyntaxError.__init__(
            self,
            "Expected '{}' but found '{}' after terminal #{}".format(
                expected.name, found.name, position
            ),
            position,
            token,
        )
        self.expected = expected
        self.found = found


class MissingTableEntryError(ParserSyntaxError):

    def __init__(self, nonTerminal, lookahead, position: int, token=None):
        ParserSyntaxError.__init__(
            self,
            "No rule of '{}' starts with '{}' after terminal #{}".format(
                nonTerminal.name, lookahead.name, position
            ),
            position,
            token,
        )
        self.nonTerminal = nonTerminal
        self.lookahead = lookahead


class IncompleteParseError(LLParsingError):

    def __init__(self, remaining: list, position: int):
        LLParsingError.__init__(
            self,
            "Parsing stopped after terminal #{} with {} terminal(s) left: {}".format(
                position,
                len(remaining),
                " ".join(terminal.name for terminal in remaining),
            ),
        )
        self.remaining: list = remaining
        self.position: int = position


class InternalConfigurationError(LLParsingError):
    """
    The scanner produced a token kind the grammar has no terminal for. This is a
    mismatch between the token categories and the grammar, not an input error.
    """

    def __init__(self, tokenType, terminalName: str = None):
        if terminalName is None:
            message = "Token kind {} has no category terminal".format(tokenType)
        else:
            message = "Token kind {} maps to '{}' which the grammar does not declare".format(
                tokenType, terminalName
            )
        LLParsingError.__init__(self, message)
        self.tokenType = tokenType
        self.terminalName: str = terminalName
