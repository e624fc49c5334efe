from io import StringIO
from unittest import TestCase

from llparsing4py.core.errors import InternalConfigurationError
from llparsing4py.grammar.loader import loadGrammar
from llparsing4py.parser.mapping import TokenTerminalMapper
from llparsing4py.tokenizer.scanner import Scanner
from llparsing4py.tokenizer.tokentype import TokenType


def scan(line):
    scanner = Scanner()
    scanner.scanLine(line)
    return scanner.tokens


class Test_Mapping(TestCase):

    def setUp(self):
        self.grammar = loadGrammar(
            StringIO("S -> id = Value ;\nValue -> intConst | ( id )\n")
        )
        self.mapper = TokenTerminalMapper(self.grammar)

    def test_text_then_category(self):
        items = self.mapper.mapTokens(scan("count = ( other ) ;"))

        self.assertEqual(
            [(terminal.name, token.data) for terminal, token in items],
            [
                ("id", "count"),
                ("=", "="),
                ("(", "("),
                ("id", "other"),
                (")", ")"),
                (";", ";"),
            ],
        )

    def test_auxiliary_tokens_are_skipped(self):
        items = self.mapper.mapTokens(scan("\tx  =  7 ; // seven"))

        self.assertEqual(
            [terminal.name for terminal, _ in items], ["id", "=", "intConst", ";"]
        )

    def test_kind_without_category(self):
        with self.assertRaises(InternalConfigurationError) as context:
            self.mapper.mapTokens(scan("x = 1 + 2;"))

        self.assertIs(context.exception.tokenType, TokenType.Plus)
        self.assertIsNone(context.exception.terminalName)

    def test_category_missing_from_grammar(self):
        with self.assertRaises(InternalConfigurationError) as context:
            self.mapper.mapTokens(scan("x = 1.5;"))

        self.assertIs(context.exception.tokenType, TokenType.DoubleConstant)
        self.assertEqual(context.exception.terminalName, "doubleConst")

    def test_custom_categories(self):
        mapper = TokenTerminalMapper(
            self.grammar, {TokenType.DoubleConstant: "intConst"}
        )

        terminal = mapper.map(scan("2.5")[0])

        self.assertEqual(terminal.name, "intConst")

        with self.assertRaises(InternalConfigurationError):
            mapper.map(scan("name")[0])
