import os
from unittest import TestCase

from llparsing4py.core.errors import LexicalError
from llparsing4py.tokenizer.scanner import Scanner, buildDefaultTokenizer
from llparsing4py.tokenizer.tokentype import TokenType

RESOURCES = os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    os.pardir,
    os.pardir,
    os.pardir,
    os.pardir,
    "resources",
)


def summary(tokens):
    return [(token.key, token.data, token.column) for token in tokens]


class Test_Scanner(TestCase):

    def test_declaration(self):
        scanner = Scanner()

        scanner.scanLine("int x = 5;")

        self.assertEqual(
            summary(scanner.filteredTokens()),
            [
                (TokenType.Int, "int", 0),
                (TokenType.Identifier, "x", 4),
                (TokenType.Equal, "=", 6),
                (TokenType.IntConstant, "5", 8),
                (TokenType.Semicolon, ";", 9),
            ],
        )
        self.assertEqual(len(scanner.tokens), 8)

    def test_glued_number_and_letters(self):
        scanner = Scanner()

        with self.assertRaises(LexicalError) as context:
            scanner.scanLine("5xyz")

        self.assertEqual(context.exception.line, 1)
        self.assertEqual(context.exception.column, 0)
        self.assertEqual(scanner.tokens, [])

    def test_error_column(self):
        scanner = Scanner()

        with self.assertRaises(LexicalError) as context:
            scanner.scanLine("x = 12ab;")

        self.assertEqual(context.exception.column, 4)

    def test_keyword_boundaries(self):
        scanner = Scanner()

        tokens = scanner.scanLine("while1 while(x)")

        self.assertEqual(
            summary(tokens),
            [
                (TokenType.Identifier, "while1", 0),
                (TokenType.WhiteSpace, " ", 6),
                (TokenType.While, "while", 7),
                (TokenType.LeftParen, "(", 12),
                (TokenType.Identifier, "x", 13),
                (TokenType.RightParen, ")", 14),
            ],
        )

    def test_operators_and_constants(self):
        scanner = Scanner()

        tokens = scanner.scanLine("a==2.75!=b.c<=1")

        self.assertEqual(
            [token.key for token in tokens],
            [
                TokenType.Identifier,
                TokenType.EqualEqual,
                TokenType.DoubleConstant,
                TokenType.ExclameEqual,
                TokenType.Identifier,
                TokenType.Point,
                TokenType.Identifier,
                TokenType.Less,
                TokenType.Equal,
                TokenType.IntConstant,
            ],
        )

    def test_auxiliary_tokens(self):
        scanner = Scanner()

        tokens = scanner.scanLine("\tx /* note */ // end\n")

        self.assertEqual(
            [token.key for token in tokens],
            [
                TokenType.Tab,
                TokenType.Identifier,
                TokenType.WhiteSpace,
                TokenType.BlockComment,
                TokenType.WhiteSpace,
                TokenType.LineComment,
            ],
        )
        self.assertEqual(
            [token.key for token in scanner.filteredTokens()], [TokenType.Identifier]
        )

    def test_empty_line(self):
        scanner = Scanner()

        self.assertEqual(scanner.scanLine(""), [])
        self.assertEqual(scanner.lineNumber, 1)

        tokens = scanner.scanLine("x")
        self.assertEqual(tokens[0].line, 2)

    def test_filter_is_idempotent(self):
        tokenizer = buildDefaultTokenizer()
        scanner = Scanner(tokenizer)

        scanner.scanLines(["int a; // first\n", "\n", "  a = a + 1;\n"])

        once = scanner.filteredTokens()
        twice = tokenizer.filter(once)

        self.assertEqual(once, twice)
        self.assertTrue(all(not token.key.isAuxiliary() for token in once))

    def test_scan_file(self):
        scanner = Scanner()

        with open(
            os.path.join(RESOURCES, "countdown.src"), "r", encoding="utf-8"
        ) as inputStream:
            scanner.scanLines(inputStream)

        tokens = scanner.filteredTokens()

        self.assertEqual(scanner.lineNumber, 6)
        self.assertEqual(len(tokens), 24)
        self.assertEqual(
            [(token.data, token.line, token.column) for token in tokens[-7:]],
            [
                ("x", 5, 1),
                ("=", 5, 3),
                ("x", 5, 5),
                ("-", 5, 7),
                ("1", 5, 9),
                (";", 5, 10),
                ("}", 6, 0),
            ],
        )
        self.assertEqual(tokens[8].key, TokenType.DoubleConstant)

    def test_lines_after_error(self):
        scanner = Scanner()

        with self.assertRaises(LexicalError):
            scanner.scanLine("a = #;")

        tokens = scanner.scanLine("b = 1;")

        self.assertEqual(tokens[0].line, 2)
        self.assertEqual(
            [token.data for token in scanner.filteredTokens()], ["b", "=", "1", ";"]
        )
