from unittest import TestCase

from llparsing4py.core.charflow import CharFlow
from llparsing4py.core.errors import CharFlowError


class Test_CharFlow(TestCase):

    def test_basic(self):
        flow: CharFlow = CharFlow.fromString("abcdef")

        self.assertEqual(flow.peek(), ord("a"))
        self.assertEqual(flow.peek(), ord("a"))
        self.assertTrue(flow.hasMore())

        self.assertFalse(flow.check(ord("b")))
        self.assertTrue(flow.check(ord("a")))

        self.assertEqual(flow.peek(), ord("b"))
        flow.read(ord("b"))
        flow.read(ord("c"))
        self.assertEqual(flow.next(), ord("d"))
        flow.next()
        flow.next()

        self.assertFalse(flow.hasMore())
        self.assertTrue(flow.isLineEnd())

    def test_line_tracking(self):
        flow: CharFlow = CharFlow.fromString("ab\ncd")

        self.assertEqual((flow.line, flow.column), (1, 0))
        flow.next()
        flow.next()
        self.assertEqual((flow.line, flow.column), (1, 2))
        self.assertTrue(flow.isLineEnd())

        flow.next()
        self.assertEqual((flow.line, flow.column), (2, 0))
        self.assertFalse(flow.isLineEnd())

    def test_read_word(self):
        flow: CharFlow = CharFlow.fromString("  Head ->\tA b  \n  next")

        flow.skipBlanks()
        self.assertEqual(flow.readWord(), "Head")
        flow.skipBlanks()
        self.assertEqual(flow.readWord(), "->")
        flow.skipBlanks()
        self.assertEqual(flow.readWord(), "A")
        flow.skipBlanks()
        self.assertEqual(flow.readWord(), "b")
        flow.skipBlanks()

        self.assertEqual(flow.readWord(), "")
        self.assertTrue(flow.isLineEnd())

        flow.skipBlanksAndComments()
        self.assertEqual(flow.readWord(), "next")

    def test_skip_comments(self):
        flow: CharFlow = CharFlow.fromString("# comment\n\n  # other\nA")

        flow.skipBlanksAndComments()

        self.assertEqual(flow.peek(), ord("A"))
        self.assertEqual(flow.line, 4)

    def test_errors(self):
        flow: CharFlow = CharFlow.fromString("a")

        with self.assertRaises(CharFlowError) as context:
            flow.read(ord("b"))
        self.assertEqual((context.exception.line, context.exception.column), (1, 0))

        flow.next()
        with self.assertRaises(CharFlowError):
            flow.next()
