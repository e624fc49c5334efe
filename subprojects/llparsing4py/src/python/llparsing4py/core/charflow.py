from io import StringIO, TextIOBase

from llparsing4py.core.errors import CharFlowError

NEWLINE = 10


class CharFlow:

    def __init__(self, reader: TextIOBase):
        self.reader: TextIOBase = reader

        self.current: int = None
        self.line: int = 1
        self.column: int = 0

    def peek(self):
        if self.current is None:
            obtained: str = self.reader.read(1)
            if len(obtained) == 1:
                self.current = ord(obtained)
            else:
                self.current = -1

        return self.current

    def read(self, target: int):
        if not self.hasMore():
            raise CharFlowError(
                "expected '{}' but got end of stream".format(chr(target)),
                self.line,
                self.column,
            )

        if self.peek() != target:
            raise CharFlowError(
                "expected '{}' but got '{}'".format(chr(target), chr(self.peek())),
                self.line,
                self.column,
            )

        self._step()

    def check(self, target: int):
        if self.hasMore() and self.peek() == target:
            self._step()
            return True
        return False

    def next(self):
        if not self.hasMore():
            raise CharFlowError(
                "tried to step but got end of stream", self.line, self.column
            )
        result = self.peek()
        self._step()
        return result

    def _step(self):
        if self.peek() == NEWLINE:
            self.line += 1
            self.column = 0
        else:
            self.column += 1

        self.current = None

    def hasMore(self):
        return self.peek() >= 0

    def isLineEnd(self):
        return not self.hasMore() or self.peek() == NEWLINE

    def skipBlanks(self):
        """Skips blanks without leaving the current line"""
        while not self.isLineEnd() and chr(self.peek()).isspace():
            self.next()

    def skipBlanksAndComments(self):
        """Skips blanks, line ends and lines starting with '#'"""
        while self.hasMore():
            if chr(self.peek()).isspace():
                self.next()
                continue

            if self.peek() == ord("#"):
                self.read(ord("#"))

                while self.hasMore() and not self.check(NEWLINE):
                    self.next()

                continue

            break

    def readWord(self):
        buffer = StringIO()

        while not self.isLineEnd() and not chr(self.peek()).isspace():
            buffer.write(chr(self.next()))

        return buffer.getvalue()

    def skipBlanksDecorator(func):

        def wrapped(flow: "CharFlow", *args, **kwargs):
            flow.skipBlanks()
            result = func(flow, *args, **kwargs)
            flow.skipBlanks()
            return result

        return wrapped

    def fromString(target: str):
        return CharFlow(StringIO(target))
