import unittest

from watex.spans import Mode, Pos, Span
from watex.tokens import Token

CODE = r"""\begin{equation*}
    \textbf{illegal} \rarrow # \larrow \textbf{illegal}
\end{equation*}"""


class TestSpan(unittest.TestCase):
    def test_highlight_msg_in_code(self):
        highlighted = Span(2, 30).highlight_msg_in_code(CODE, "Illegal character")
        expected = (
            "\\begin{equation*}\n"
            "    \\textbf{illegal} \\rarrow # \\larrow \\textbf{illegal}\n"
            + " " * 29 + "^ Illegal character\n"
            "\\end{equation*}\n"
        )
        self.assertEqual(highlighted, expected)
        caret_line = highlighted.splitlines()[2]
        self.assertEqual(CODE.splitlines()[1][caret_line.index('^')], '#')

    def test_highlight_first_column(self):
        self.assertEqual(Span(1, 1).highlight_msg_in_code("#x", "here"), "#x\n^ here\n")

    def test_highlight_line_out_of_range(self):
        self.assertEqual(Span(5, 1).highlight_msg_in_code("a\nb", "msg"), "a\nb\n")

    def test_highlight_trailing_newline(self):
        self.assertEqual(Span(1, 2).highlight_msg_in_code("ab\n", "m"), "ab\n ^ m\n")

    def test_highlight_splits_only_on_newline(self):
        highlighted = Span(2, 1).highlight_msg_in_code("a\x0cb\n#", "here")
        self.assertEqual(highlighted, "a\x0cb\n#\n^ here\n")
        highlighted = Span(1, 3).highlight_msg_in_code("a\rb c\x1c#", "here")
        self.assertEqual(highlighted, "a\rb c\x1c#\n  ^ here\n")

    def test_highlight_crlf(self):
        self.assertEqual(Span(2, 1).highlight_msg_in_code("a\r\n#\r\n", "m"), "a\n#\n^ m\n")

    def test_highlight_empty_code(self):
        self.assertEqual(Span(1, 1).highlight_msg_in_code("", "m"), "")

    def test_str(self):
        self.assertEqual(str(Span(3, 7)), "line 3, column 7")

    def test_ordering_and_hash(self):
        self.assertLess(Span(1, 9), Span(2, 1))
        self.assertLess(Span(2, 1), Span(2, 2))
        self.assertEqual(Span(2, 2), Span(2, 2))
        self.assertEqual(len({Span(1, 1), Span(1, 1), Span(1, 2)}), 2)

    def test_immutable(self):
        span = Span(1, 1)
        with self.assertRaises(AttributeError):
            span.line = 2


class TestPos(unittest.TestCase):
    def test_map_keeps_span(self):
        pos = Pos('a', Span(4, 2))
        mapped = pos.map(Token.char)
        self.assertEqual(mapped.val, Token.char('a'))
        self.assertIs(mapped.span, pos.span)
        self.assertEqual(pos.val, 'a')

    def test_line_and_column(self):
        pos = Pos(1, Span(4, 2))
        self.assertEqual((pos.line, pos.column), (4, 2))

    def test_equality(self):
        self.assertEqual(Pos('a', Span(1, 1)), Pos('a', Span(1, 1)))
        self.assertNotEqual(Pos('a', Span(1, 1)), Pos('a', Span(1, 2)))
        self.assertNotEqual(Pos('a', Span(1, 1)), Pos('b', Span(1, 1)))

    def test_immutable(self):
        pos = Pos('a', Span(1, 1))
        with self.assertRaises(AttributeError):
            pos.val = 'b'


class TestMode(unittest.TestCase):
    def test_members(self):
        self.assertEqual({m.name for m in Mode}, {'TEXT', 'MATH'})


if __name__ == '__main__':
    unittest.main()
