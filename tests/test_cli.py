import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from watex.__main__ import main


class TestCLI(unittest.TestCase):
    def run_main(self, argv, stdin=None):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            if stdin is None:
                code = main(argv)
            else:
                with mock.patch('sys.stdin', io.TextIOWrapper(io.BytesIO(stdin), encoding='utf-8')):
                    code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def write_source(self, data):
        if isinstance(data, str):
            data = data.encode('utf-8')
        fd, path = tempfile.mkstemp(suffix='.tex')
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        self.addCleanup(os.remove, path)
        return path

    def test_prints_tokens(self):
        path = self.write_source("\\alpha{#1}")
        code, out, err = self.run_main([path])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "1:1\tToken(CONTROL, 'alpha')",
            "1:7\tToken(BRACE, LEFT)",
            "1:8\tToken(ARG, 1)",
            "1:10\tToken(BRACE, RIGHT)",
        ])
        self.assertEqual(err, "")

    def test_reads_stdin(self):
        code, out, _ = self.run_main([], stdin=b"x\n&")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "1:1\tToken(CHAR, 'x')",
            "1:2\tToken(WHITESPACE, '\\n')",
            "2:1\tToken(AMPERSAND)",
        ])

    def test_reports_errors(self):
        path = self.write_source("x # y")
        code, out, err = self.run_main([path])
        self.assertEqual(code, 0)
        self.assertIn("1:3\tToken(ERROR, IllegalCharacter('#'))", out)
        self.assertIn("x # y\n  ^ Illegal character '#'\n", err)

    def test_strict(self):
        path = self.write_source("#")
        code, _, _ = self.run_main([path, '--strict'])
        self.assertEqual(code, 1)

        path = self.write_source("#1")
        code, _, _ = self.run_main([path, '--strict'])
        self.assertEqual(code, 0)

    def test_carriage_return_kept_from_file(self):
        path = self.write_source(b"a\r#")
        code, out, err = self.run_main([path])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "1:1\tToken(CHAR, 'a')",
            "1:2\tToken(WHITESPACE, '\\r')",
            "1:3\tToken(ERROR, IllegalCharacter('#'))",
        ])
        self.assertIn("a\r#\n  ^ Illegal character '#'\n", err)

    def test_carriage_return_kept_from_stdin(self):
        code, out, _ = self.run_main([], stdin=b"x\r\n&")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "1:1\tToken(CHAR, 'x')",
            "1:2\tToken(WHITESPACE, '\\r\\n')",
            "2:1\tToken(AMPERSAND)",
        ])

    def test_invalid_utf8_file(self):
        path = self.write_source(b"x\xff#")
        code, out, _ = self.run_main([path])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")

    def test_invalid_utf8_stdin(self):
        code, out, _ = self.run_main([], stdin=b"x\xff#")
        self.assertEqual(code, 2)
        self.assertEqual(out, "")

    def test_missing_file(self):
        code, out, _ = self.run_main([os.path.join(tempfile.gettempdir(), 'does-not-exist.tex')])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")


if __name__ == '__main__':
    unittest.main()
