import unittest

from lclex.lang.error import GenericException
from lclex.pure.source import Source


class SourceTestCase(unittest.TestCase):

    def test_init(self):
        should_raise = [None, 3, ["a", "b"], b"abc"]
        for case in should_raise:
            self.assertRaises(GenericException, Source, case)

        cases = {"hello": False, "": True, " ": False}
        for case, expected in cases.items():
            self.assertEqual(expected, Source(case).is_finished(), case)

    def test_advance(self):
        cases = ["hello", "", "\\x.x", "λx.x y", " \t\r\n"]
        for case in cases:
            source = Source(case)
            chars = []
            char = source.advance()
            while char is not None:
                chars.append(char)
                char = source.advance()

            self.assertEqual(case, "".join(chars), case)
            self.assertTrue(source.is_finished(), case)
            self.assertIsNone(source.advance(), case)
            self.assertEqual(len(case), source.current, case)

    def test_peek(self):
        source = Source("ab")
        self.assertEqual("a", source.peek())
        self.assertEqual("a", source.peek())
        self.assertEqual(0, source.current)

        source.advance()
        self.assertEqual("b", source.peek())
        source.advance()
        self.assertIsNone(source.peek())

    def test_extract(self):
        text = "hello world"
        for skip in range(len(text) + 1):
            for count in range(len(text) - skip + 1):
                source = Source(text)
                for _ in range(skip):
                    source.advance()

                source.reset()
                for _ in range(count):
                    source.advance()

                self.assertEqual(text[skip:skip + count], source.extract(), (skip, count))
                self.assertEqual((skip, skip + count), (source.start, source.current))

    def test_extract_invalid_window(self):
        source = Source("abc")
        source.advance()
        source.start = 2
        self.assertIsNone(source.extract())

        source.start, source.current = 0, 4
        self.assertIsNone(source.extract())

    def test_reset(self):
        source = Source("abc")
        source.advance()
        source.advance()
        self.assertEqual("ab", source.extract())

        source.reset()
        self.assertEqual("", source.extract())
        self.assertEqual(2, source.start)

    def test_position(self):
        source = Source("ab\n  cd")
        self.assertEqual((1, 1), source.position)

        while source.peek() != "c":
            source.advance()
        source.reset()

        self.assertEqual((2, 3), source.position)
        self.assertEqual((2, 3), (source.line, source.column))

        source.advance()
        self.assertEqual((2, 3), source.position)
        self.assertEqual((2, 4), (source.line, source.column))

    def test_whitespace_tokenizer(self):
        text = "hello world this\nis some sample text.\n"
        expected = ["hello", "world", "this", "is", "some", "sample", "text."]

        source = Source(text)
        words = []
        while not source.is_finished():
            source.reset()
            if source.advance().isspace():
                continue
            while source.peek() is not None and not source.peek().isspace():
                source.advance()
            words.append(source.extract())

        self.assertEqual(expected, words)


if __name__ == '__main__':
    unittest.main()
