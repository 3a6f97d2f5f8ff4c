r"""Character cursor over lambda calculus source text.

The cursor knows nothing about tokens: it only moves a read position forward through the text and keeps track of
where the lexeme currently being scanned began, so that a lexer can consume an arbitrary number of characters and
then pull the whole span out at once:

```
    \x.x y        the lexeme "x" is being scanned
     ^^
     |+- current
     start
```

Invariant: 0 <= start <= current <= len(text).
"""

from lclex.lang.error import GenericException


class Source:
    """Read-only snapshot of a source text plus the window of the lexeme being scanned."""

    def __init__(self, text):
        if not isinstance(text, str):
            raise GenericException("expected source text, got '{}'", type(text).__name__, internal=True)

        self.text = text
        self.start = 0
        self.current = 0

        self.line = 1    # position of current, 1-based
        self.column = 1
        self.start_line = 1
        self.start_column = 1

    def is_finished(self):
        """Whether every character has been read."""
        return self.current >= len(self.text)

    def advance(self):
        """Returns the next character and moves past it, or None if the text is exhausted."""
        if self.is_finished():
            return None

        char = self.text[self.current]
        self.current += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def peek(self):
        """Returns the next character without consuming it, or None if the text is exhausted."""
        if self.is_finished():
            return None
        return self.text[self.current]

    def reset(self):
        """Marks the current position as the start of a new lexeme. Call before scanning each token."""
        self.start = self.current
        self.start_line, self.start_column = self.line, self.column

    def extract(self):
        """Returns the characters consumed since the last reset, or None if the window is invalid."""
        if self.start > self.current or self.current > len(self.text):
            return None
        return self.text[self.start:self.current]

    @property
    def position(self):
        """(line, column) of the start of the current lexeme."""
        return self.start_line, self.start_column

    def __repr__(self):
        return f"Source(start={self.start}, current={self.current}, len={len(self.text)})"
