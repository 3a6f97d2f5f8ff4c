r"""Lexical analysis for pure lambda calculus: turns source text into a stream of tokens.

The token grammar, using '\' in place of 'λ' so that sources stay ASCII:

```
<lambda>     ::= "\"
<dot>        ::= "."
<lparen>     ::= "("
<rparen>     ::= ")"
<equals>     ::= "="
<identifier> ::= <start> <continue>*   ; <start> is any character that isn't a symbol or whitespace (*)
                                       ; <continue> is an ASCII letter or digit
<skip>       ::= " " | "\r" | "\n" | "\t"
```

Application has no token of its own: it is juxtaposition, so `f x` is just two Identifiers separated by a skip.

(*) Identifiers may start with punctuation or non-ASCII characters (`$x`, `λ`, `+1`), but only continue with ASCII
alphanumerics. `+1` is a single Identifier while `a+1` is two: `a` and `+1`.
"""

import logging
from dataclasses import dataclass

from lclex.lang.error import GenericException
from lclex.pure.source import Source


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """Superclass of all tokens. Tokens are plain values: equal iff they are the same kind with the same text."""

    def __str__(self):
        return ""


class Lambda(Token):
    def __str__(self):
        return "\\"


class Dot(Token):
    def __str__(self):
        return "."


class LParen(Token):
    def __str__(self):
        return "("


class RParen(Token):
    def __str__(self):
        return ")"


class Equals(Token):
    def __str__(self):
        return "="


@dataclass(frozen=True)
class Identifier(Token):
    """Variable or binder name, carrying the text it was scanned from."""
    text: str

    def __str__(self):
        return self.text


class EndOfInput(Token):
    """Terminal token. Once the source is exhausted, every call to Lexer.get_token returns it."""


class Lexer:
    """Single-pass lexer over one Source. Holds no state of its own: everything is driven by the cursor position."""
    SYMBOLS = {
        "\\": Lambda,
        ".": Dot,
        "(": LParen,
        ")": RParen,
        "=": Equals,
    }
    WHITESPACE = " \r\n\t"

    def __init__(self, source):
        """source can either be a Source or raw text."""
        if isinstance(source, str):
            source = Source(source)
        elif not isinstance(source, Source):
            raise GenericException("expected Source or source text, got '{}'", type(source).__name__,
                                   internal=True)

        self.source = source

    @staticmethod
    def is_identifier_start(char):
        """Whether char begins an Identifier. Anything that isn't a symbol or whitespace does."""
        return char not in Lexer.SYMBOLS and char not in Lexer.WHITESPACE

    @staticmethod
    def is_identifier_continue(char):
        """Whether char can continue an Identifier: ASCII letters and digits only."""
        return char.isascii() and char.isalnum()

    def is_finished(self):
        """Whether the lexer has reached its terminal state."""
        return self.source.is_finished()

    def get_token(self):
        """Returns the next token, skipping whitespace. Returns EndOfInput once the source is exhausted, and keeps
        returning it on every subsequent call.
        """
        while not self.is_finished():
            token = self.scan()
            if token is not None:
                return token

        logger.debug("end of input at line %d, column %d", self.source.line, self.source.column)
        return EndOfInput()

    def scan(self):
        """Scans a single lexeme. Returns None for skipped whitespace or if the source is exhausted, so callers
        should normally use get_token instead.
        """
        self.source.reset()

        char = self.source.advance()
        if char is None:
            return None

        if char in Lexer.SYMBOLS:
            return Lexer.SYMBOLS[char]()
        if Lexer.is_identifier_start(char):
            return self._identifier()
        return None  # whitespace

    def _identifier(self):
        """Consumes the rest of an Identifier whose first character has already been read."""
        while True:
            char = self.source.peek()
            if char is None or not Lexer.is_identifier_continue(char):
                break
            self.source.advance()

        return Identifier(self.source.extract())

    def __iter__(self):
        """Yields tokens up to (but not including) EndOfInput."""
        while True:
            token = self.get_token()
            if isinstance(token, EndOfInput):
                return
            yield token


def tokenize(text):
    """Returns every token in text, terminated by a single EndOfInput."""
    return list(Lexer(text)) + [EndOfInput()]
