"""
Line tokenizer for the PageGen DSL.

Splits a single page model line into string tokens. Whitespace separates
tokens unless it is inside a quoted region. Quoting comes in two forms:

- A quote that opens at a token boundary is a *pure* quote: the quote
  characters are stripped and the token ends when the quote closes.
- A quote that opens in the middle of a token is a *partial* quote: the quote
  characters are kept, so locators such as ``//a[@title="Log in"]`` survive
  as one token.

An unterminated quote is not an error; the rest of the line is consumed.
"""

QUOTE_CHARS = ('"', "'")
WHITESPACE_CHARS = (" ", "\t")


class LineLexer:
    """
    Tokenizer for one line of a page model file.

    The lexer walks the trimmed line character by character, keeping a single
    token buffer and the quote character that opened the current quoted
    region, if any.
    """

    def __init__(self, line: str):
        self.text = line.strip()
        self.pos = 0
        self.tokens: list[str] = []
        self.buffer: list[str] = []
        self.quote: str | None = None
        self.partial_quote = False

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def advance(self) -> None:
        """Move to next character."""
        self.pos += 1

    def flush(self) -> None:
        """Emit the buffer as a token and start a new one."""
        self.tokens.append("".join(self.buffer))
        self.buffer = []

    def read_quoted(self, ch: str) -> None:
        """Consume one character inside a quoted region."""
        if ch != self.quote:
            self.buffer.append(ch)
            return
        self.quote = None
        if self.partial_quote:
            self.buffer.append(ch)
            self.partial_quote = False
        else:
            self.flush()

    def open_quote(self, ch: str) -> None:
        """Start a quoted region, pure or partial depending on the buffer."""
        self.quote = ch
        if self.buffer:
            self.buffer.append(ch)
            self.partial_quote = True
        else:
            self.partial_quote = False

    def tokenize(self) -> list[str]:
        """
        Tokenize the whole line.

        Returns:
            Ordered list of tokens
        """
        while (ch := self.current_char()) is not None:
            if self.quote is not None:
                self.read_quoted(ch)
            elif ch in QUOTE_CHARS:
                self.open_quote(ch)
            elif ch in WHITESPACE_CHARS:
                if "".join(self.buffer).strip():
                    self.flush()
            else:
                self.buffer.append(ch)
            self.advance()

        if self.buffer:
            self.flush()
        return self.tokens


def tokenize_line(line: str) -> list[str]:
    """
    Convenience function to tokenize one DSL line.

    Args:
        line: Raw source line

    Returns:
        List of tokens
    """
    return LineLexer(line).tokenize()
