from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken


class TosunSyntaxError(Exception):
    """Raised when an input line does not match the Tosun grammar.

    Wraps the underlying Lark error and keeps the source text so the
    REPL can show where parsing stopped.
    """
    def __init__(self, source: str, error: UnexpectedInput):
        self.source = source
        self.error = error
        self.line = getattr(error, 'line', None)
        self.column = getattr(error, 'column', None)
        super().__init__(self.summary())

    def summary(self) -> str:
        err = self.error
        if isinstance(err, UnexpectedEOF):
            return 'unexpected end of input'
        if isinstance(err, UnexpectedCharacters):
            return f"unexpected character {err.char!r} at line {err.line}, column {err.column}"
        if isinstance(err, UnexpectedToken):
            if err.token.type == '$END':
                return 'unexpected end of input'
            return f"unexpected {err.token.value!r} at line {err.line}, column {err.column}"
        return str(err)

    def describe(self) -> str:
        """Return the summary followed by a caret marking the error position."""
        text = f"Syntax error: {self.summary()}"
        pos = getattr(self.error, 'pos_in_stream', None)
        if pos is None or pos < 0 or not self.source:
            return text
        context = self.error.get_context(self.source).rstrip('\n')
        return text + '\n' + context
