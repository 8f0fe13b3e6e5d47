#! /usr/bin/env python
"""Character scanner for fixed-width numeric formats

ISO 8601 representations are runs of fixed-width ASCII digit fields
with single character designators and separators between them, so the
scanner only needs to look at one character at a time and read digit
fields of a known width."""


class ParserError(ValueError):

    """Raised by :class:`BasicParser` when a field can't be scanned

    Only the position is recorded, the caller knows which field it asked
    for and is expected to translate the error into one of its own."""

    def __init__(self, production, pos):
        #: the index in the source where *production* was expected
        self.pos = pos
        ValueError.__init__(self, "expected %s at [%i]" % (production, pos))


class BasicParser(object):

    """Scans a character string one character at a time

    source
        A character string, binary data is not supported.

    As in other parsers of this style, match\\_* methods test the
    current position without moving, parse\\_* methods move past
    whatever they return (returning None, and not moving, if there is
    nothing to parse) and require\\_* methods raise
    :class:`ParserError` instead of returning None.

    Parsers keep their own position so create one per string."""

    #: the only characters treated as digits
    digits = "0123456789"

    def __init__(self, source):
        if not isinstance(source, str):
            raise TypeError("BasicParser requires a character string")
        self.src = source       #: the string being parsed
        self.pos = 0            #: the index of the current character
        self.the_char = None    #: the current character, None at the end
        self.setpos(0)

    def setpos(self, new_pos):
        """Moves the parser to index *new_pos* of the source

        Used to rewind after a failed attempt at one form so another
        can be tried from the same place."""
        self.pos = new_pos
        if new_pos < len(self.src):
            self.the_char = self.src[new_pos]
        else:
            self.the_char = None

    def next_char(self):
        """Moves the parser on by one character"""
        self.setpos(self.pos + 1)

    def remaining(self):
        """Returns the number of characters not yet parsed"""
        return max(0, len(self.src) - self.pos)

    def peek(self, nchars):
        """Returns up to *nchars* characters from the current position"""
        return self.src[self.pos:self.pos + nchars]

    def match_end(self):
        return self.the_char is None

    def match_one(self, match_chars):
        """True if the current character is one of *match_chars*"""
        return self.the_char is not None and self.the_char in match_chars

    def parse_one(self, match_chars):
        """Parses one of *match_chars*, returning it or None"""
        if self.match_one(match_chars):
            result = self.the_char
            self.next_char()
            return result
        return None

    def match_digit(self):
        return self.match_one(self.digits)

    def parse_digit_run(self):
        """Parses all the digits at the current position

        Returns them as a string, which is empty if the current
        character is not a digit."""
        start = self.pos
        while self.match_digit():
            self.next_char()
        return self.src[start:self.pos]

    def require_fixed_digits(self, ndigits, production):
        """Parses a field of exactly *ndigits* digits, returning its value

        Raises :class:`ParserError` and leaves the parser where it was
        if there are fewer than *ndigits* digits at the current
        position."""
        field = self.peek(ndigits)
        if len(field) < ndigits or field.strip(self.digits):
            raise ParserError(production, self.pos)
        self.setpos(self.pos + ndigits)
        return int(field)
