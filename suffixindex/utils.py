# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Text normalization, errors and printing helpers.
from termtables import to_string

class StructuredPrinter:
    def __init__(self, enabled):
        self.indent = 0
        self.enabled = enabled

    def print_indented(self, text):
        if self.enabled:
            print(' ' * self.indent + text)

    def header(self, name, fmt = None, args = None):
        if fmt is not None:
            self.print_indented('* %s %s' % (name, fmt % args))
        else:
            self.print_indented('* %s' % name)
        self.indent += 2

    def print(self, fmt, args = None):
        if args is not None:
            s = fmt % args
        else:
            s = str(fmt)
        self.print_indented(s)

    def leave(self):
        self.indent -= 2
        assert self.indent >= 0

SP = StructuredPrinter(False)

class InvalidInput(ValueError):
    pass

def to_code_units(text):
    '''Converts text to a list of 8-bit code units. Accepts bytes,
    strings with only latin-1 characters and sequences of small ints.
    '''
    if isinstance(text, (bytes, bytearray)):
        return list(text)
    if isinstance(text, str):
        units = [ord(ch) for ch in text]
    else:
        try:
            units = list(text)
        except TypeError:
            raise InvalidInput('%r is not a sequence!' % (text,))
    for u in units:
        if type(u) != int or not 0 <= u < 256:
            raise InvalidInput('%r is not an 8-bit code unit!' % (u,))
    return units

def from_code_units(units):
    return ''.join(chr(u) for u in units)

def find_subseq(seq, subseq):
    '''Find indices to occurrences of subseq in seq. Oddly enough this
    function doesn't exist in Python's standard library.
    '''
    l = len(subseq)
    for i in range(len(seq) - l + 1):
        if seq[i:i+l] == subseq:
            yield i

def print_term_table(row_fmt, rows, header, alignment):
    def format_col(fmt, col):
        if callable(fmt):
            return fmt(col)
        return fmt % col
    rows = [[format_col(*e) for e in zip(row_fmt, row)] for row in rows]
    s = to_string(rows,
                  header = header,
                  padding = (0, 0, 0, 0),
                  alignment = alignment,
                  style = "            -- ")
    m = len(s.splitlines()[1]) - 2
    print(' ' + '=' * m)
    print(s)
    print(' ' + '=' * m)
