"""
Location tracking needed for rich error reporting.
"""

__author__ = "Eldar Abusalimov"
__date__ = "2015-06-08"

from functools import cached_property


class Fileinfo(object):
    """Provides data necessary for lines and column lookup."""

    @cached_property
    def line_table(self):
        return self.source.splitlines(True)

    @cached_property
    def offset_table(self):
        """Line offsets indexed by line numbers, plus the end offset."""
        offset = 0
        table = [0]
        for line in self.line_table:
            offset += len(line)
            table.append(offset)
        return table

    def __init__(self, source, name=None):
        super(Fileinfo, self).__init__()
        self.source = source
        self.name = name

    def get_line(self, lineno):
        try:
            return self.line_table[lineno-1]
        except IndexError:
            return ''

    def get_column(self, lineno, offset):
        line_start = self.offset_table[min(lineno-1, len(self.line_table))]
        return offset - line_start + 1


class Location(object):
    """Where a token has been found: file, 1-based line and column."""
    __slots__ = 'fileinfo', 'lineno', 'offset'

    @property
    def filename(self):
        return self.fileinfo.name

    @property
    def line(self):
        return self.fileinfo.get_line(self.lineno)

    @property
    def column(self):
        return self.fileinfo.get_column(self.lineno, self.offset)

    @property
    def syntax_error_tuple(self):
        """4-element tuple suitable to pass to a constructor of SyntaxError."""
        return (self.filename, self.lineno, self.column, self.line)

    def __init__(self, fileinfo, lineno, offset):
        super(Location, self).__init__()
        self.fileinfo = fileinfo
        self.lineno = lineno  # 1-base indexed
        self.offset = offset  # 0-based absolute char offset

    def __iter__(self):
        return iter(self.syntax_error_tuple)

    def __repr__(self):
        return '{0}:{1}:{2}'.format(self.filename or '<string>',
                                    self.lineno, self.column)
