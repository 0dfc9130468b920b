# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
from suffixindex.repeats import (count_distinct_substrings,
                                 lcp_intervals,
                                 longest_repeated_substring)
from suffixindex.search import bounds, locate
from suffixindex.suffix_array import lcp_array, suffix_array
from suffixindex.utils import to_code_units

class SuffixIndex:
    '''Suffix array and lcp array over one text. Both are built when
    the index is created and never change afterwards.
    '''
    def __init__(self, text):
        self.text = text
        self.seq = to_code_units(text)
        self.sa = suffix_array(self.seq)
        self.lcp = lcp_array(self.seq, self.sa)

    def __len__(self):
        return len(self.seq)

    def search(self, pattern):
        return locate(self.seq, self.sa, to_code_units(pattern))

    def range(self, pattern):
        return bounds(self.seq, self.sa, to_code_units(pattern))

    def find_all(self, pattern):
        lo, hi = self.range(pattern)
        return sorted(self.sa[lo:hi])

    def count(self, pattern):
        lo, hi = self.range(pattern)
        return hi - lo

    def longest_repeat(self):
        return longest_repeated_substring(self.seq, self.sa, self.lcp)

    def repeats(self, min_len = 1):
        '''Yields (length, starts) for every maximal group of suffixes
        sharing a prefix of at least min_len code units.'''
        for c, lb, rb in lcp_intervals(self.lcp):
            if c >= min_len:
                yield c, sorted(self.sa[lb:rb + 1])

    def n_distinct_substrings(self):
        return count_distinct_substrings(self.seq, self.lcp)

    def suffix(self, i):
        return self.text[self.sa[i]:]
