# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Repeated substrings from the lcp array.
from suffixindex.suffix_array import lcp_array, suffix_array
from suffixindex.utils import to_code_units

def lcp_intervals(lcp):
    '''Generates the lcp intervals (c, lb, rb) of the lcp array. The
    suffixes at positions lb to rb, inclusive, in the suffix array
    share a prefix of length c. Intervals with c = 0 are skipped.
    '''
    # heights[i] is the lcp of the suffixes at i - 1 and i.
    heights = [0] + list(lcp) + [0]
    stack = [(0, 0)]
    for i in range(1, len(heights)):
        c = heights[i]
        lb = i - 1
        while c < stack[-1][0]:
            i_c, lb = stack.pop()
            yield i_c, lb, i - 1
        if c > stack[-1][0]:
            stack.append((c, lb))

def longest_repeated_substring(text, sa = None, lcp = None):
    '''Returns (start, length) of the longest substring occurring at
    least twice in text. (0, 0) if no code unit repeats.
    '''
    seq = to_code_units(text)
    if sa is None:
        sa = suffix_array(seq)
    if lcp is None:
        lcp = lcp_array(seq, sa)
    if not lcp:
        return 0, 0
    best = max(lcp)
    if best == 0:
        return 0, 0
    return sa[lcp.index(best)], best

def count_distinct_substrings(text, lcp = None):
    '''Number of distinct non-empty substrings of text.'''
    seq = to_code_units(text)
    if lcp is None:
        lcp = lcp_array(seq, suffix_array(seq))
    n = len(seq)
    return n * (n + 1) // 2 - sum(lcp)
