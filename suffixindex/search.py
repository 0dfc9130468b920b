# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Binary searches over suffix arrays. Suffixes are compared with the
# pattern only up to the pattern's length, like strncmp.
from suffixindex.utils import to_code_units

def compare_prefix(seq, start, pat):
    '''Returns -1, 0 or 1 if pat is less than, equal to or greater
    than the suffix at start truncated to len(pat).'''
    prefix = seq[start:start + len(pat)]
    if pat == prefix:
        return 0
    return -1 if pat < prefix else 1

def locate(seq, sa, pat):
    if not pat:
        return sa[0] if len(sa) else None
    lo, hi = 0, len(sa) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        res = compare_prefix(seq, sa[mid], pat)
        if res == 0:
            return sa[mid]
        if res < 0:
            hi = mid - 1
        else:
            lo = mid + 1
    return None

def bounds(seq, sa, pat):
    m = len(pat)
    lo, hi = 0, len(sa)
    while lo < hi:  # like bisect.bisect_left
        mid = (lo + hi) // 2
        i = sa[mid]
        if seq[i:i + m] < pat:
            lo = mid + 1
        else:
            hi = mid
    start = lo
    hi = len(sa)
    while lo < hi:  # like bisect.bisect_right
        mid = (lo + hi) // 2
        i = sa[mid]
        if pat < seq[i:i + m]:
            hi = mid
        else:
            lo = mid + 1
    return start, lo

def search_pattern(text, sa, pattern):
    '''Returns the text position of one occurrence of pattern or None
    if there is none. Which occurrence is returned is unspecified.
    '''
    return locate(to_code_units(text), sa, to_code_units(pattern))

def pattern_range(text, sa, pattern):
    '''Returns the half-open range of positions in sa whose suffixes
    start with pattern.'''
    return bounds(to_code_units(text), sa, to_code_units(pattern))

def find_all(text, sa, pattern):
    lo, hi = pattern_range(text, sa, pattern)
    return sorted(sa[lo:hi])
