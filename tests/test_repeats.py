# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
from random import Random
from suffixindex.repeats import (count_distinct_substrings,
                                 lcp_intervals,
                                 longest_repeated_substring)
from suffixindex.suffix_array import lcp_array, suffix_array

def test_lcp_intervals():
    lcp = lcp_array('banana', suffix_array('banana'))
    assert list(lcp_intervals(lcp)) == [(3, 1, 2), (1, 0, 2), (2, 4, 5)]
    assert list(lcp_intervals([])) == []
    assert list(lcp_intervals([0, 0])) == []

def test_longest_repeated_substring():
    examples = [
        ('', (0, 0)),
        ('a', (0, 0)),
        ('abc', (0, 0)),
        ('banana', (3, 3)),
        ('ABABBAB', (4, 3)),
        ('aaaa', (1, 3))
        ]
    for seq, res in examples:
        assert longest_repeated_substring(seq) == res

def test_longest_repeated_substring_occurs_twice():
    rnd = Random(17)
    for _ in range(40):
        n = rnd.randrange(2, 100)
        text = ''.join(rnd.choice('abc') for _ in range(n))
        start, length = longest_repeated_substring(text)
        sub = text[start:start + length]
        assert length == max(lcp_array(text, suffix_array(text)))
        assert text.find(sub) != text.rfind(sub)

def test_count_distinct_substrings():
    assert count_distinct_substrings('') == 0
    assert count_distinct_substrings('banana') == 15
    rnd = Random(3)
    for _ in range(20):
        n = rnd.randrange(0, 40)
        text = ''.join(rnd.choice('ab') for _ in range(n))
        subs = {text[i:j] for i in range(n) for j in range(i + 1, n + 1)}
        assert count_distinct_substrings(text) == len(subs)
