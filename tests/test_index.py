# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
from suffixindex.index import SuffixIndex

def test_banana():
    index = SuffixIndex('banana')
    assert len(index) == 6
    assert index.sa == [5, 3, 1, 0, 4, 2]
    assert index.lcp == [1, 3, 0, 0, 2]
    assert index.search('ana') in (1, 3)
    assert index.search('xyz') is None
    assert index.find_all('ana') == [1, 3]
    assert index.count('a') == 3
    assert index.count('xyz') == 0
    assert index.longest_repeat() == (3, 3)
    assert index.n_distinct_substrings() == 15
    assert index.suffix(0) == 'a'
    assert index.suffix(3) == 'banana'

def test_repeats():
    index = SuffixIndex('banana')
    assert list(index.repeats(2)) == [(3, [1, 3]), (2, [2, 4])]

def test_empty():
    index = SuffixIndex(b'')
    assert len(index) == 0
    assert index.sa == []
    assert index.lcp == []
    assert index.search(b'a') is None
    assert index.find_all(b'a') == []
    assert index.longest_repeat() == (0, 0)
