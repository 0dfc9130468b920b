# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix arrays by prefix doubling and LCP arrays by Kasai's
# algorithm.
from suffixindex.utils import SP, to_code_units
import numpy as np

# Rank of the block past the end of the text. Must stay below every
# valid rank.
NO_RANK = -1

def sort_ranks(primary, secondary):
    '''Returns the permutation that orders records by (primary,
    secondary). lexsort sorts on its last key first and is stable.
    '''
    return np.lexsort((secondary, primary))

def rerank(primary, secondary):
    '''Assigns dense ranks to sorted records. A record gets the same
    rank as its predecessor iff both parts of their keys are equal.
    '''
    changed = np.logical_or(np.diff(primary), np.diff(secondary))
    ranks = np.empty(len(primary), dtype = np.int64)
    ranks[0] = 0
    ranks[1:] = np.cumsum(changed)
    return ranks

def suffix_array(text):
    seq = to_code_units(text)
    n = len(seq)
    if n <= 1:
        return list(range(n))

    units = np.array(seq, dtype = np.int64)
    index = np.arange(n)
    primary = units
    secondary = np.full(n, NO_RANK, dtype = np.int64)
    secondary[:-1] = units[1:]

    order = sort_ranks(primary, secondary)
    index, primary, secondary = index[order], primary[order], secondary[order]

    SP.header('SUFFIX ARRAY', '%d code units', n)
    k = 4
    while k < 2 * n:
        primary = rerank(primary, secondary)
        # Ranks are dense from 0 so the sentinel stays below them.
        assert primary[0] == 0 > NO_RANK
        n_ranks = primary[-1] + 1
        SP.print('Block length %d, %d distinct ranks.', (k // 2, n_ranks))
        if n_ranks == n:
            break

        # Position of each suffix in the sorted order.
        pos = np.empty(n, dtype = np.int64)
        pos[index] = np.arange(n)

        nxt = index + k // 2
        has_next = nxt < n
        secondary = np.full(n, NO_RANK, dtype = np.int64)
        secondary[has_next] = primary[pos[nxt[has_next]]]

        order = sort_ranks(primary, secondary)
        index = index[order]
        primary = primary[order]
        secondary = secondary[order]
        k *= 2
    SP.leave()
    return index.tolist()

def rank_array(sa):
    rank = [0] * len(sa)
    for i, el in enumerate(sa):
        rank[el] = i
    return rank

def lcp_array(text, sa):
    '''Returns the lcp array. Element i is the length of the longest
    common prefix of the suffixes at sa[i] and sa[i + 1], so there are
    n - 1 elements.
    '''
    seq = to_code_units(text)
    n = len(sa)
    assert n == len(seq)
    lcp = [0] * n
    rank = rank_array(sa)
    k = 0
    for i, rank_el in enumerate(rank):
        if rank_el == n - 1:
            k = 0
            continue
        j = sa[rank_el + 1]
        while i + k < n and j + k < n and seq[i + k] == seq[j + k]:
            k += 1
        lcp[rank_el] = k
        if k > 0:
            k -= 1
    return lcp[:-1]
