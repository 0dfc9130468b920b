# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
from suffixindex.index import SuffixIndex
from suffixindex.repeats import longest_repeated_substring
from suffixindex.search import find_all, pattern_range, search_pattern
from suffixindex.suffix_array import lcp_array, suffix_array
from suffixindex.utils import InvalidInput
