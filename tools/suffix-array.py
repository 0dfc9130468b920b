# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
'''
Suffix array tool
=================
Prints the suffix array and lcp array of a text and searches it for a
pattern.

Usage:
    suffix-array.py [options] <text> [<pattern>]
    suffix-array.py [options] --file=<path> [<pattern>]

Options:
    -h --help              show this screen
    -v --verbose           print more output
    --all                  print all occurrences of the pattern
    --file=<path>          read the text from a file
    --max-width=<int>      truncate suffixes to this width [default: 40]
'''
from docopt import docopt
from suffixindex.index import SuffixIndex
from suffixindex.params import Params
from suffixindex.utils import SP, from_code_units, print_term_table

def print_index(index, params):
    n = len(index)
    if n == 0:
        print('Empty text.')
        return
    lcp = index.lcp + [None]
    rows = [(i, index.sa[i], lcp[i],
             params.truncate(from_code_units(index.seq[index.sa[i]:])))
            for i in range(n)]
    row_fmt = [
        '%3d',
        '%3d',
        lambda x: '-' if x is None else '%d' % x,
        '%s'
    ]
    header = ['Rank', 'Index', 'LCP', 'Suffix']
    print_term_table(row_fmt, rows, header, 'rrrl')

def main():
    args = docopt(__doc__, version = 'Suffix array tool 1.0')
    SP.enabled = args['--verbose']
    params = Params.from_docopt_args(args)

    index = SuffixIndex(params.text)
    print_index(index, params)

    start, length = index.longest_repeat()
    if length > 0:
        sub = from_code_units(index.seq[start:start + length])
        print('Longest repeat "%s" at index %d.'
              % (params.truncate(sub), start))
    SP.print('%d distinct substrings.', index.n_distinct_substrings())

    pattern = params.pattern
    if pattern is None:
        return
    if params.find_all:
        hits = index.find_all(pattern)
        if hits:
            print('Pattern found at indices %s' % ', '.join(map(str, hits)))
        else:
            print('Pattern not found')
    else:
        pos = index.search(pattern)
        if pos is not None:
            print('Pattern found at index %d' % pos)
        else:
            print('Pattern not found')

if __name__ == '__main__':
    main()
