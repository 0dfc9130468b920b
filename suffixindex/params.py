# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
from pathlib import Path

class Params:
    @classmethod
    def from_docopt_args(cls, args):
        file_path = args['--file']
        if file_path is not None:
            text = Path(file_path).read_bytes()
        else:
            text = args['<text>']
        max_width = int(args['--max-width'])
        if max_width < 1:
            raise ValueError('--max-width must be positive!')
        return cls(text, args['<pattern>'], args['--all'], max_width)

    def __init__(self, text, pattern, find_all, max_width):
        self.text = text
        self.pattern = pattern
        self.find_all = find_all
        self.max_width = max_width

    def truncate(self, suffix):
        if len(suffix) > self.max_width:
            return suffix[:self.max_width - 1] + '…'
        return suffix
