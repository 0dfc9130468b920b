# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from pytest import raises
from suffixindex.suffix_array import suffix_array
from suffixindex.utils import (InvalidInput, find_subseq,
                               from_code_units, to_code_units)

def test_to_code_units():
    assert to_code_units('ab') == [97, 98]
    assert to_code_units(b'ab') == [97, 98]
    assert to_code_units(bytearray(b'ab')) == [97, 98]
    assert to_code_units((0, 255)) == [0, 255]
    assert to_code_units('\xe9') == [233]
    assert from_code_units([97, 98]) == 'ab'

def test_invalid_input():
    for bad in ['ā', [256], [-1], ['a'], [1.0], 5]:
        with raises(InvalidInput):
            to_code_units(bad)
    with raises(ValueError):
        suffix_array('€')

def test_find_subseq():
    assert list(find_subseq('banana', 'ana')) == [1, 3]
    assert list(find_subseq('banana', 'x')) == []
