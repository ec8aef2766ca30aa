from wasmtx.config import InvalidInputError
from wasmtx.coins import *
import pytest
import unittest


def test_parse_single_coin():
    """test simple amount and denom"""
    coins = parse_coins('100uatom')
    assert coins == {'uatom': 100}
    assert str(coins) == '100uatom'
    assert coins.is_valid()


def test_parse_empty():
    """test empty string means no funds"""
    for string in ('', '   ', None):
        coins = parse_coins(string)
        assert len(coins) == 0
        assert coins.is_valid()
        assert coins.getinfo() == []


def test_parse_many_sorted():
    """test rendering is sorted by denom"""
    coins = parse_coins('5ufet, 10uatom')
    assert coins == {'uatom': 10, 'ufet': 5}
    assert str(coins) == '10uatom,5ufet'
    assert coins.getinfo() == [{'denom': 'uatom', 'amount': '10'}, {'denom': 'ufet', 'amount': '5'}]
    assert parse_coins('100 uatom') == {'uatom': 100}


def test_parse_zero_rejected():
    """test amount must be positive"""
    for string in ('0uatom', '0uatom,3ufet', '3ufet, 00uatom'):
        with pytest.raises(InvalidInputError) as e:
            parse_coins(string)
        assert 'positive' in str(e.value)


def test_parse_invalid():
    """test negative and malformed amounts"""
    for string in ('-5uatom', '1.5uatom', '100', 'uatom', '10UATOM', '10u',
                   '10uatom,', '10uatom;5ufet', '10uatom\n5ufet'):
        with pytest.raises(InvalidInputError) as e:
            parse_coins(string)
        assert e.value.field == 'amount'


def test_parse_duplicate_denom():
    """test denomination must be unique"""
    with pytest.raises(InvalidInputError) as e:
        parse_coins('1uatom,2uatom', field='fees')
    assert e.value.field == 'fees'
    assert 'duplicate' in str(e.value)


def test_parse_too_large():
    """test amount over 255bit"""
    assert parse_coins('{}uatom'.format(2 ** 255 - 1)).is_valid()
    with pytest.raises(InvalidInputError):
        parse_coins('{}uatom'.format(2 ** 255))


def test_is_valid():
    """test coins structure check"""
    assert not Coins(denom='uatom', amount=0).is_valid()
    assert not Coins(denom='uatom', amount=-1).is_valid()
    assert not Coins(denom='UA', amount=1).is_valid()
    assert not Coins(denom='uatom\n', amount=1).is_valid()
    assert not Coins(denom='uatom', amount=2 ** 255).is_valid()
    coins = Coins(coins={'uatom': 1, 'ufet': 2})
    copied = coins.copy()
    copied['ufet'] += 1
    assert copied.is_valid()
    assert coins == {'uatom': 1, 'ufet': 2}


if __name__ == "__main__":
    unittest.main()
