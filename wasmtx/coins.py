from wasmtx.config import C, InvalidInputError
from collections import defaultdict
import re

re_denom = re.compile(r'[a-z][a-z0-9]{2,15}')
re_coin = re.compile(r'([0-9]+)\s*([a-z][a-z0-9]{2,15})')


class Coins(defaultdict):
    """denom -> amount, one entry per denomination"""
    __slots__ = tuple()

    def __init__(self, denom=None, amount=None, coins=None):
        super().__init__(int)
        if denom is not None and amount is not None:
            self[denom] = amount
        elif coins and isinstance(coins, dict):
            for k, v in coins.items():
                self[k] = v

    def __repr__(self):
        return "<Coins {}>".format(str(self) or 'empty')

    def __str__(self):
        return ','.join('{}{}'.format(amount, denom) for denom, amount in self)

    def __iter__(self):
        yield from sorted(self.items())

    def copy(self):
        return Coins(coins=dict(self))

    def is_valid(self):
        for denom, amount in self.items():
            if not isinstance(denom, str) or not re_denom.fullmatch(denom):
                return False
            if not isinstance(amount, int) or amount <= 0:
                return False
            if amount.bit_length() > C.MAX_AMOUNT_BITS:
                return False
        return True

    def getinfo(self):
        return [{'denom': denom, 'amount': str(amount)} for denom, amount in self]


def parse_coins(string, field='amount') -> Coins:
    """parse `<amount><denom>[,<amount><denom>...]`, empty string is no funds"""
    coins = Coins()
    string = (string or '').strip()
    if len(string) == 0:
        return coins
    for item in string.split(','):
        item = item.strip()
        match = re_coin.fullmatch(item)
        if match is None:
            raise InvalidInputError('invalid coin expression: {}'.format(item or string), field)
        amount, denom = int(match.group(1)), match.group(2)
        if amount == 0:
            raise InvalidInputError('amount must be positive: {}'.format(item), field)
        if amount.bit_length() > C.MAX_AMOUNT_BITS:
            raise InvalidInputError('amount is too large: {}'.format(item), field)
        if denom in coins:
            raise InvalidInputError('duplicate denomination {}'.format(denom), field)
        coins[denom] = amount
    return coins


__all__ = [
    "Coins",
    "parse_coins",
]
