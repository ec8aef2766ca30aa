from wasmtx.config import C, InvalidInputError, RequiredFieldError
from bech32 import bech32_decode, bech32_encode, convertbits


class Address(object):
    """account address, fixed length identifier shown with bech32 prefix"""
    __slots__ = ("hrp", "_identifier")

    def __init__(self, hrp, identifier):
        assert isinstance(identifier, bytes)
        self.hrp: str = hrp
        self._identifier: bytes = identifier

    def __repr__(self):
        return "<Address {}>".format(self.string)

    def __str__(self):
        return self.string

    def __eq__(self, other):
        if isinstance(other, Address):
            return self._identifier == other._identifier
        return False

    def __hash__(self):
        return hash(self._identifier)

    @classmethod
    def from_param(cls, hrp, identifier):
        if len(identifier) != C.ADDR_LEN:
            raise InvalidInputError('incorrect address length (expected: {}, actual: {})'.format(
                C.ADDR_LEN, len(identifier)))
        return cls(hrp, bytes(identifier))

    def identifier(self) -> bytes:
        return self._identifier

    def binary(self) -> bytes:
        return self._identifier

    @property
    def string(self) -> str:
        return bech32_encode(self.hrp, convertbits(self._identifier, 8, 5))


def address_from_bech32(string, hrp=C.BECH32_HRP, field=None) -> Address:
    """decode bech32 string, the prefix must be `hrp`"""
    if not isinstance(string, str) or len(string.strip()) == 0:
        raise RequiredFieldError('empty address string is not allowed', field)
    decoded_hrp, data = bech32_decode(string)[:2]
    if decoded_hrp is None or data is None:
        raise InvalidInputError('decoding bech32 failed: {}'.format(string), field)
    if decoded_hrp != hrp:
        raise InvalidInputError('invalid bech32 prefix; expected {}, got {}'.format(hrp, decoded_hrp), field)
    identifier = convertbits(data, 5, 8, False)
    if identifier is None:
        raise InvalidInputError('invalid bech32 padding: {}'.format(string), field)
    try:
        return Address.from_param(hrp, bytes(identifier))
    except InvalidInputError as e:
        raise InvalidInputError(e.msg, field)


def verify_address(ck, field, hrp=None):
    """raise if address is empty or broken"""
    if ck is None:
        raise RequiredFieldError('address is required', field)
    if not isinstance(ck, Address) or len(ck.identifier()) != C.ADDR_LEN:
        raise InvalidInputError('invalid address {}'.format(ck), field)
    if hrp is not None and ck.hrp != hrp:
        raise InvalidInputError('invalid bech32 prefix; expected {}, got {}'.format(hrp, ck.hrp), field)


__all__ = [
    "Address",
    "address_from_bech32",
    "verify_address",
]
