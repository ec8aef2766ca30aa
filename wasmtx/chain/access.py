from wasmtx.config import C, InvalidInputError
from wasmtx.address import Address, address_from_bech32, verify_address
from logging import getLogger
from typing import Optional

log = getLogger('wasmtx')


class AccessConfig(object):
    """who may instantiate a contract from stored code"""
    __slots__ = ("permission", "address")

    def __init__(self, permission, address=None):
        self.permission: int = permission
        self.address: Optional[Address] = address

    def __repr__(self):
        if self.permission == C.ACCESS_ONLY_ADDRESS:
            return "<AccessConfig {} {}>".format(C.access2name[self.permission], self.address)
        return "<AccessConfig {}>".format(C.access2name.get(self.permission, 'UNKNOWN'))

    def __eq__(self, other):
        if isinstance(other, AccessConfig):
            return self.permission == other.permission and self.address == other.address
        return False

    def __hash__(self):
        return hash((self.permission, self.address))

    @classmethod
    def nobody(cls):
        return cls(C.ACCESS_NOBODY)

    @classmethod
    def everybody(cls):
        return cls(C.ACCESS_EVERYBODY)

    @classmethod
    def only_address(cls, address):
        return cls(C.ACCESS_ONLY_ADDRESS, address)

    def validate_basic(self, field='instantiate_permission'):
        if self.permission in (C.ACCESS_NOBODY, C.ACCESS_EVERYBODY):
            if self.address is not None:
                raise InvalidInputError('address not allowed for this access type', field)
        elif self.permission == C.ACCESS_ONLY_ADDRESS:
            verify_address(self.address, field)
        else:
            raise InvalidInputError('unknown access type {}'.format(self.permission), field)

    def getinfo(self):
        return {
            'permission': C.access2name.get(self.permission),
            'address': self.address.string if self.address else '',
        }


def parse_access_config(only_address, everybody, hrp=C.BECH32_HRP) -> Optional[AccessConfig]:
    """the address takes precedence over the everybody flag"""
    if only_address:
        if everybody:
            log.warning("both instantiate-only-address and instantiate-everybody set, use address")
        allowed = address_from_bech32(only_address, hrp, field='instantiate-only-address')
        return AccessConfig.only_address(allowed)
    elif everybody:
        return AccessConfig.everybody()
    else:
        return None


__all__ = [
    "AccessConfig",
    "parse_access_config",
]
