from wasmtx.config import C, InvalidInputError, RequiredFieldError
from wasmtx.address import verify_address
from wasmtx.chain.access import AccessConfig
from wasmtx.wasm import is_gzip
from base64 import b64encode
from urllib.parse import urlparse
import json
import re

re_builder = re.compile(r'[a-z0-9][a-z0-9._-]*[a-z0-9](/[a-z0-9][a-z0-9._-]*[a-z0-9])+:[a-zA-Z0-9_][a-zA-Z0-9_.-]*')


def validate_wasm_code(b):
    if not b:
        raise RequiredFieldError('wasm byte code is required', 'wasm_byte_code')
    if len(b) > C.MAX_WASM_SIZE:
        raise InvalidInputError('cannot be longer than {} bytes'.format(C.MAX_WASM_SIZE), 'wasm_byte_code')
    if not is_gzip(b):
        raise InvalidInputError('wasm byte code must be gzip compressed', 'wasm_byte_code')


def validate_source(source):
    if source:
        u = urlparse(source)
        if not u.scheme or not u.netloc:
            raise InvalidInputError('not an absolute url: {}'.format(source), 'source')
        if u.scheme != 'https':
            raise InvalidInputError('must use https', 'source')


def validate_builder(builder):
    if builder:
        if len(builder) > C.MAX_BUILDER_SIZE:
            raise InvalidInputError('cannot be longer than {} characters'.format(C.MAX_BUILDER_SIZE), 'builder')
        if not re_builder.fullmatch(builder):
            raise InvalidInputError('invalid tag supplied for builder', 'builder')


def validate_label(label):
    if not label:
        raise RequiredFieldError('label is required on all contracts', 'label')
    if len(label) > C.MAX_LABEL_SIZE:
        raise InvalidInputError('cannot be longer than {} characters'.format(C.MAX_LABEL_SIZE), 'label')


def validate_funds(coins, field):
    if not coins.is_valid():
        raise InvalidInputError('invalid coins {}'.format(coins), field)


def validate_raw_msg(b, field):
    if b is None:
        raise RequiredFieldError('json message is required', field)


def raw_json_info(b):
    """embed raw json, keep as text when it does not parse"""
    try:
        return json.loads(b)
    except ValueError:
        return b.decode(errors='replace')


class Msg(object):
    __slots__ = ("sender",)
    msg_type = None

    def __repr__(self):
        return "<{} {}>".format(self.__class__.__name__, self.sender)

    def __eq__(self, other):
        if type(self) is type(other):
            return self.getinfo() == other.getinfo()
        return False

    def __hash__(self):
        return hash(self.get_sign_bytes())

    def route(self):
        return C.ROUTER_KEY

    def type(self):
        return self.msg_type

    def validate_basic(self):
        raise NotImplementedError

    def value(self) -> dict:
        raise NotImplementedError

    def getinfo(self):
        return {'type': C.msg_type2name[self.msg_type], 'value': self.value()}

    def get_sign_bytes(self) -> bytes:
        return json.dumps(self.getinfo(), sort_keys=True, separators=(',', ':')).encode()

    def get_signers(self):
        return [self.sender]


class MsgStoreCode(Msg):
    __slots__ = ("wasm_byte_code", "source", "builder", "instantiate_permission")
    msg_type = C.MSG_STORE_CODE

    def __init__(self, sender, wasm_byte_code, source='', builder='', instantiate_permission=None):
        self.sender = sender
        self.wasm_byte_code: bytes = wasm_byte_code
        self.source: str = source
        self.builder: str = builder
        self.instantiate_permission: AccessConfig = instantiate_permission

    def validate_basic(self):
        verify_address(self.sender, 'sender')
        validate_wasm_code(self.wasm_byte_code)
        validate_source(self.source)
        validate_builder(self.builder)
        if self.instantiate_permission is not None:
            self.instantiate_permission.validate_basic()

    def value(self):
        return {
            'sender': self.sender.string,
            'wasm_byte_code': b64encode(self.wasm_byte_code).decode(),
            'source': self.source,
            'builder': self.builder,
            'instantiate_permission': self.instantiate_permission.getinfo() if self.instantiate_permission else None,
        }


class MsgInstantiateContract(Msg):
    __slots__ = ("code_id", "label", "init_msg", "init_funds", "admin")
    msg_type = C.MSG_INSTANTIATE

    def __init__(self, sender, code_id, label, init_msg, init_funds, admin=None):
        self.sender = sender
        self.code_id: int = code_id
        self.label: str = label
        self.init_msg: bytes = init_msg
        self.init_funds = init_funds
        self.admin = admin

    def validate_basic(self):
        verify_address(self.sender, 'sender')
        if self.code_id == 0:
            raise RequiredFieldError('code_id is required', 'code_id')
        validate_label(self.label)
        validate_funds(self.init_funds, 'amount')
        if self.admin is not None:
            verify_address(self.admin, 'admin')
        validate_raw_msg(self.init_msg, 'init_msg')

    def value(self):
        return {
            'sender': self.sender.string,
            'admin': self.admin.string if self.admin else '',
            'code_id': str(self.code_id),
            'label': self.label,
            'init_msg': raw_json_info(self.init_msg),
            'init_funds': self.init_funds.getinfo(),
        }


class MsgExecuteContract(Msg):
    __slots__ = ("contract", "msg", "sent_funds")
    msg_type = C.MSG_EXECUTE

    def __init__(self, sender, contract, msg, sent_funds):
        self.sender = sender
        self.contract = contract
        self.msg: bytes = msg
        self.sent_funds = sent_funds

    def validate_basic(self):
        verify_address(self.sender, 'sender')
        verify_address(self.contract, 'contract')
        validate_funds(self.sent_funds, 'amount')
        validate_raw_msg(self.msg, 'msg')

    def value(self):
        return {
            'sender': self.sender.string,
            'contract': self.contract.string,
            'msg': raw_json_info(self.msg),
            'sent_funds': self.sent_funds.getinfo(),
        }


class MsgMigrateContract(Msg):
    __slots__ = ("contract", "code_id", "migrate_msg")
    msg_type = C.MSG_MIGRATE

    def __init__(self, sender, contract, code_id, migrate_msg):
        self.sender = sender
        self.contract = contract
        self.code_id: int = code_id
        self.migrate_msg: bytes = migrate_msg

    def validate_basic(self):
        if self.code_id == 0:
            raise RequiredFieldError('code_id is required', 'code_id')
        verify_address(self.sender, 'sender')
        verify_address(self.contract, 'contract')
        validate_raw_msg(self.migrate_msg, 'migrate_msg')

    def value(self):
        return {
            'sender': self.sender.string,
            'contract': self.contract.string,
            'code_id': str(self.code_id),
            'msg': raw_json_info(self.migrate_msg),
        }


class MsgUpdateAdmin(Msg):
    __slots__ = ("new_admin", "contract")
    msg_type = C.MSG_UPDATE_ADMIN

    def __init__(self, sender, new_admin, contract):
        self.sender = sender
        self.new_admin = new_admin
        self.contract = contract

    def validate_basic(self):
        verify_address(self.sender, 'sender')
        verify_address(self.contract, 'contract')
        verify_address(self.new_admin, 'new_admin')
        if self.sender == self.new_admin:
            raise InvalidInputError('new admin is the same as the old', 'new_admin')

    def value(self):
        return {
            'sender': self.sender.string,
            'new_admin': self.new_admin.string,
            'contract': self.contract.string,
        }


class MsgClearAdmin(Msg):
    __slots__ = ("contract",)
    msg_type = C.MSG_CLEAR_ADMIN

    def __init__(self, sender, contract):
        self.sender = sender
        self.contract = contract

    def validate_basic(self):
        verify_address(self.sender, 'sender')
        verify_address(self.contract, 'contract')

    def value(self):
        return {
            'sender': self.sender.string,
            'contract': self.contract.string,
        }


__all__ = [
    "Msg",
    "MsgStoreCode",
    "MsgInstantiateContract",
    "MsgExecuteContract",
    "MsgMigrateContract",
    "MsgUpdateAdmin",
    "MsgClearAdmin",
    "validate_label",
]
