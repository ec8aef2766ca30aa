from typing import Optional


class C:  # Constant
    # module info
    MODULE_NAME = 'wasm'
    ROUTER_KEY = MODULE_NAME

    # magic prefix of payload
    WASM_IDENT = b'\x00\x61\x73\x6d'  # \0asm
    GZIP_IDENT = b'\x1f\x8b\x08'  # gzip with deflate

    # payload kind
    PAYLOAD_RAW = 0
    PAYLOAD_GZIP = 1
    PAYLOAD_UNKNOWN = 2
    payload2name = {
        PAYLOAD_RAW: 'WASM',
        PAYLOAD_GZIP: 'GZIP',
        PAYLOAD_UNKNOWN: 'UNKNOWN',
    }

    # access type
    ACCESS_UNDEFINED = 0
    ACCESS_NOBODY = 1
    ACCESS_ONLY_ADDRESS = 2
    ACCESS_EVERYBODY = 3
    access2name = {
        ACCESS_UNDEFINED: 'Undefined',
        ACCESS_NOBODY: 'Nobody',
        ACCESS_ONLY_ADDRESS: 'OnlyAddress',
        ACCESS_EVERYBODY: 'Everybody',
    }

    # message type
    MSG_STORE_CODE = 'store-code'
    MSG_INSTANTIATE = 'instantiate'
    MSG_EXECUTE = 'execute'
    MSG_MIGRATE = 'migrate'
    MSG_UPDATE_ADMIN = 'update-contract-admin'
    MSG_CLEAR_ADMIN = 'clear-contract-admin'
    msg_type2name = {
        MSG_STORE_CODE: 'wasm/MsgStoreCode',
        MSG_INSTANTIATE: 'wasm/MsgInstantiateContract',
        MSG_EXECUTE: 'wasm/MsgExecuteContract',
        MSG_MIGRATE: 'wasm/MsgMigrateContract',
        MSG_UPDATE_ADMIN: 'wasm/MsgUpdateAdmin',
        MSG_CLEAR_ADMIN: 'wasm/MsgClearAdmin',
    }

    # size limits
    MAX_WASM_SIZE = 500 * 1024  # 500kb compressed
    MAX_LABEL_SIZE = 128
    MAX_BUILDER_SIZE = 128

    # address params
    ADDR_LEN = 20  # bytes identifier
    BECH32_HRP = 'fetch'

    # coin params
    MAX_AMOUNT_BITS = 255

    # tx envelope defaults
    DEFAULT_GAS = 200000
    UINT64_MAX = 2 ** 64 - 1


class BlockChainError(Exception):
    """base error, `field` names the offending input"""

    def __init__(self, msg, field: Optional[str] = None):
        super().__init__(msg)
        self.field = field
        self.msg = msg

    def __str__(self):
        if self.field:
            return '{}: {}'.format(self.field, self.msg)
        return str(self.msg)


class InvalidInputError(BlockChainError):
    pass


class RequiredFieldError(BlockChainError):
    pass


class BroadcastError(BlockChainError):
    pass


class CLIContext(object):
    __slots__ = (
        "hrp",
        "chain_id",
        "from_address",
        "generate_only",
        "output_document",
        "account_number",
        "sequence",
        "gas",
        "fees",
        "memo",
    )

    def __init__(self, hrp=C.BECH32_HRP, chain_id='', from_address='', generate_only=False,
                 output_document=None, account_number=0, sequence=0, gas=C.DEFAULT_GAS, fees='', memo=''):
        self.hrp: str = hrp
        self.chain_id: str = chain_id
        self.from_address: str = from_address
        self.generate_only: bool = generate_only
        self.output_document: Optional[str] = output_document
        self.account_number: int = account_number
        self.sequence: int = sequence
        self.gas: int = gas
        self.fees: str = fees
        self.memo: str = memo

    def __repr__(self):
        return "<CLIContext chain={} from={}>".format(self.chain_id, self.from_address)

    def get_from_address(self):
        """decode sender address"""
        from wasmtx.address import address_from_bech32
        if not self.from_address:
            raise RequiredFieldError('sender address is required', 'from')
        return address_from_bech32(self.from_address, self.hrp, field='from')


class StoreCodeFlags(object):
    __slots__ = ("source", "builder", "instantiate_everybody", "instantiate_only_address")

    def __init__(self, source='', builder='', instantiate_everybody=False, instantiate_only_address=''):
        self.source: str = source
        self.builder: str = builder
        self.instantiate_everybody: bool = instantiate_everybody
        self.instantiate_only_address: str = instantiate_only_address


class InstantiateFlags(object):
    __slots__ = ("amount", "label", "admin")

    def __init__(self, amount='', label='', admin=''):
        self.amount: str = amount
        self.label: str = label
        self.admin: str = admin


class AmountFlags(object):
    __slots__ = ("amount",)

    def __init__(self, amount=''):
        self.amount: str = amount


__all__ = [
    'C',
    'BlockChainError',
    'InvalidInputError',
    'RequiredFieldError',
    'BroadcastError',
    'CLIContext',
    'StoreCodeFlags',
    'InstantiateFlags',
    'AmountFlags',
]
