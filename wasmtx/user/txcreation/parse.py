from wasmtx.config import C, InvalidInputError, RequiredFieldError, StoreCodeFlags, InstantiateFlags, AmountFlags
from wasmtx.address import address_from_bech32
from wasmtx.coins import parse_coins
from wasmtx.wasm import normalize_payload
from wasmtx.chain.access import parse_access_config
from wasmtx.chain.msg import validate_label
from wasmtx.user.txcreation.contract import *
from logging import getLogger
import re

log = getLogger('wasmtx')
re_uint = re.compile(r'[0-9]+')


def parse_code_id(string, field='code_id') -> int:
    """decimal string to uint64"""
    if not isinstance(string, str) or not re_uint.fullmatch(string):
        raise InvalidInputError('invalid syntax: "{}"'.format(string), field)
    code_id = int(string)
    if code_id > C.UINT64_MAX:
        raise InvalidInputError('value out of range: "{}"'.format(string), field)
    return code_id


def raw_json(string, field='msg') -> bytes:
    """opaque contract message, interpreted by contract"""
    if string is None:
        raise RequiredFieldError('json message is required', field)
    return string.encode('utf-8', 'surrogateescape')


def read_wasm_file(path) -> bytes:
    with open(path, mode='rb') as fp:
        return fp.read()


def parse_store_code_args(wasm_path, flags: StoreCodeFlags, ctx):
    wasm = read_wasm_file(wasm_path)
    wasm = normalize_payload(wasm)
    perm = parse_access_config(
        only_address=flags.instantiate_only_address,
        everybody=flags.instantiate_everybody,
        hrp=ctx.hrp)
    return create_store_code_msg(
        sender=ctx.get_from_address(),
        wasm_byte_code=wasm,
        source=flags.source,
        builder=flags.builder,
        instantiate_permission=perm)


def parse_instantiate_args(code_id_str, init_msg, flags: InstantiateFlags, ctx):
    validate_label(flags.label)
    code_id = parse_code_id(code_id_str)
    amount = parse_coins(flags.amount)
    admin = None
    if flags.admin:
        admin = address_from_bech32(flags.admin, ctx.hrp, field='admin')
    return create_instantiate_msg(
        sender=ctx.get_from_address(),
        code_id=code_id,
        label=flags.label,
        init_msg=raw_json(init_msg, 'init_msg'),
        init_funds=amount,
        admin=admin)


def parse_execute_args(contract_str, exec_msg, flags: AmountFlags, ctx):
    contract = address_from_bech32(contract_str, ctx.hrp, field='contract')
    amount = parse_coins(flags.amount)
    return create_execute_msg(
        sender=ctx.get_from_address(),
        contract=contract,
        msg=raw_json(exec_msg, 'msg'),
        sent_funds=amount)


def parse_migrate_args(contract_str, code_id_str, migrate_msg, ctx):
    contract = address_from_bech32(contract_str, ctx.hrp, field='contract')
    code_id = parse_code_id(code_id_str)
    return create_migrate_msg(
        sender=ctx.get_from_address(),
        contract=contract,
        code_id=code_id,
        migrate_msg=raw_json(migrate_msg, 'migrate_msg'))


def parse_update_admin_args(contract_str, new_admin_str, ctx):
    contract = address_from_bech32(contract_str, ctx.hrp, field='contract')
    new_admin = address_from_bech32(new_admin_str, ctx.hrp, field='new_admin')
    return create_update_admin_msg(
        sender=ctx.get_from_address(),
        contract=contract,
        new_admin=new_admin)


def parse_clear_admin_args(contract_str, ctx):
    contract = address_from_bech32(contract_str, ctx.hrp, field='contract')
    return create_clear_admin_msg(
        sender=ctx.get_from_address(),
        contract=contract)


__all__ = [
    "parse_code_id",
    "raw_json",
    "read_wasm_file",
    "parse_store_code_args",
    "parse_instantiate_args",
    "parse_execute_args",
    "parse_migrate_args",
    "parse_update_admin_args",
    "parse_clear_admin_args",
]
