from wasmtx.chain.msg import *
from wasmtx.coins import Coins
from logging import getLogger

log = getLogger('wasmtx')


def create_store_code_msg(sender,
                          wasm_byte_code,
                          source='',
                          builder='',
                          instantiate_permission=None):
    assert isinstance(wasm_byte_code, bytes)
    msg = MsgStoreCode(
        sender=sender,
        wasm_byte_code=wasm_byte_code,
        source=source or '',
        builder=builder or '',
        instantiate_permission=instantiate_permission)
    log.debug("create {} size={}".format(msg, len(wasm_byte_code)))
    return msg


def create_instantiate_msg(sender,
                           code_id,
                           label,
                           init_msg,
                           init_funds=None,
                           admin=None):
    assert isinstance(code_id, int)
    msg = MsgInstantiateContract(
        sender=sender,
        code_id=code_id,
        label=label,
        init_msg=init_msg,
        init_funds=init_funds.copy() if init_funds else Coins(),
        admin=admin)
    log.debug("create {} code_id={} label={}".format(msg, code_id, label))
    return msg


def create_execute_msg(sender,
                       contract,
                       msg,
                       sent_funds=None):
    execute = MsgExecuteContract(
        sender=sender,
        contract=contract,
        msg=msg,
        sent_funds=sent_funds.copy() if sent_funds else Coins())
    log.debug("create {} contract={}".format(execute, contract))
    return execute


def create_migrate_msg(sender, contract, code_id, migrate_msg):
    assert isinstance(code_id, int)
    msg = MsgMigrateContract(
        sender=sender,
        contract=contract,
        code_id=code_id,
        migrate_msg=migrate_msg)
    log.debug("create {} contract={} code_id={}".format(msg, contract, code_id))
    return msg


def create_update_admin_msg(sender, contract, new_admin):
    msg = MsgUpdateAdmin(sender=sender, new_admin=new_admin, contract=contract)
    log.debug("create {} contract={} new_admin={}".format(msg, contract, new_admin))
    return msg


def create_clear_admin_msg(sender, contract):
    msg = MsgClearAdmin(sender=sender, contract=contract)
    log.debug("create {} contract={}".format(msg, contract))
    return msg


__all__ = [
    "create_store_code_msg",
    "create_instantiate_msg",
    "create_execute_msg",
    "create_migrate_msg",
    "create_update_admin_msg",
    "create_clear_admin_msg",
]
