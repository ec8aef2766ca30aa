from wasmtx.config import BlockChainError, CLIContext, StoreCodeFlags, InstantiateFlags, AmountFlags
from wasmtx.utils import NAME2LEVEL, console_args_parser
from wasmtx.for_debug import set_logger
from wasmtx.user.txcreation import *
from wasmtx.user.sendnew import TxBuilder, generate_or_broadcast_msgs
from logging import getLogger
import sys

log = getLogger('wasmtx')


def context_from_args(p) -> CLIContext:
    return CLIContext(
        hrp=p.prefix,
        chain_id=p.chain_id,
        from_address=p.from_address,
        generate_only=p.generate_only,
        output_document=p.output_document,
        account_number=p.account_number,
        sequence=p.sequence,
        gas=p.gas,
        fees=p.fees,
        memo=p.memo)


def store_code_cmd(p, ctx):
    flags = StoreCodeFlags(
        source=p.source,
        builder=p.builder,
        instantiate_everybody=p.instantiate_everybody,
        instantiate_only_address=p.instantiate_only_address)
    return parse_store_code_args(p.wasm_file, flags, ctx)


def instantiate_contract_cmd(p, ctx):
    flags = InstantiateFlags(amount=p.amount, label=p.label, admin=p.admin)
    return parse_instantiate_args(p.code_id, p.init_msg, flags, ctx)


def execute_contract_cmd(p, ctx):
    return parse_execute_args(p.contract, p.msg, AmountFlags(amount=p.amount), ctx)


def migrate_contract_cmd(p, ctx):
    return parse_migrate_args(p.contract, p.code_id, p.migrate_msg, ctx)


def update_contract_admin_cmd(p, ctx):
    return parse_update_admin_args(p.contract, p.new_admin, ctx)


def clear_contract_admin_cmd(p, ctx):
    return parse_clear_admin_args(p.contract, ctx)


COMMANDS = {
    'store': store_code_cmd,
    'instantiate': instantiate_contract_cmd,
    'execute': execute_contract_cmd,
    'migrate': migrate_contract_cmd,
    'update-admin': update_contract_admin_cmd,
    'clear-admin': clear_contract_admin_cmd,
}


def run_command(p, broadcaster=None, output=None):
    """build one message from parsed console args and hand it off"""
    ctx = context_from_args(p)
    tx_builder = TxBuilder.from_context(ctx)
    msg = COMMANDS[p.command](p, ctx)
    msg.validate_basic()
    log.info("constructed {}".format(msg))
    return generate_or_broadcast_msgs(ctx, tx_builder, [msg], broadcaster=broadcaster, output=output)


def main(argv=None, broadcaster=None, output=None):
    """console entry, return exit status"""
    p = console_args_parser().parse_args(argv)
    set_logger(level=NAME2LEVEL[p.log_level], path=p.log_path)
    try:
        run_command(p, broadcaster=broadcaster, output=output)
    except BlockChainError as e:
        log.debug("failed {} command".format(p.command), exc_info=True)
        print("Error: {}".format(e), file=sys.stderr)
        return 1
    except OSError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1
    return 0


__all__ = [
    "context_from_args",
    "COMMANDS",
    "run_command",
    "main",
]
