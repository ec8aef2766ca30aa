from wasmtx.user.txcreation.contract import *
from wasmtx.user.txcreation.parse import *
__all__ = [
    "create_store_code_msg",
    "create_instantiate_msg",
    "create_execute_msg",
    "create_migrate_msg",
    "create_update_admin_msg",
    "create_clear_admin_msg",
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
