from wasmtx import __version__
from wasmtx.config import C
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter, ArgumentTypeError
from logging import DEBUG, INFO, WARNING, ERROR

NAME2LEVEL = {
    'DEBUG': DEBUG,
    'INFO': INFO,
    'WARNING': WARNING,
    'ERROR': ERROR,
}
TRUE_STRINGS = ('1', 't', 'T', 'true', 'TRUE', 'True')
FALSE_STRINGS = ('0', 'f', 'F', 'false', 'FALSE', 'False', '')


def str2bool(string):
    """parse boolean flag value like `true` or `0`"""
    if string in TRUE_STRINGS:
        return True
    elif string in FALSE_STRINGS:
        return False
    else:
        raise ArgumentTypeError('invalid boolean value: {!r}'.format(string))


def tx_flags_parser():
    """flags shared by every tx command"""
    p = ArgumentParser(add_help=False)
    p.add_argument('--from',
                   help='bech32 address of the sender',
                   dest='from_address',
                   default='',
                   type=str)
    p.add_argument('--chain-id',
                   help='chain id of the network',
                   default='',
                   type=str)
    p.add_argument('--prefix',
                   help='bech32 human readable part of addresses',
                   default=C.BECH32_HRP,
                   type=str)
    p.add_argument('--generate-only',
                   help='print the unsigned tx and exit',
                   action='store_true')
    p.add_argument('--output-document',
                   help='write the msgpack encoded unsigned tx to this path',
                   default=None,
                   type=str)
    p.add_argument('--account-number',
                   help='account number of the signing account',
                   default=0,
                   type=int)
    p.add_argument('--sequence',
                   help='sequence number of the signing account',
                   default=0,
                   type=int)
    p.add_argument('--gas',
                   help='gas limit of the tx',
                   default=C.DEFAULT_GAS,
                   type=int)
    p.add_argument('--fees',
                   help='fees to pay along with tx, like 10ufet',
                   default='',
                   type=str)
    p.add_argument('--memo',
                   help='memo to send along with tx',
                   default='',
                   type=str)
    p.add_argument('--log-level',
                   help='logging level',
                   choices=list(NAME2LEVEL),
                   default='WARNING')
    p.add_argument('--log-path',
                   help='recode log file path',
                   default=None,
                   type=str)
    return p


def console_args_parser():
    """get help by `python wasmcli.py -h`"""
    p = ArgumentParser(prog='wasmcli', description='Wasm transaction subcommands',
                       formatter_class=ArgumentDefaultsHelpFormatter)
    p.add_argument('--version', action='version', version=__version__)
    sub = p.add_subparsers(dest='command', metavar='command')
    sub.required = True
    parent = tx_flags_parser()

    store = sub.add_parser('store',
                           help='Upload a wasm binary',
                           parents=[parent],
                           formatter_class=ArgumentDefaultsHelpFormatter)
    store.add_argument('wasm_file',
                       help='wasm binary or gzip compressed wasm')
    store.add_argument('--source',
                       help="A valid URI reference to the contract's source code, optional",
                       default='',
                       type=str)
    store.add_argument('--builder',
                       help='A valid docker tag for the build system, optional',
                       default='',
                       type=str)
    store.add_argument('--instantiate-everybody',
                       help='Everybody can instantiate a contract from the code, optional',
                       nargs='?',
                       const=True,
                       default=False,
                       type=str2bool)
    store.add_argument('--instantiate-only-address',
                       help='Only this address can instantiate a contract instance from the code, optional',
                       default='',
                       type=str)

    instantiate = sub.add_parser('instantiate',
                                 help='Instantiate a wasm contract',
                                 parents=[parent],
                                 formatter_class=ArgumentDefaultsHelpFormatter)
    instantiate.add_argument('code_id', help='code id as uint64')
    instantiate.add_argument('init_msg', help='json encoded init args')
    instantiate.add_argument('--amount',
                             help='Coins to send to the contract during instantiation',
                             default='',
                             type=str)
    instantiate.add_argument('--label',
                             help='A human-readable name for this contract in lists',
                             default='',
                             type=str)
    instantiate.add_argument('--admin',
                             help='Address of an admin',
                             default='',
                             type=str)

    execute = sub.add_parser('execute',
                             help='Execute a command on a wasm contract',
                             parents=[parent],
                             formatter_class=ArgumentDefaultsHelpFormatter)
    execute.add_argument('contract', help='bech32 contract address')
    execute.add_argument('msg', help='json encoded send args')
    execute.add_argument('--amount',
                         help='Coins to send to the contract along with command',
                         default='',
                         type=str)

    migrate = sub.add_parser('migrate',
                             help='Migrate a wasm contract to a new code version',
                             parents=[parent],
                             formatter_class=ArgumentDefaultsHelpFormatter)
    migrate.add_argument('contract', help='bech32 contract address')
    migrate.add_argument('code_id', help='new code id as uint64')
    migrate.add_argument('migrate_msg', help='json encoded migrate args')

    update_admin = sub.add_parser('update-admin',
                                  help='Set new admin for a contract',
                                  parents=[parent],
                                  formatter_class=ArgumentDefaultsHelpFormatter)
    update_admin.add_argument('contract', help='bech32 contract address')
    update_admin.add_argument('new_admin', help='bech32 address of the new admin')

    clear_admin = sub.add_parser('clear-admin',
                                 help='Clears admin for a contract to prevent further migrations',
                                 parents=[parent],
                                 formatter_class=ArgumentDefaultsHelpFormatter)
    clear_admin.add_argument('contract', help='bech32 contract address')
    return p


__all__ = [
    "NAME2LEVEL",
    "str2bool",
    "tx_flags_parser",
    "console_args_parser",
]
