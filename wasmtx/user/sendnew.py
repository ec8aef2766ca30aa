from wasmtx.config import C, InvalidInputError
from wasmtx.coins import parse_coins
from wasmtx.chain.msg import Msg
from wasmtx.chain import msgpack as wasm_msgpack
from logging import getLogger
import json
import sys

log = getLogger('wasmtx')


class TxBuilder(object):
    """transaction envelope wrapped around messages"""
    __slots__ = ("chain_id", "account_number", "sequence", "gas", "fees", "memo")

    def __init__(self, chain_id='', account_number=0, sequence=0, gas=C.DEFAULT_GAS, fees=None, memo=''):
        self.chain_id = chain_id
        self.account_number = account_number
        self.sequence = sequence
        self.gas = gas
        self.fees = fees if fees is not None else parse_coins('')
        self.memo = memo

    def __repr__(self):
        return "<TxBuilder chain={} seq={} gas={}>".format(self.chain_id, self.sequence, self.gas)

    @classmethod
    def from_context(cls, ctx):
        if ctx.gas <= 0 or ctx.gas > C.UINT64_MAX:
            raise InvalidInputError('gas must be positive uint64, not {}'.format(ctx.gas), 'gas')
        return cls(
            chain_id=ctx.chain_id,
            account_number=ctx.account_number,
            sequence=ctx.sequence,
            gas=ctx.gas,
            fees=parse_coins(ctx.fees, field='fees'),
            memo=ctx.memo)

    def build_unsigned_tx(self, msgs):
        assert all(isinstance(msg, Msg) for msg in msgs)
        return {
            'chain_id': self.chain_id,
            'account_number': self.account_number,
            'sequence': self.sequence,
            'fee': {'amount': self.fees, 'gas': self.gas},
            'memo': self.memo,
            'msgs': list(msgs),
        }


def tx_getinfo(tx):
    """unsigned tx document for display"""
    return {
        'type': 'cosmos-sdk/StdTx',
        'value': {
            'msg': [msg.getinfo() for msg in tx['msgs']],
            'fee': {
                'amount': tx['fee']['amount'].getinfo(),
                'gas': str(tx['fee']['gas']),
            },
            'signatures': None,
            'memo': tx['memo'],
        },
    }


class Broadcaster(object):
    """sign and broadcast collaborator"""

    def broadcast(self, tx):
        raise NotImplementedError


def generate_or_broadcast_msgs(ctx, tx_builder, msgs, broadcaster=None, output=None):
    """validate messages then print, save or hand off the unsigned tx"""
    for msg in msgs:
        msg.validate_basic()
    tx = tx_builder.build_unsigned_tx(msgs)
    if ctx.output_document:
        with open(ctx.output_document, mode='wb') as fp:
            wasm_msgpack.dump(tx, fp)
        log.info("write unsigned tx to {}".format(ctx.output_document))
        return tx
    if ctx.generate_only or broadcaster is None:
        if not ctx.generate_only:
            log.warning("no broadcaster configured, print unsigned tx")
        output = output or sys.stdout
        output.write(json.dumps(tx_getinfo(tx), indent=4) + '\n')
        return tx
    log.debug("broadcast {} msgs by {}".format(len(msgs), broadcaster))
    return broadcaster.broadcast(tx)


__all__ = [
    "TxBuilder",
    "tx_getinfo",
    "Broadcaster",
    "generate_or_broadcast_msgs",
]
