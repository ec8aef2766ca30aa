from wasmtx.config import C, BroadcastError
from wasmtx.chain.msg import MsgExecuteContract, MsgStoreCode
from wasmtx.chain.msgpack import loads
from wasmtx.user.sendnew import Broadcaster
from wasmtx.user.command import main
from bech32 import bech32_encode, convertbits
from base64 import b64decode
from io import StringIO
import logging
import gzip
import json
import pytest
import unittest


def make_address(n, hrp=C.BECH32_HRP):
    return bech32_encode(hrp, convertbits(bytes([n]) * 20, 8, 5))


SENDER = make_address(1)
CONTRACT = make_address(2)
ADMIN = make_address(3)
RAW_WASM = b'\x00asm\x01\x00\x00\x00' + bytes(range(64)) * 16
TX_FLAGS = ['--from', SENDER, '--chain-id', 'testing', '--generate-only']


class RecodeBroadcaster(Broadcaster):
    def __init__(self, error=None):
        self.txs = list()
        self.error = error

    def broadcast(self, tx):
        if self.error:
            raise self.error
        self.txs.append(tx)
        return 'ok'


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger('wasmtx')
    for sh in list(logger.handlers):
        logger.removeHandler(sh)
        sh.close()


@pytest.fixture
def wasm_file(tmp_path):
    path = tmp_path / 'contract.wasm'
    path.write_bytes(RAW_WASM)
    return str(path)


def run(argv, broadcaster=None):
    output = StringIO()
    status = main(argv, broadcaster=broadcaster, output=output)
    return status, output.getvalue()


def test_store_end_to_end(wasm_file):
    """test store prints unsigned tx with gzip payload"""
    status, out = run(['store', wasm_file, '--source', 'https://example.com/src',
                       '--builder', 'cosmwasm/rust-optimizer:0.10'] + TX_FLAGS)
    assert status == 0
    tx = json.loads(out)
    assert tx['type'] == 'cosmos-sdk/StdTx'
    assert len(tx['value']['msg']) == 1
    msg = tx['value']['msg'][0]
    assert msg['type'] == 'wasm/MsgStoreCode'
    assert msg['value']['sender'] == SENDER
    assert msg['value']['source'] == 'https://example.com/src'
    assert msg['value']['builder'] == 'cosmwasm/rust-optimizer:0.10'
    assert msg['value']['instantiate_permission'] is None
    assert gzip.decompress(b64decode(msg['value']['wasm_byte_code'])) == RAW_WASM
    assert tx['value']['fee'] == {'amount': [], 'gas': str(C.DEFAULT_GAS)}


def test_store_everybody(wasm_file):
    """test boolean flag of store"""
    status, out = run(['store', wasm_file, '--instantiate-everybody', 'true'] + TX_FLAGS)
    assert status == 0
    perm = json.loads(out)['value']['msg'][0]['value']['instantiate_permission']
    assert perm == {'permission': 'Everybody', 'address': ''}
    status, out = run(['store', wasm_file, '--instantiate-everybody', 'true',
                       '--instantiate-only-address', ADMIN] + TX_FLAGS)
    assert status == 0
    perm = json.loads(out)['value']['msg'][0]['value']['instantiate_permission']
    assert perm == {'permission': 'OnlyAddress', 'address': ADMIN}


def test_store_errors(wasm_file, tmp_path, capsys):
    """test failures exit non zero and name the field"""
    status, out = run(['store', str(tmp_path / 'missing.wasm')] + TX_FLAGS)
    assert status == 1
    assert out == ''
    assert 'missing.wasm' in capsys.readouterr().err
    status, out = run(['store', wasm_file, '--source', 'http://example.com'] + TX_FLAGS)
    assert status == 1
    assert 'source' in capsys.readouterr().err
    status, out = run(['store', wasm_file] + TX_FLAGS[2:])
    assert status == 1
    assert 'from' in capsys.readouterr().err


def test_instantiate(capsys):
    """test instantiate command"""
    status, out = run(['instantiate', '7', '{"count":1}', '--label', 'my-contract',
                       '--amount', '100uatom', '--admin', ADMIN] + TX_FLAGS)
    assert status == 0
    value = json.loads(out)['value']['msg'][0]['value']
    assert value['code_id'] == '7'
    assert value['label'] == 'my-contract'
    assert value['init_msg'] == {'count': 1}
    assert value['init_funds'] == [{'denom': 'uatom', 'amount': '100'}]
    assert value['admin'] == ADMIN
    status, out = run(['instantiate', '7', '{}'] + TX_FLAGS)
    assert status == 1
    assert 'label' in capsys.readouterr().err
    status, out = run(['instantiate', '7', '{}', '--label', 'l', '--amount', '-5uatom'] + TX_FLAGS)
    assert status == 1
    assert 'amount' in capsys.readouterr().err


def test_usage_error():
    """test missing positional is an argparse error"""
    with pytest.raises(SystemExit) as e:
        main(['execute', CONTRACT])
    assert e.value.code == 2
    with pytest.raises(SystemExit):
        main(['store', 'a.wasm', '--instantiate-everybody', 'maybe'])


def test_broadcaster():
    """test message is handed to broadcaster"""
    broadcaster = RecodeBroadcaster()
    status, out = run(['execute', CONTRACT, '{"release":{}}', '--amount', '5ufet',
                       '--from', SENDER, '--chain-id', 'testing', '--sequence', '3'], broadcaster)
    assert status == 0
    assert out == ''
    tx, = broadcaster.txs
    assert tx['chain_id'] == 'testing'
    assert tx['sequence'] == 3
    msg, = tx['msgs']
    assert isinstance(msg, MsgExecuteContract)
    assert msg.sent_funds == {'ufet': 5}



def test_execute_undecodable_argv():
    """test argv bytes that are not utf-8 reach the message unchanged"""
    exec_msg = b'{"a":"\xff"}'.decode('utf-8', 'surrogateescape')
    status, out = run(['execute', CONTRACT, exec_msg, '--from', SENDER, '--generate-only'])
    assert status == 0
    assert json.loads(out)['value']['msg'][0]['value']['msg'] == '{"a":"\ufffd"}'
    broadcaster = RecodeBroadcaster()
    status, out = run(['execute', CONTRACT, exec_msg, '--from', SENDER], broadcaster)
    assert status == 0
    msg, = broadcaster.txs[0]['msgs']
    assert msg.msg == b'{"a":"\xff"}'


def test_broadcaster_error(capsys):
    """test downstream errors pass through"""
    broadcaster = RecodeBroadcaster(error=BroadcastError('insufficient fee', 'fees'))
    status, out = run(['clear-admin', CONTRACT, '--from', SENDER], broadcaster)
    assert status == 1
    assert 'insufficient fee' in capsys.readouterr().err
    broadcaster = RecodeBroadcaster(error=RuntimeError('connection refused'))
    with pytest.raises(RuntimeError):
        run(['clear-admin', CONTRACT, '--from', SENDER], broadcaster)


def test_admin_commands():
    """test migrate and admin commands"""
    status, out = run(['migrate', CONTRACT, '2', '{}'] + TX_FLAGS)
    assert status == 0
    assert json.loads(out)['value']['msg'][0]['type'] == 'wasm/MsgMigrateContract'
    status, out = run(['update-admin', CONTRACT, ADMIN] + TX_FLAGS)
    assert status == 0
    assert json.loads(out)['value']['msg'][0]['value']['new_admin'] == ADMIN
    status, out = run(['update-admin', CONTRACT, SENDER] + TX_FLAGS)
    assert status == 1
    status, out = run(['clear-admin', CONTRACT] + TX_FLAGS)
    assert status == 0
    assert json.loads(out)['value']['msg'][0]['type'] == 'wasm/MsgClearAdmin'


def test_output_document(wasm_file, tmp_path):
    """test unsigned tx saved by msgpack"""
    path = tmp_path / 'unsigned.bin'
    status, out = run(['store', wasm_file, '--output-document', str(path),
                       '--fees', '10ufet', '--memo', 'hello'] + TX_FLAGS)
    assert status == 0
    assert out == ''
    tx = loads(path.read_bytes())
    assert tx['memo'] == 'hello'
    assert tx['fee']['amount'] == {'ufet': 10}
    msg, = tx['msgs']
    assert isinstance(msg, MsgStoreCode)
    assert gzip.decompress(msg.wasm_byte_code) == RAW_WASM


def test_log_file(wasm_file, tmp_path):
    """test package logger recodes to file and leaves root logger alone"""
    root_handlers = list(logging.getLogger().handlers)
    log_path = tmp_path / 'wasmcli.log'
    doc_path = tmp_path / 'unsigned.bin'
    status, out = run(['store', wasm_file, '--output-document', str(doc_path),
                       '--log-path', str(log_path)] + TX_FLAGS)
    assert status == 0
    assert logging.getLogger().handlers == root_handlers
    assert logging.getLogger('wasmtx').propagate is False
    assert 'write unsigned tx to' in log_path.read_text()


if __name__ == "__main__":
    unittest.main()
