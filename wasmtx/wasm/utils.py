from wasmtx.config import C, InvalidInputError
from logging import getLogger
import gzip
import io

log = getLogger('wasmtx')


def is_wasm(b):
    """raw wasm binary begins with `\\0asm`"""
    return b[:len(C.WASM_IDENT)] == C.WASM_IDENT


def is_gzip(b):
    """gzip stream with deflate method"""
    return b[:len(C.GZIP_IDENT)] == C.GZIP_IDENT


def classify_payload(b) -> int:
    if is_wasm(b):
        return C.PAYLOAD_RAW
    elif is_gzip(b):
        return C.PAYLOAD_GZIP
    else:
        return C.PAYLOAD_UNKNOWN


def gzip_it(b) -> bytes:
    """compress by default level"""
    fp = io.BytesIO()
    with gzip.GzipFile(fileobj=fp, mode='wb') as zp:
        zp.write(b)
    return fp.getvalue()


def normalize_payload(b, field='wasm') -> bytes:
    kind = classify_payload(b)
    if kind == C.PAYLOAD_RAW:
        compressed = gzip_it(b)
        log.debug("gzip wasm {}bytes => {}bytes".format(len(b), len(compressed)))
        return compressed
    elif kind == C.PAYLOAD_GZIP:
        return b
    else:
        raise InvalidInputError('invalid input file. Use wasm binary or gzip', field)


__all__ = [
    "is_wasm",
    "is_gzip",
    "classify_payload",
    "gzip_it",
    "normalize_payload",
]
