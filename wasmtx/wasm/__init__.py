from wasmtx.wasm.utils import *
