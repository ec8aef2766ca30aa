__version__ = '0.1.0'
__chain_version__ = 0
__message__ = 'wasm contract transaction builder'
