from wasmtx.address import Address
from wasmtx.coins import Coins
from wasmtx.chain.access import AccessConfig
from wasmtx.chain.msg import *
import msgpack

name2msg_class = {
    cls.__name__: cls for cls in (
        MsgStoreCode,
        MsgInstantiateContract,
        MsgExecuteContract,
        MsgMigrateContract,
        MsgUpdateAdmin,
        MsgClearAdmin,
    )
}


def msg_slots(cls):
    slots = list()
    for c in reversed(cls.__mro__):
        slots.extend(getattr(c, '__slots__', ()))
    return slots


def default_hook(obj):
    if isinstance(obj, Msg):
        return {
            '_wasmtx_class_': obj.__class__.__name__,
            'fields': {name: default_hook(getattr(obj, name)) for name in msg_slots(obj.__class__)},
        }
    if isinstance(obj, Address):
        return {
            '_wasmtx_class_': 'Address',
            'hrp': obj.hrp,
            'identifier': obj.identifier(),
        }
    if isinstance(obj, Coins):
        return {
            '_wasmtx_class_': 'Coins',
            'coins': dict(obj),
        }
    if isinstance(obj, AccessConfig):
        return {
            '_wasmtx_class_': 'AccessConfig',
            'permission': obj.permission,
            'address': default_hook(obj.address),
        }
    return obj


def object_hook(dct):
    if isinstance(dct, dict) and '_wasmtx_class_' in dct:
        name = dct['_wasmtx_class_']
        if name == 'Address':
            return Address(dct['hrp'], dct['identifier'])
        elif name == 'Coins':
            return Coins(coins=dct['coins'])
        elif name == 'AccessConfig':
            return AccessConfig(dct['permission'], dct['address'])
        elif name in name2msg_class:
            cls = name2msg_class[name]
            msg = cls.__new__(cls)
            for k, v in dct['fields'].items():
                setattr(msg, k, v)
            return msg
        else:
            raise Exception('Not found class name "{}"'.format(name))
    else:
        return dct


def dump(obj, fp, **kwargs):
    msgpack.pack(obj, fp, use_bin_type=True, strict_types=True, default=default_hook, **kwargs)


def dumps(obj, **kwargs):
    return msgpack.packb(obj, use_bin_type=True, strict_types=True, default=default_hook, **kwargs)


def loads(b):
    return msgpack.unpackb(b, object_hook=object_hook, raw=False)


__all__ = [
    "default_hook",
    "object_hook",
    "dump",
    "dumps",
    "loads",
]
