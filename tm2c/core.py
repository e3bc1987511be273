"""Shared enumerations, platform parameters and core-role helpers."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Callable

__all__ = [
    "Conflict",
    "RW",
    "RpcRequestType",
    "RpcReplyType",
    "Platform",
    "cache_line_size",
    "ref_speed_ghz",
    "min_dsl_id",
    "min_app_id",
    "dsl_id_seq",
    "app_id_seq",
]

CoreTest = Callable[[int], bool]


class Conflict(IntEnum):
    """Outcome of a lock request; the last two are used by contention managers."""

    NO_CONFLICT = 0
    READ_AFTER_WRITE = 1
    WRITE_AFTER_READ = 2
    WRITE_AFTER_WRITE = 3
    PERSISTING_WRITES = 4
    TX_COMMITTED = 5


class RW(IntEnum):
    """Kind of access requested on an address."""

    READ = 0
    WRITE = 1


class RpcRequestType(IntEnum):
    """Request kinds sent from application cores to lock service cores."""

    LOAD = 0
    STORE = 1
    LOAD_RLS = 2
    STORE_FINISH = 3
    RMV_NODE = 4
    LOAD_NONTX = 5
    STORE_NONTX = 6
    STORE_INC = 7
    STATS = 8
    UNKNOWN = 9


class RpcReplyType(IntEnum):
    """Reply kinds sent back by lock service cores."""

    LOAD_RESPONSE = 0
    STORE_RESPONSE = 1
    ABORTED = 2
    LOAD_NONTX_RESPONSE = 3
    STORE_NONTX_RESPONSE = 4
    UNKNOWN_RESPONSE = 5


class Platform(Enum):
    """Supported target platforms."""

    DEFAULT = "default"
    OPTERON = "opteron"
    SCC = "scc"
    TILERA = "tilera"
    TILEPRO = "tilepro"
    NIAGARA = "niagara"
    XEON = "xeon"


_REF_SPEED_GHZ = {
    Platform.DEFAULT: 2.1,
    Platform.OPTERON: 2.1,
    Platform.SCC: 0.533,
    Platform.TILERA: 1.2,
    Platform.TILEPRO: 0.7,
    Platform.NIAGARA: 1.17,
    Platform.XEON: 2.1,
}


def cache_line_size(platform: Platform) -> int:
    """Return the cache line size in bytes for ``platform``."""
    return 16 if Platform(platform) is Platform.NIAGARA else 64


def ref_speed_ghz(platform: Platform) -> float:
    """Return the reference clock speed in GHz for ``platform``."""
    return _REF_SPEED_GHZ[Platform(platform)]


def min_dsl_id(num_ues: int, is_app_core: CoreTest) -> int:
    """Return the lowest id of a service core, or ``num_ues`` if there is none."""
    return next((i for i in range(num_ues) if not is_app_core(i)), num_ues)


def min_app_id(num_ues: int, is_app_core: CoreTest) -> int:
    """Return the lowest id of an application core, or ``num_ues`` if there is none."""
    return next((i for i in range(num_ues) if is_app_core(i)), num_ues)


def dsl_id_seq(node: int, is_app_core: CoreTest) -> int:
    """Return the position of ``node`` among the service cores."""
    return sum(1 for i in range(node) if not is_app_core(i))


def app_id_seq(node: int, is_app_core: CoreTest) -> int:
    """Return the position of ``node`` among the application cores."""
    return sum(1 for i in range(node) if is_app_core(i))