"""Key distribution over a pool of servers: ketama, modula and random.

Each ``*_update`` function rebuilds the pool's continuum from its live
servers. The matching ``*_dispatch`` function maps a key hash to the index
of a server in ``ServerPool.servers``.
"""

from __future__ import annotations

import math
import random
import struct
import time
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from .md5 import md5_signature

KETAMA_CONTINUUM_ADDITION = 10
KETAMA_POINTS_PER_SERVER = 160
KETAMA_MAX_HOSTLEN = 86

MODULA_CONTINUUM_ADDITION = 10
MODULA_POINTS_PER_SERVER = 1

RANDOM_CONTINUUM_ADDITION = 10
RANDOM_POINTS_PER_SERVER = 1

_rng = random.Random()


@dataclass(frozen=True)
class ContinuumPoint:
    """A point on the continuum: a hash value owned by a server index."""

    index: int
    value: int


@dataclass
class Server:
    """A backend server with a name, port, weight and ejection deadline.

    ``next_retry`` is a timestamp in microseconds; a server whose
    ``next_retry`` lies in the future is considered ejected.
    """

    name: Union[str, bytes]
    port: int = 0
    weight: int = 1
    next_retry: int = 0

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"server weight must be positive, got {self.weight}")

    @property
    def name_bytes(self) -> bytes:
        if isinstance(self.name, bytes):
            return self.name
        return self.name.encode()


@dataclass
class ServerPool:
    """A pool of servers and the continuum built over them."""

    servers: list[Server] = field(default_factory=list)
    auto_eject_hosts: bool = False
    name: str = ""
    continuum: list[ContinuumPoint] = field(default_factory=list)
    nserver_continuum: int = 0
    nlive_server: int = 0
    next_rebuild: int = 0


def _usec_now() -> int:
    return int(time.time() * 1_000_000)


def _f32(x: float) -> float:
    return struct.unpack("f", struct.pack("f", x))[0]


def _count_live(pool: ServerPool, now: int) -> tuple[int, int]:
    """Count live servers and their total weight, updating rebuild times."""
    nlive = 0
    total_weight = 0
    pool.next_rebuild = 0
    for server in pool.servers:
        if pool.auto_eject_hosts:
            if server.next_retry <= now:
                server.next_retry = 0
                nlive += 1
            elif pool.next_rebuild == 0 or server.next_retry < pool.next_rebuild:
                pool.next_rebuild = server.next_retry
        else:
            nlive += 1
        if not pool.auto_eject_hosts or server.next_retry <= now:
            total_weight += server.weight
    pool.nlive_server = nlive
    return nlive, total_weight


def _live_servers(pool: ServerPool, now: int):
    for server_index, server in enumerate(pool.servers):
        if pool.auto_eject_hosts and server.next_retry > now:
            continue
        yield server_index, server


def ketama_hash(key, alignment: int) -> int:
    """Four bytes of the key's MD5 digest at ``alignment``, read little-endian."""
    if not 0 <= alignment < 4:
        raise ValueError(f"alignment must be in 0..3, got {alignment}")
    digest = md5_signature(key)
    start = alignment * 4
    return int.from_bytes(digest[start:start + 4], "little")


def _ketama_points(server: Server, total_weight: int, nlive: int) -> int:
    pct = _f32(_f32(float(server.weight)) / _f32(float(total_weight)))
    scaled = _f32(pct * KETAMA_POINTS_PER_SERVER)
    scaled = _f32(scaled / 4)
    scaled = _f32(scaled * _f32(float(nlive)))
    return int(math.floor(_f32(scaled + 0.0000000001))) * 4


def ketama_update(pool: ServerPool, now: Optional[int] = None) -> None:
    """Rebuild the pool's continuum with weighted ketama points.

    Raises ValueError if the pool has no servers.
    """
    if not pool.servers:
        raise ValueError("ketama distribution needs at least one server")
    if now is None:
        now = _usec_now()

    nlive, total_weight = _count_live(pool, now)
    if nlive == 0:
        return

    if nlive > pool.nserver_continuum:
        pool.nserver_continuum = nlive + KETAMA_CONTINUUM_ADDITION

    pointer_per_hash = 4
    points: list[ContinuumPoint] = []
    for server_index, server in _live_servers(pool, now):
        pointer_per_server = _ketama_points(server, total_weight, nlive)
        name = server.name_bytes
        for pointer_index in range(pointer_per_server // pointer_per_hash):
            host = (name + b"-" + str(pointer_index).encode())[:KETAMA_MAX_HOSTLEN - 1]
            points.extend(
                ContinuumPoint(server_index, ketama_hash(host, x))
                for x in range(pointer_per_hash)
            )

    points.sort(key=lambda point: point.value)
    pool.continuum = points


def ketama_dispatch(continuum: Sequence[ContinuumPoint], hash_value: int) -> int:
    """Server index of the first point at or after ``hash_value``, wrapping."""
    if not continuum:
        raise ValueError("continuum is empty")
    position = bisect_left(continuum, hash_value, key=lambda point: point.value)
    if position == len(continuum):
        position = 0
    return continuum[position].index


def modula_update(pool: ServerPool, now: Optional[int] = None) -> None:
    """Rebuild the continuum with one slot per unit of live server weight."""
    if now is None:
        now = _usec_now()

    nlive, total_weight = _count_live(pool, now)
    if nlive == 0:
        return

    if total_weight > pool.nserver_continuum:
        pool.nserver_continuum = total_weight + MODULA_CONTINUUM_ADDITION

    pool.continuum = [
        ContinuumPoint(server_index, 0)
        for server_index, server in _live_servers(pool, now)
        for _ in range(server.weight)
    ]


def modula_dispatch(continuum: Sequence[ContinuumPoint], hash_value: int) -> int:
    """Server index at slot ``hash_value % len(continuum)``."""
    if not continuum:
        raise ValueError("continuum is empty")
    return continuum[hash_value % len(continuum)].index


def random_update(pool: ServerPool, now: Optional[int] = None) -> None:
    """Rebuild the continuum with one slot per live server."""
    if now is None:
        now = _usec_now()

    nlive, _ = _count_live(pool, now)
    if nlive == 0:
        return

    if nlive > pool.nserver_continuum:
        pool.nserver_continuum = nlive + RANDOM_CONTINUUM_ADDITION
        _rng.seed(int(time.time()))

    pool.continuum = [
        ContinuumPoint(server_index, 0) for server_index, _ in _live_servers(pool, now)
    ]


def random_dispatch(continuum: Sequence[ContinuumPoint], hash_value: int) -> int:
    """Server index of a randomly chosen slot; the hash is ignored."""
    if not continuum:
        raise ValueError("continuum is empty")
    return continuum[_rng.randrange(len(continuum))].index