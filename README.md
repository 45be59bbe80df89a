# nutkit

Building blocks for a caching proxy that spreads keys across a pool of
memcached or redis servers:

- key hash functions: one-at-a-time, MD5, CRC16, CRC32, CRC32a, FNV-1 and
  FNV-1a (32 and 64 bit variants), Hsieh, Murmur and Jenkins;
- server distribution: ketama consistent hashing, modula and random, with
  weights and automatic ejection of failing hosts;
- a small chained hash table keyed by bytes with a pluggable hash function;
- an event base, built on the standard `selectors` module, for watching
  connections for reads and writes.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Hashing keys

Every hash function takes the key as a bytes-like object and returns an
unsigned integer of at most 32 bits.

```python
from nutkit.fnv import hash_fnv1a_64
from nutkit.hashkit import HashType, hash_function, hash_key

hash_fnv1a_64(b"user:1000")
hash_key(HashType.MURMUR, b"user:1000")

crc = hash_function("crc32a")      # a HashType or its configuration name
crc(b"user:1000")
```

`hash_function` raises `ValueError` for an unknown name. `HashType` lists
the hash functions and `DistType` the distribution strategies (`ketama`,
`modula`, `random`), each valued by its configuration name.

Modules: `nutkit.crc` (`hash_crc16`, `hash_crc32`, `hash_crc32a`),
`nutkit.fnv` (`hash_fnv1_64`, `hash_fnv1a_64`, `hash_fnv1_32`,
`hash_fnv1a_32`), `nutkit.hsieh` (`hash_hsieh`), `nutkit.murmur`
(`hash_murmur`), `nutkit.one_at_a_time` (`hash_one_at_a_time`),
`nutkit.jenkins` (`hash_jenkins`) and `nutkit.md5`. `md5_signature` returns
the full 16-byte digest; `hash_md5` reads its first four bytes as a
little-endian integer.

## Choosing a server

`nutkit.distribution` builds a continuum for a `ServerPool` of `Server`
entries and maps a key hash to an index into `pool.servers`.

```python
from nutkit.distribution import Server, ServerPool, ketama_dispatch, ketama_update
from nutkit.hashkit import HashType, hash_key

pool = ServerPool(servers=[
    Server(name="10.0.0.1:11211", weight=1),
    Server(name="10.0.0.2:11211", weight=2),
])
ketama_update(pool, now=0)

index = ketama_dispatch(pool.continuum, hash_key(HashType.FNV1A_64, b"user:1000"))
```

`modula_update` / `modula_dispatch` and `random_update` / `random_dispatch`
work the same way; `random_dispatch` ignores the hash. `now` is a timestamp
in microseconds and defaults to the current time. With `auto_eject_hosts`
set on the pool, servers whose `next_retry` lies after `now` are left out,
and `pool.next_rebuild` is set to the earliest such retry time. A server's
weight must be positive, `ketama_update` raises `ValueError` for a pool
with no servers, and the dispatch functions raise `ValueError` for an empty
continuum.

## Hash table

```python
from nutkit.assoc import HashTable
from nutkit.murmur import hash_murmur

table = HashTable(hash_murmur, 64)
table.set(b"alpha", 1)
table.find(b"alpha")      # 1
table.find(b"beta")       # None
table.delete(b"alpha")
len(table)                # 0
```

The bucket count is the requested size rounded up to a power of two. Keys
may be `str` (encoded as UTF-8) or bytes-like, and must not be empty.
`insert` raises `KeyError` if the key is already present; `set` replaces
it. Stored data may not be `None`. The table also supports `in` and
iteration over its keys.

## Events

`nutkit.event.EventBase` watches connections. A connection is any object
with an `sd` attribute holding its file descriptor and boolean attributes
`recv_active` and `send_active`, which the event base keeps up to date.

```python
from nutkit.event import EventBase, EventFlag

def on_event(conn, events):
    if events & EventFlag.READ:
        ...

with EventBase(callback=on_event) as base:
    base.add_conn(conn)     # watch for reading and writing
    base.del_out(conn)      # reading only
    base.wait(100)          # milliseconds; negative waits forever
    base.del_conn(conn)
```

`wait` calls the callback once per ready connection and returns how many
there were; waiting with a timeout of `-1` that returns nothing raises
`RuntimeError`. `loop_stats(callback, stats)` waits repeatedly on
`stats.sd` with a period of `stats.interval` milliseconds, calling
`callback(stats, nready)` after each wait until it returns `False`.

## What it does not do

nutkit is a library of parts. It has no command to run, does not read a
configuration file, and does not itself accept client connections or talk
to memcached or redis servers; putting the parts together into a running
proxy is left to the caller.