"""Edge of the event loop: readiness notification for connections.

A connection is any object with an ``sd`` attribute holding its file
descriptor and the boolean attributes ``recv_active`` and ``send_active``,
which this module keeps in step with what is being watched.
"""

from __future__ import annotations

import selectors
from enum import IntFlag
from typing import Any, Callable, Optional

EVENT_SIZE = 1024


class EventFlag(IntFlag):
    """Event bits passed to callbacks."""

    READ = 0x0000FF
    WRITE = 0x00FF00
    ERR = 0xFF0000


EventCallback = Callable[[Any, EventFlag], Any]


def _timeout_seconds(timeout_ms: int) -> Optional[float]:
    return None if timeout_ms < 0 else timeout_ms / 1000


class EventBase:
    """Watches connections for readability and writability."""

    def __init__(self, nevent: int = EVENT_SIZE,
                 callback: Optional[EventCallback] = None) -> None:
        if nevent <= 0:
            raise ValueError(f"nevent must be positive, got {nevent}")
        self.nevent = nevent
        self.callback = callback
        self._selector: Optional[selectors.BaseSelector] = selectors.DefaultSelector()

    @property
    def selector(self) -> selectors.BaseSelector:
        if self._selector is None:
            raise RuntimeError("event base is closed")
        return self._selector

    def close(self) -> None:
        """Release the underlying selector; closing twice is harmless."""
        if self._selector is not None:
            self._selector.close()
            self._selector = None

    def __enter__(self) -> "EventBase":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def add_in(self, conn) -> None:
        """Watch the connection for reading only."""
        if conn.recv_active:
            return
        self.selector.modify(conn.sd, selectors.EVENT_READ, conn)
        conn.recv_active = True

    def del_in(self, conn) -> None:
        """Reading interest is never dropped on its own; this does nothing."""

    def add_out(self, conn) -> None:
        """Watch the connection for writing as well as reading."""
        if not conn.recv_active:
            raise RuntimeError("connection is not watched for reading")
        if conn.send_active:
            return
        self.selector.modify(conn.sd, selectors.EVENT_READ | selectors.EVENT_WRITE, conn)
        conn.send_active = True

    def del_out(self, conn) -> None:
        """Stop watching the connection for writing."""
        if not conn.recv_active:
            raise RuntimeError("connection is not watched for reading")
        if not conn.send_active:
            return
        self.selector.modify(conn.sd, selectors.EVENT_READ, conn)
        conn.send_active = False

    def add_conn(self, conn) -> None:
        """Start watching a connection for both reading and writing."""
        self.selector.register(conn.sd, selectors.EVENT_READ | selectors.EVENT_WRITE, conn)
        conn.send_active = True
        conn.recv_active = True

    def del_conn(self, conn) -> None:
        """Stop watching a connection altogether."""
        self.selector.unregister(conn.sd)
        conn.recv_active = False
        conn.send_active = False

    def wait(self, timeout: int) -> int:
        """Wait up to ``timeout`` milliseconds (negative: forever) for events.

        The callback is called once per ready connection with its event
        bits. Returns the number of ready connections.
        """
        ready = self.selector.select(_timeout_seconds(timeout))[: self.nevent]
        for key, mask in ready:
            events = EventFlag(0)
            if mask & selectors.EVENT_READ:
                events |= EventFlag.READ
            if mask & selectors.EVENT_WRITE:
                events |= EventFlag.WRITE
            if self.callback is not None:
                self.callback(key.data, events)
        if not ready and timeout == -1:
            raise RuntimeError("wait with no timeout returned no events")
        return len(ready)


def loop_stats(callback: Callable[[Any, int], Any], stats) -> None:
    """Run the stats loop on ``stats.sd`` with period ``stats.interval`` ms.

    After each wait the callback gets ``stats`` and the number of ready
    descriptors (0 or 1). The loop runs until the callback returns False.
    """
    with selectors.DefaultSelector() as selector:
        selector.register(stats.sd, selectors.EVENT_READ)
        timeout = _timeout_seconds(stats.interval)
        while True:
            nready = len(selector.select(timeout))
            if callback(stats, nready) is False:
                break