"""Sends a message to a server process one bit per signal, waiting for an ack each time."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, Optional, Sequence, Union

from sigtalk.fmt import printf
from sigtalk.protocol import char_bits, message_bits, parse_int

_COMPLETE = "\033[0;32mMessage received completely!\033[0m\n"
_BAD_ARGS = "\033[91mError: Incorrect number of arguments.\033[0m\n"
_USAGE = "\033[33mUsage: ./client <PID> <MESSAGE>\033[0m\n"
_SEND_FAILED = "\033[91mError: Failed to send character.\033[0m\n"
_END_FAILED = "\033[91mError: Failed to send end-of-message signal.\033[0m\n"

_POLL_INTERVAL = 0.0001


class Client:
    """Signal-based sender bound to one server process.

    SIGUSR2 from the server acknowledges a bit; SIGUSR1 reports that the
    whole message arrived.
    """

    def __init__(
        self,
        pid: int,
        *,
        kill: Optional[Callable[[int, int], None]] = None,
        poll_interval: float = _POLL_INTERVAL,
        install_handlers: bool = True,
    ) -> None:
        self.pid = pid
        self._kill = kill if kill is not None else os.kill
        self._poll_interval = poll_interval
        self._acked = False
        if install_handlers:
            signal.signal(signal.SIGUSR2, self._on_signal)
            signal.signal(signal.SIGUSR1, self._on_signal)

    def _on_signal(self, signum: int, frame: object) -> None:
        if signum == signal.SIGUSR2:
            self._acked = True
        elif signum == signal.SIGUSR1:
            printf(_COMPLETE)

    def _send_bit(self, bit: int) -> None:
        self._acked = False
        self._kill(self.pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        while not self._acked:
            time.sleep(self._poll_interval)

    def send_byte(self, byte: int) -> None:
        """Send one byte, blocking until every bit is acknowledged.

        Raises OSError if a signal cannot be delivered.
        """
        for bit in char_bits(byte):
            self._send_bit(bit)

    def send_message(self, message: Union[bytes, str]) -> None:
        """Send a whole message followed by its terminating zero byte."""
        for bit in message_bits(message):
            self._send_bit(bit)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``client <PID> <MESSAGE>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf(_BAD_ARGS)
        printf(_USAGE)
        return 1
    pid = parse_int(args[0])
    if pid <= 0:
        return 1
    client = Client(pid)
    payload = os.fsencode(args[1]).split(b"\0", 1)[0]
    for byte in payload:
        try:
            client.send_byte(byte)
        except OSError:
            printf(_SEND_FAILED)
            return 1
    try:
        client.send_byte(0)
    except OSError:
        printf(_END_FAILED)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())