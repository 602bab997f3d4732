"""Receives messages sent one bit per signal and writes them to standard output."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from typing import BinaryIO, Callable, Optional, Sequence

from sigtalk.fmt import printf
from sigtalk.protocol import Decoder

_BANNER = "\033[94mServer PID:\033[0m \033[96m%d\033[0m\n"
_WAITING = "\033[90mWaiting for a message...\033[0m\n"
_ACK_FAILED = "\033[91mError: Failed to send ACK to client.\033[0m\n"


class Server:
    """Decodes bits from SIGUSR1 (one) and SIGUSR2 (zero) and acknowledges each."""

    def __init__(
        self,
        *,
        out: Optional[BinaryIO] = None,
        kill: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        self._out = out
        self._kill = kill if kill is not None else os.kill
        self._decoder = Decoder()

    @property
    def _stream(self) -> BinaryIO:
        return self._out if self._out is not None else sys.stdout.buffer

    def handle(self, signum: int, sender: int) -> Optional[int]:
        """Process one signal from ``sender``; return the byte it completed, if any.

        A completed zero byte ends the message and is answered with SIGUSR1;
        any other byte is written out. Every signal is acknowledged with SIGUSR2.
        """
        byte = self._decoder.feed(signum == signal.SIGUSR1)
        if byte is not None:
            if byte == 0:
                with contextlib.suppress(OSError):
                    self._kill(sender, signal.SIGUSR1)
            else:
                stream = self._stream
                stream.write(bytes([byte]))
                stream.flush()
        try:
            self._kill(sender, signal.SIGUSR2)
        except OSError:
            printf(_ACK_FAILED)
        return byte

    def serve(self) -> None:
        """Announce the process id and handle incoming signals forever."""
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        printf(_BANNER, os.getpid())
        printf(_WAITING)
        while True:
            info = signal.sigwaitinfo(signals)
            self.handle(info.si_signo, info.si_pid)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: run the server until interrupted."""
    try:
        Server().serve()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())