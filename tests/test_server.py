import io
import signal

from sigtalk.protocol import char_bits
from sigtalk.server import Server


def _signal_for(bit):
    return signal.SIGUSR1 if bit else signal.SIGUSR2


def _recording_server():
    out = io.BytesIO()
    calls = []
    server = Server(out=out, kill=lambda pid, sig: calls.append((pid, sig)))
    return server, out, calls


def _send(server, byte, sender=4242):
    return [server.handle(_signal_for(bit), sender) for bit in char_bits(byte)]


def test_byte_is_written_and_each_bit_acknowledged():
    server, out, calls = _recording_server()
    results = _send(server, ord("A"))
    assert results[:7] == [None] * 7
    assert results[7] == ord("A")
    assert out.getvalue() == b"A"
    assert calls == [(4242, signal.SIGUSR2)] * 8


def test_zero_byte_reports_completion_before_ack():
    server, out, calls = _recording_server()
    results = _send(server, 0)
    assert results[-1] == 0
    assert out.getvalue() == b""
    assert calls[-2:] == [(4242, signal.SIGUSR1), (4242, signal.SIGUSR2)]
    assert len(calls) == 9


def test_whole_message():
    server, out, calls = _recording_server()
    for byte in b"minitalk\0":
        _send(server, byte, sender=77)
    assert out.getvalue() == b"minitalk"
    assert calls.count((77, signal.SIGUSR1)) == 1
    assert calls.count((77, signal.SIGUSR2)) == 8 * len(b"minitalk\0")


def test_ack_failure_is_reported(capsys):
    def kill(pid, sig):
        raise ProcessLookupError

    server = Server(out=io.BytesIO(), kill=kill)
    assert server.handle(signal.SIGUSR2, 4242) is None
    assert "Failed to send ACK to client." in capsys.readouterr().out


def test_completion_failure_is_ignored(capsys):
    acks = []

    def kill(pid, sig):
        if sig == signal.SIGUSR1:
            raise ProcessLookupError
        acks.append(sig)

    server = Server(out=io.BytesIO(), kill=kill)
    results = _send(server, 0)
    assert results[-1] == 0
    assert acks == [signal.SIGUSR2] * 8
    assert capsys.readouterr().out == ""