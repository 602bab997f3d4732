# sigtalk

sigtalk passes text from one process to another on the same machine using
nothing but the two user signals, `SIGUSR1` and `SIGUSR2`. The server waits
for signals with `signal.sigwaitinfo`, so it runs on Linux and other systems
that provide it.

## How it works

Each byte of the message is sent as eight signals, least significant bit
first: `SIGUSR1` stands for a 1 bit and `SIGUSR2` for a 0 bit. After every
bit the server answers with `SIGUSR2` as an acknowledgement, and the client
waits for that answer before sending the next bit. The message ends with a
zero byte; when the server sees it, it sends `SIGUSR1` back, and the client
prints "Message received completely!".

## Command line

Install the package, then start the server in one terminal:

```
sigtalk-server
```

It prints its process id and waits, writing every byte it receives to
standard output. It runs until interrupted (Ctrl-C ends it with status 130).
In another terminal, send it a message:

```
sigtalk-client <PID> "Hello there"
```

The message is sent as the bytes of the argument, up to any zero byte. The
client exits with status 1 if it is given the wrong number of arguments
(printing a usage line), if the process id does not parse to a positive
number, or if a signal cannot be delivered.

## Library

- `sigtalk.protocol.char_bits(byte)` returns the eight bits of a byte (0 to
  255, else `ValueError`), least significant first.
- `sigtalk.protocol.message_bits(message)` yields the bits of a `str`
  (encoded as UTF-8) or `bytes` message followed by the terminating zero
  byte; a message that already holds a zero byte raises `ValueError`.
- `sigtalk.protocol.Decoder` turns bits back into bytes: `feed(bit)` returns
  the finished byte after every eighth bit and `None` otherwise, `pending`
  tells how many bits of the current byte have arrived, and `reset()`
  discards a partly received byte.
- `sigtalk.protocol.parse_int(text)` reads an integer the way the client
  reads a process id: leading whitespace, an optional sign, then digits,
  stopping at the first non-digit and wrapping to 32 bits; no digits gives 0.
- `sigtalk.client.Client(pid, *, kill=None, poll_interval=0.0001,
  install_handlers=True)` sends to one process. `send_byte(byte)` and
  `send_message(message)` block until every bit is acknowledged, and raise
  `OSError` if a signal cannot be delivered. `kill` replaces `os.kill` for
  sending; with `install_handlers` false no signal handlers are installed.
- `sigtalk.server.Server(*, out=None, kill=None)` receives. `handle(signum,
  sender)` processes one signal from process `sender`, writes a completed
  non-zero byte to `out` (standard output by default), acknowledges the
  signal, and returns the completed byte or `None`. `serve()` blocks the two
  user signals, prints the process id, and handles incoming signals forever.
- `sigtalk.fmt.render(template, *args)` formats text with the conversions
  `%c %s %d %i %u %x %X %p %%`; `sigtalk.fmt.printf(template, *args)` writes
  the result to standard output and returns the number of characters
  written. Other characters after `%` produce nothing and take no argument;
  too few arguments raise `TypeError`.

## Limits

Only one message stream is decoded at a time: the server keeps a single
partly received byte, so two clients sending at once will interleave their
bits. Nothing is stored; received text goes only to the output stream.

## Tests

```
pip install -e ".[test]"
pytest
```