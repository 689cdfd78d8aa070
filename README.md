# minitalk

A pair of console commands that send text from one process to another using
nothing but the `SIGUSR1` and `SIGUSR2` signals.

Each byte of the message is sent as eight signals, most significant bit
first: `SIGUSR1` carries a 0 and `SIGUSR2` carries a 1. Text is encoded as
UTF-8 and the message ends with a zero byte. The server acknowledges every
bit with `SIGUSR1`. Once it has received the closing zero byte it answers
with `SIGUSR2`, and the client reports success and exits.

The server waits for signals with `signal.sigwaitinfo`, so it runs only
where Python provides that call, such as Linux.

## Installing

```
pip install .
```

## Running

Start the server in one terminal. It prints its process id, right-aligned
in eight columns, and then waits until it is interrupted with Ctrl-C:

```
minitalk-server
Server PID:   12345
```

From another terminal, send it a message:

```
minitalk-client 12345 "hello there"
```

The server writes each byte to standard output as it arrives and writes a
newline at the end of the message. The client prints
`[INFO] all of the message succsessfuly sent` once the server has
confirmed the end of the message.

The client needs exactly two arguments, the server's process id and the
string to send. With too few or too many it prints an error and a usage line
and exits with status 1. If a signal cannot be delivered, for example because
the process id is wrong, it prints `kill returned -1` with a hint that the
server pid is probably wrong and exits with status 0.

Both commands can also be started as `python -m minitalk.server` and
`python -m minitalk.client`.

## Using it as a library

### Protocol

`minitalk.protocol` holds the wire format and needs no signals:

```python
from minitalk.protocol import BitDecoder, encode_bits

bits = list(encode_bits("hi"))   # 24 bits: 'h', 'i' and the closing zero byte
decoder = BitDecoder()
received = [b for b in map(decoder.feed, bits) if b is not None]
# received == [104, 105, 0]
```

`encode_bits` accepts `str` or `bytes` and stops at the first NUL byte.
`BitDecoder.feed` takes a 0 or 1 and returns the byte it completes, or
`None`; `BitDecoder.pending` is the number of bits gathered toward the
current byte.

### Server and client objects

`minitalk.server.Server(output=None, notify=os.kill)` decodes bits passed to
`Server.handle(signum, sender)`, writes completed bytes to `output` (standard
output by default) and acknowledges through `notify(pid, signum)`.
`Server.serve_forever()` blocks the two signals and handles them as they
arrive.

`minitalk.client.Client(server_pid, message, send=os.kill)` sends the next
bit from `Client.on_signal(signum)` on each acknowledgement and returns
`True` once the server signals the end of the message. `Client.run()` sends
the whole message, waiting for each acknowledgement.

Passing your own `notify` or `send` callable lets both be driven without any
real signals.

### Helpers

- `minitalk.chars`: `atoi` (C-style parsing with 32-bit wrap-around),
  `itoa`, `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`,
  `to_upper`, `to_lower`.
- `minitalk.strings`: `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `memcmp`, `strchr`, `strrchr`. The search functions return an index, or
  `None` when nothing is found.
- `minitalk.printf`: `format_printf(fmt, *args)` returns the formatted text
  and `printf(fmt, *args)` writes it to standard output and returns the
  number of characters written (or -1 when `fmt` is `None`). The
  conversions `c s d i u x X p %` are supported with the `- 0 # space +`
  flags, field width and precision. Missing arguments raise `TypeError`.
- `minitalk.printf_spec.parse_spec` and `minitalk.printf_render` expose the
  parsing of a single conversion and the rendering of a single value.

## Running the tests

```
pip install ".[test]"
pytest
```