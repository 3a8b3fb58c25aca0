# minitalk

A tiny messenger that carries text from one process to another using only
POSIX signals. Every bit travels as a signal: `SIGUSR1` stands for 1 and
`SIGUSR2` for 0. After each bit the receiver replies with `SIGUSR2`, and the
sender waits for that reply before it sends the next bit.

A message has two parts:

1. the number of bytes of the text (UTF-8 for `str`) as a 32-bit number,
   most significant bit first;
2. each byte of the text as 8 bits, most significant bit first.

## Installation

```
pip install .
```

The package has no runtime dependencies. The signal transport needs a POSIX
system; the server waits with `signal.sigwaitinfo`, which is available on
Linux but not on every POSIX platform (macOS lacks it).

## Usage

Start the server in one terminal. It prints its process id and then waits
until it is interrupted with Ctrl-C:

```
minitalk-server
```

In another terminal, send text to that process id:

```
minitalk-client 12345 "hello there"
```

The client echoes each bit as it is acknowledged: first the 32 bits of the
length, then a newline, a one-second pause, and the bits of the text. If a
bit is not acknowledged within five seconds it prints `fail` and exits with
status 1. Too few arguments or an invalid process id give exit status 2.

The server prints `SIZE <n>` once the length has arrived, and after every
byte it prints the text received so far between `!!!!` markers.

## Library

### Wire format — `minitalk.protocol`

```python
from minitalk.protocol import encode_message, MessageDecoder

bits = encode_message("hi")
decoder = MessageDecoder()
for bit in bits:
    decoder.feed(bit)
print(decoder.text())   # "hi"
print(decoder.complete) # True
```

- `encode_length(text)`, `encode_text(text)` and `encode_message(text)`
  return lists of bits; `text` may be `str` or bytes. A text longer than
  2**32 - 1 bytes raises `ValueError`.
- `MessageDecoder.feed(bit)` returns the byte a bit completes, otherwise
  `None`. It raises `ValueError` for anything but 0 or 1, or once the message
  is complete. The decoder also offers `length`, `complete`, `data` and
  `text()`.

### Sending — `minitalk.client`

`send_message(pid, text, timeout=5.0)` sends a whole message to a running
server, waiting up to `timeout` seconds for each acknowledgement. It raises
`AcknowledgeTimeout` (a `TimeoutError` carrying `pid` and `timeout`) when the
server stops answering, and `ValueError` for a non-positive pid or timeout.

### Receiving — `minitalk.server`

`SignalServer(output)` writes its progress to `output`. `serve()` prints the
process id and handles bit signals until interrupted. `handle(signum, sender)`
processes a single signal and acknowledges `sender` unless it is `None`, so
the server can be driven by hand. Each finished message is appended to
`SignalServer.messages`.

### Helpers

- `minitalk.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `tolower`, `toupper` for ASCII, taking a character code or a one-character
  string.
- `minitalk.strings`: `atoi`, `itoa`, `split`, `strtrim`, `strnstr`,
  `substr`, `strncmp`, `strchr`, `strrchr`. The search functions return the
  rest of the text from the match, or `None`.
- `minitalk.lines`: `LineReader(stream, buffer_size=1024)` reads lines,
  newline included, from a file object or a file descriptor; `readline()`
  returns `None` at the end, and the reader is iterable.
- `minitalk.printf`: `format_string(fmt, *args)` and
  `print_formatted(fmt, *args, stream=None)` handle `%s %d %i %c %p %x %X %u
  %%`; integers wrap to the width of the matching C type and `None` prints
  as `(null)` for `%s`.

## Limitations

- There is no checksum, retransmission or framing beyond the length header:
  a lost signal corrupts the message in progress.
- The server keeps a single decoder, so it handles one sender at a time;
  bits from two clients at once interleave into garbage.
- Messages are not stored anywhere beyond the in-memory
  `SignalServer.messages` list.

## Tests

```
pip install ".[test]"
pytest
```