# sigtalk

`sigtalk` sends text from one process to another using only two POSIX
signals. Every byte of the message goes out most significant bit first:
`SIGUSR1` carries a 1 bit and `SIGUSR2` carries a 0 bit. Text is sent as
UTF-8, and after the last byte a NUL byte marks the end of the message.

The server rebuilds each byte from eight signals and writes it to its
output. When the NUL byte arrives it writes a newline instead. In
acknowledging mode it also sends `SIGUSR1` back to the sender once the
message is complete. The server keeps one partial byte at a time: when a
signal arrives from a different process than the previous one, any
half-finished byte is discarded and decoding starts afresh.

## Requirements

A POSIX system with `SIGUSR1` and `SIGUSR2`. The server receives signals
through `signal.sigwaitinfo`, which Python provides on Linux; where it is
missing, `Server.serve_forever()` raises `RuntimeError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Start the server in one terminal. It prints its process id (in green) and
then prints every message it receives, each followed by a newline:

```
sigtalk-server
```

From another terminal, send a message to that process id:

```
sigtalk-client <PID> "hello there"
```

The client waits 50 microseconds after each signal.

### Acknowledged delivery

Both commands accept `--ack` (or `-a`) as their first argument:

```
sigtalk-server --ack
sigtalk-client --ack <PID> "hello there"
```

The server then answers each finished message with `SIGUSR1`. The client
waits 80 microseconds after each signal, then waits for that answer and
prints `Message sent successfully` before exiting.

### Errors

- The client needs exactly two arguments after the optional `--ack`;
  otherwise it prints a usage line and exits with status 1.
- The process id is read the way C's `atoi` reads a number (leading
  whitespace, an optional sign, then digits). If it reads as `-1`, or the
  process cannot be signalled, the client prints `Invalid PID` and exits
  with status 1.
- The server takes no arguments other than `--ack`; with any other it
  prints a usage line and exits with status 1. It stops cleanly on
  Ctrl-C.

## Library

### `sigtalk.protocol`

- `encode(message)` yields the bits (0 or 1) for a `str` or `bytes`
  message, NUL terminator included.
- `decode(bits)` returns the bytes a server would print for those bits:
  each NUL becomes a newline and trailing bits that do not complete a
  byte are dropped.
- `BitDecoder().feed(sender, bit)` takes one bit and returns the
  completed byte value once eight bits have arrived from the same sender
  (0 marks the end of a message), otherwise `None`. A bit other than 0 or
  1 raises `ValueError`. `reset()` forgets the partial byte and the
  sender.

### `sigtalk.client`

- `parse_pid(text)` parses a process id; `-1` raises `ValueError`.
- `send_message(pid, message, delay=50e-6, kill=None)` sends every bit
  and returns the number of signals sent. `kill` is the function that
  delivers each signal (`os.kill` by default), so a stand-in can record
  the signals instead.
- `main(argv=None)` runs the `sigtalk-client` command and returns its
  exit status.

### `sigtalk.server`

- `Server(output=None, acknowledge=False, kill=None)` writes to a binary
  stream (standard output by default).
- `handle(signum, sender)` processes one received signal and returns the
  byte it completed, if any.
- `serve_forever()` blocks `SIGUSR1` and `SIGUSR2` and handles them as
  they arrive, with the sending process id as the sender.
- `main(argv=None)` runs the `sigtalk-server` command.

### Helpers

- `sigtalk.chars`: `atoi`, `itoa`, `absolute`, and the ASCII tests and
  case changes `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper` (each accepts a character code or a
  one-character string).
- `sigtalk.strings`: `split`, `strtrim`, `substr`, `strnstr`, `strcmp`,
  `strncmp`, `strchr`, `strrchr`, `strjoin` and `strmapi`. Positions are
  returned as indices, and `None` where nothing is found.
- `sigtalk.printf`: `format_printf(fmt, *args)` and
  `printf(fmt, *args, stream=None)` for the `%c %s %d %i %u %x %X %p %%`
  conversions, with 32-bit integer rules, plus `format_number(n, base,
  upper)` and `format_pointer(address)`. `printf` returns the number of
  characters written.
- `sigtalk.linereader`: `LineReader(stream, buffer_size=10)` and
  `read_lines(stream, buffer_size=10)` read a text or binary stream in
  fixed-size chunks and return lines with their trailing newline;
  `readline()` returns `None` at the end of the stream.

## Limitations

Delivery is not guaranteed. Signals of the same kind that arrive before
the server handles the previous one may be merged by the system, and
nothing is resent; the fixed delays between signals are the only pacing.
Without `--ack` the client gets no confirmation that a message arrived.