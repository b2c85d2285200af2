# minitalk

A server that receives text and a client that sends it, both using only
POSIX signals. No sockets or pipes are involved. Each byte is sent as eight
signals, most significant bit first. `SIGUSR1` carries a 1 and `SIGUSR2`
carries a 0. The server answers every bit with `SIGUSR1`, and the client
waits for that answer before it sends the next bit. A NUL byte ends a
message.

The server waits with `signal.sigwaitinfo` and the client with
`signal.sigtimedwait`. Both need a platform that has these calls, such as
Linux.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal:

```
minitalk-server
```

It prints `📡Server ready. PID: <pid>` and then waits for signals until you
interrupt it with Ctrl-C. It takes no arguments.

From another terminal, send it a message:

```
minitalk-client <PID> "hello there"
```

As each byte is completed, the server writes it to standard output. When the
terminating NUL arrives, it also writes `End of message from client <pid>`
on a line of its own.

The PID argument is read the way `minitalk.textutil.atoi` reads it. Leading
whitespace and a sign are accepted, and parsing stops at the first
non-digit. If the client is not given exactly two arguments, it prints a
usage line and exits with status 0. It exits with status 1, with a message,
in three cases: the PID is zero or negative, the PID names no process it may
signal, or a signal cannot be delivered. If a bit is not acknowledged within
the timeout (one second by default), the client prints a notice and goes on
to the next bit.

## Library use

- `minitalk.protocol.bits_of(data)` yields the bits of a byte string (text
  is encoded as UTF-8), most significant bit first.
- `minitalk.protocol.MessageDecoder.feed(bit)` collects bits and returns
  each completed byte. Otherwise it returns `None`. Its `bit_index` property
  tells how far into the current byte it is.
- `minitalk.server.Server(output)` decodes signals into bytes on a binary
  stream (standard output by default). `Server.handle(signum, sender_pid)`
  processes one signal and returns the pid to acknowledge. The sender is
  recorded at the first bit of each byte. A return of 0 means no sender is
  known yet. `Server.serve()` runs the signal loop.
- `minitalk.client.validate_pid(pid)` checks a PID and returns it, or raises
  `ClientError`. `minitalk.client.send_message(pid, message, timeout)` sends
  a message followed by a NUL and returns how many bits went unacknowledged.
- `minitalk.fmt.render(fmt, *args)` formats with the printf subset
  `%c %s %p %d %i %u %x %X %%`, where integers are treated as 32-bit values.
  `minitalk.fmt.print_formatted(fmt, *args, stream=None)` writes the result
  and returns its length.
- `minitalk.textutil` offers C-style helpers: `atoi`, `itoa`, `split`,
  `strtrim`, `substr` and `strnstr`. `strnstr` returns an index, or `None`
  when there is no match.
- `minitalk.linereader.LineReader(fd, buffer_size)` reads lines as bytes
  from a raw file descriptor with `read_line()`, or by iterating over it.
  `LineReaderPool(buffer_size).read_line(fd)` keeps a separate buffer for
  each descriptor from 0 to 1023.

## Limitations

The server keeps a single decoding state. If two clients send at the same
time, their bits are mixed together. Messages are not stored or forwarded
anywhere. They are only written to the server's output stream.

## Running the tests

```
pip install .[test]
pytest
```