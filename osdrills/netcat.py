"""A small netcat: relay or run a command over TCP, UDP or Unix domain sockets."""

from __future__ import annotations

import getopt
import os
import re
import select
import signal
import socket
import subprocess
import sys
from dataclasses import dataclass
from typing import BinaryIO

from osdrills.endpoints import EndpointError, open_endpoint, parse_spec

USAGE = "Usage: mynetcat [-e <value>] [-b <value>] [-i <value>] [-o <value>] [-t <value>]"
BOTH_CONFLICT_MESSAGE = "Error: Option -b cannot be used with -i or -o"
BUFFER_SIZE = 1024

_ATOI = re.compile(r"\s*[+-]?\d+")


class UsageError(ValueError):
    """Raised when the command line or the command to run is malformed."""


class _Timeout(Exception):
    """Raised from the alarm handler when the time limit runs out."""


@dataclass(frozen=True)
class Options:
    """Parsed command-line options."""

    execute: str | None = None
    both: str | None = None
    input: str | None = None
    output: str | None = None
    timeout: int | None = None


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group()) if match else 0


def split_command(text: str) -> list[str]:
    """Split a command line on spaces, dropping empty fields."""
    words = [word for word in text.split(" ") if word]
    if not words:
        raise UsageError("No arguments provided")
    return words


def run_program(command: str, stdin=None, stdout=None) -> int:
    """Run ``command`` with the given standard input and output; return its exit status.

    ``stdin`` and ``stdout`` may be sockets, files or None to inherit ours.
    """
    words = split_command(command)
    sys.stdout.flush()
    try:
        completed = subprocess.run(words, stdin=stdin, stdout=stdout, check=False)
    except OSError:
        print("Exec failed", file=sys.stderr)
        return 1
    finally:
        sys.stdout.flush()
    return completed.returncode


def parse_args(argv: list[str]) -> Options:
    """Parse -e, -b, -i, -o and -t options."""
    if not argv:
        raise UsageError(USAGE)
    try:
        opts, _ = getopt.gnu_getopt(argv, "e:b:i:o:t:")
    except getopt.GetoptError as error:
        raise UsageError(USAGE) from error
    values = {flag[1]: value for flag, value in opts}
    options = Options(
        execute=values.get("e"),
        both=values.get("b"),
        input=values.get("i"),
        output=values.get("o"),
        timeout=_atoi(values["t"]) if "t" in values else None,
    )
    if options.both is not None and (options.input is not None or options.output is not None):
        raise UsageError(BOTH_CONFLICT_MESSAGE)
    return options


def chat(
    input_sock: socket.socket | None,
    output_sock: socket.socket | None,
    stdin: BinaryIO,
    stdout: BinaryIO,
) -> None:
    """Copy ``input_sock`` to ``stdout`` and ``stdin`` to ``output_sock`` until either ends.

    A missing socket means that direction is not relayed.
    """
    watched: list = []
    if input_sock is not None:
        watched.append(input_sock)
    if output_sock is not None:
        watched.append(stdin)
    if not watched:
        return

    while True:
        readable, _, _ = select.select(watched, [], [])
        if input_sock is not None and input_sock in readable:
            data = input_sock.recv(BUFFER_SIZE)
            if not data:
                return
            stdout.write(data)
            stdout.flush()
        if output_sock is not None and stdin in readable:
            data = os.read(stdin.fileno(), BUFFER_SIZE)
            if not data:
                return
            output_sock.sendall(data)


def _on_alarm(signum, frame) -> None:
    raise _Timeout


def main(argv: list[str] | None = None) -> int:
    """Open the requested endpoints, then run a command over them or relay data."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError as error:
        print(error, file=sys.stderr)
        return 1

    use_alarm = options.timeout is not None and options.timeout > 0
    previous_handler = None
    if use_alarm:
        previous_handler = signal.signal(signal.SIGALRM, _on_alarm)
        signal.alarm(options.timeout)

    opened: list[socket.socket] = []

    def _open(value: str) -> socket.socket:
        sock = open_endpoint(parse_spec(value))
        opened.append(sock)
        return sock

    try:
        input_sock = output_sock = None
        if options.input is not None:
            input_sock = _open(options.input)
        if options.output is not None:
            output_sock = _open(options.output)
        if options.both is not None:
            input_sock = output_sock = _open(options.both)

        if options.execute is not None:
            run_program(options.execute, input_sock, output_sock)
        else:
            chat(input_sock, output_sock, sys.stdin.buffer, sys.stdout.buffer)
    except _Timeout:
        return 0
    except (EndpointError, UsageError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    finally:
        if use_alarm:
            signal.alarm(0)
            signal.signal(signal.SIGALRM, previous_handler)
        for sock in opened:
            sock.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())