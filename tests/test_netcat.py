import io
import os
import socket
import threading

import pytest

from osdrills.endpoints import INVALID_SPEC_MESSAGE
from osdrills.netcat import (
    BOTH_CONFLICT_MESSAGE,
    USAGE,
    Options,
    UsageError,
    chat,
    main,
    parse_args,
    run_program,
    split_command,
)


def test_split_command_drops_empty_fields():
    assert split_command("ls  -l   a") == ["ls", "-l", "a"]


def test_split_command_single_word():
    assert split_command("ttt") == ["ttt"]


@pytest.mark.parametrize("text", ["", "   "])
def test_split_command_empty_raises(text):
    with pytest.raises(UsageError, match="No arguments provided"):
        split_command(text)


def test_parse_args_collects_values():
    options = parse_args(["-e", "ttt 123456789", "-b", "TCPS4050"])
    assert options == Options(execute="ttt 123456789", both="TCPS4050")


def test_parse_args_input_output_and_timeout():
    options = parse_args(["-i", "UDPS4050", "-o", "TCPClocalhost,4455", "-t", "7"])
    assert options.input == "UDPS4050"
    assert options.output == "TCPClocalhost,4455"
    assert options.timeout == 7
    assert options.execute is None


def test_parse_args_timeout_uses_leading_digits():
    assert parse_args(["-t", "12abc"]).timeout == 12


def test_parse_args_empty_is_usage():
    with pytest.raises(UsageError) as info:
        parse_args([])
    assert str(info.value) == USAGE


def test_parse_args_unknown_option():
    with pytest.raises(UsageError):
        parse_args(["-z", "x"])


@pytest.mark.parametrize(
    "argv",
    [["-b", "TCPS1", "-i", "TCPS2"], ["-b", "TCPS1", "-o", "TCPS2"]],
)
def test_parse_args_both_conflicts(argv):
    with pytest.raises(UsageError) as info:
        parse_args(argv)
    assert str(info.value) == BOTH_CONFLICT_MESSAGE


def test_run_program_writes_to_given_stdout(tmp_path):
    target = tmp_path / "out.txt"
    with target.open("wb") as handle:
        status = run_program("echo hello world", stdout=handle)
    assert status == 0
    assert target.read_bytes() == b"hello world\n"


def test_run_program_reads_from_socket(tmp_path):
    sender, receiver = socket.socketpair()
    sender.sendall(b"abc")
    sender.shutdown(socket.SHUT_WR)
    target = tmp_path / "out.txt"
    try:
        with target.open("wb") as handle:
            status = run_program("cat", stdin=receiver, stdout=handle)
    finally:
        sender.close()
        receiver.close()
    assert status == 0
    assert target.read_bytes() == b"abc"


def test_run_program_exec_failure(capsys):
    status = run_program("no-such-command-for-osdrills-tests")
    assert status == 1
    assert "Exec failed" in capsys.readouterr().err


def test_chat_relays_socket_to_stdout():
    remote, local = socket.socketpair()
    remote.sendall(b"hi there")
    remote.close()
    out = io.BytesIO()
    try:
        chat(local, None, io.BytesIO(), out)
    finally:
        local.close()
    assert out.getvalue() == b"hi there"


def test_chat_relays_stdin_to_socket():
    read_fd, write_fd = os.pipe()
    os.write(write_fd, b"payload")
    os.close(write_fd)
    local, remote = socket.socketpair()
    out = io.BytesIO()
    try:
        with os.fdopen(read_fd, "rb") as stdin:
            chat(None, local, stdin, out)
        received = remote.recv(1024)
    finally:
        local.close()
        remote.close()
    assert received == b"payload"
    assert out.getvalue() == b""


def test_chat_without_sockets_writes_nothing():
    out = io.BytesIO()
    chat(None, None, io.BytesIO(), out)
    assert out.getvalue() == b""


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert USAGE in capsys.readouterr().err


def test_main_invalid_spec(capsys):
    assert main(["-b", "FOO1234"]) == 1
    assert INVALID_SPEC_MESSAGE in capsys.readouterr().err


def test_main_unreachable_unix_socket(tmp_path):
    missing = tmp_path / "missing.sock"
    assert main(["-i", f"UDSCS{missing}"]) == 1


def test_main_runs_command_with_unix_socket_input(tmp_path, capfd):
    path = str(tmp_path / "s.sock")
    listener = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    listener.bind(path)
    listener.listen(1)

    def serve():
        connection, _ = listener.accept()
        connection.sendall(b"ping\n")
        connection.close()

    worker = threading.Thread(target=serve)
    worker.start()
    try:
        status = main(["-e", "cat", "-i", f"UDSCS{path}"])
    finally:
        worker.join()
        listener.close()
    assert status == 0
    assert "ping\n" in capfd.readouterr().out