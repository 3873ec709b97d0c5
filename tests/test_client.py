import os
import signal
from unittest import mock

import pytest

from sigtalk.client import main, parse_pid, send_message
from sigtalk.protocol import decode


def _bits(calls):
    return [1 if sig == signal.SIGUSR1 else 0 for _, sig in calls]


def test_parse_pid_plain():
    assert parse_pid("4242") == 4242


def test_parse_pid_skips_space_and_trailing_text():
    assert parse_pid("  +77xyz") == 77


def test_parse_pid_rejects_minus_one():
    with pytest.raises(ValueError):
        parse_pid("-1")


def test_send_message_round_trip():
    calls = []
    count = send_message(99, "hello", delay=0, kill=lambda pid, sig: calls.append((pid, sig)))
    assert count == len(calls) == 8 * (len("hello") + 1)
    assert {pid for pid, _ in calls} == {99}
    assert decode(_bits(calls)) == b"hello\n"


def test_send_message_first_byte_is_msb_first():
    calls = []
    send_message(5, "A", delay=0, kill=lambda pid, sig: calls.append((pid, sig)))
    assert _bits(calls)[:8] == [0, 1, 0, 0, 0, 0, 0, 1]
    assert _bits(calls)[8:] == [0] * 8


def test_send_message_utf8():
    calls = []
    send_message(1, "é", delay=0, kill=lambda pid, sig: calls.append((pid, sig)))
    assert decode(_bits(calls)) == "é\n".encode("utf-8")


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_usage_too_many(capsys):
    assert main(["1", "2", "3"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_invalid_pid(capsys):
    assert main(["-1", "hi"]) == 1
    assert "Invalid PID" in capsys.readouterr().out


def test_main_unreachable_pid(capsys):
    with mock.patch("os.kill", side_effect=ProcessLookupError):
        assert main(["4242", "hi"]) == 1
    assert "Invalid PID" in capsys.readouterr().out


def test_main_sends_message():
    calls = []

    def fake_kill(pid, sig):
        calls.append((pid, sig))

    with mock.patch("os.kill", side_effect=fake_kill):
        assert main(["4242", "ok"]) == 0
    assert calls[0] == (4242, 0)
    assert decode(_bits(calls[1:])) == b"ok\n"


def test_main_waits_for_acknowledgement(capsys):
    real_kill = os.kill
    message = "hey"
    expected = 8 * (len(message) + 1)
    sent = []

    def fake_kill(pid, sig):
        if sig == 0:
            return
        sent.append((pid, sig))
        if len(sent) == expected:
            real_kill(os.getpid(), signal.SIGUSR1)

    with mock.patch("os.kill", side_effect=fake_kill):
        assert main(["--ack", "4242", message]) == 0
    assert decode(_bits(sent)) == b"hey\n"
    assert "Message sent successfully" in capsys.readouterr().out