import re
from datetime import datetime

import pytest

from talon.console import Console, ConsoleMessage, LogLevel


def test_info_records_message_details():
    console = Console()
    console.info("Play mode started", "main.py", 42)
    [message] = console.messages()
    assert message.level is LogLevel.INFO
    assert message.message == "Play mode started"
    assert message.file == "main.py"
    assert message.line == 42


@pytest.mark.parametrize(
    "method,level",
    [
        ("info", LogLevel.INFO),
        ("warning", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
        ("debug", LogLevel.DEBUG),
    ],
)
def test_each_method_uses_its_level(method, level):
    console = Console()
    returned = getattr(console, method)("text", "f.py", 1)
    assert returned.level is level
    assert console.messages() == [returned]


def test_messages_keep_insertion_order():
    console = Console()
    for text in ["a", "b", "c"]:
        console.debug(text, "f.py", 1)
    assert [m.message for m in console.messages()] == ["a", "b", "c"]


def test_limit_drops_oldest_messages():
    console = Console()
    for index in range(Console.MAX_MESSAGES + 5):
        console.info(f"m{index}", "f.py", index)
    messages = console.messages()
    assert Console.MAX_MESSAGES == 2000
    assert len(messages) == Console.MAX_MESSAGES
    assert messages[0].message == "m5"
    assert messages[-1].message == f"m{Console.MAX_MESSAGES + 4}"


def test_custom_limit():
    console = Console(max_messages=3)
    for index in range(10):
        console.info(str(index), "f.py", index)
    assert [m.message for m in console.messages()] == ["7", "8", "9"]


def test_timestamp_uses_clock():
    console = Console(clock=lambda: datetime(2024, 1, 1, 9, 5, 7))
    message = console.warning("w", "f.py", 3)
    assert message.timestamp == "09:05:07"


def test_default_timestamp_format():
    message = Console().error("e", "f.py", 3)
    assert len(message.timestamp) == 8
    assert re.fullmatch(r"\d\d:\d\d:\d\d", message.timestamp) is not None
    parsed = datetime.strptime(message.timestamp, "%H:%M:%S")
    assert parsed.strftime("%H:%M:%S") == message.timestamp


def test_clear_removes_everything():
    console = Console()
    console.info("x", "f.py", 1)
    console.error("y", "f.py", 2)
    console.clear()
    assert console.messages() == []
    assert len(console) == 0


def test_messages_returns_a_copy():
    console = Console()
    console.info("x", "f.py", 1)
    snapshot = console.messages()
    snapshot.clear()
    assert len(console.messages()) == 1


def test_message_is_immutable():
    message = ConsoleMessage(LogLevel.INFO, "x", "f.py", 1, "00:00:00")
    with pytest.raises(AttributeError):
        message.message = "y"
    assert message.message == "x"


def test_logged_message_is_immutable():
    console = Console()
    message = console.info("x", "f.py", 1)
    with pytest.raises(AttributeError):
        message.line = 99
    assert console.messages()[0].line == 1