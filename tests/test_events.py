import pytest

from lanprobe.core.models import NavigationEvent
from lanprobe.parsers.events import EventLog


def write(tmp_path, text):
    path = tmp_path / "nav.log"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_parse_events(tmp_path):
    path = write(tmp_path, "# tab url [frame]\r\n"
                           "7 http://100.64.1.10/\r\n"
                           "\n"
                           "  7 http://100.64.1.10/ad 3  \n"
                           "12 http://5.197.4.4:8080/\n")
    events = EventLog(path).parse()
    assert events == [
        NavigationEvent("7", "http://100.64.1.10/"),
        NavigationEvent("7", "http://100.64.1.10/ad", 3),
        NavigationEvent("12", "http://5.197.4.4:8080/"),
    ]
    assert events[0].is_main_frame and not events[1].is_main_frame


def test_empty_file(tmp_path):
    assert EventLog(write(tmp_path, "")).parse() == []


@pytest.mark.parametrize("line,msg", [
    ("7", "line 2: expected"),
    ("7 http://100.64.1.10/ 0 extra", "line 2: expected"),
    ("7 http://100.64.1.10/ top", "line 2: invalid frame id"),
])
def test_malformed_lines(tmp_path, line, msg):
    path = write(tmp_path, f"# header\n{line}\n")
    with pytest.raises(ValueError, match=msg):
        EventLog(path).parse()


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        EventLog(str(tmp_path / "nope.log")).parse()
