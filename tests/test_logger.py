import io
import threading

import pytest

from ptlab.logger import Logger


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_new_log_file_holds_only_header(tmp_path):
    path = tmp_path / "events.log"
    Logger(path)
    assert read_lines(path) == ["threadID,sectionID,event,val,ts,ticket"]


def test_existing_file_is_truncated(tmp_path):
    path = tmp_path / "events.log"
    path.write_text("old content\nmore\n", encoding="utf-8")
    Logger(path)
    assert read_lines(path) == [Logger.HEADER]


def test_messages_written_on_close(tmp_path):
    path = tmp_path / "events.log"
    with Logger(path) as logger:
        logger.add_message("s1,WAIT,0")
        assert read_lines(path) == [Logger.HEADER]
    lines = read_lines(path)
    assert len(lines) == 2
    fields = lines[1].split(",")
    assert fields[0] == f"id_{threading.get_ident()}"
    assert fields[1:4] == ["s1", "WAIT", "0"]
    assert fields[4].isdigit()
    assert fields[5] == "1"


def test_semicolons_split_events_with_same_ticket(tmp_path):
    path = tmp_path / "events.log"
    with Logger(path) as logger:
        logger.add_message("a,X,1;b,Y,2;")
        logger.add_message("c,Z,3")
    body = [line.split(",") for line in read_lines(path)[1:]]
    assert [row[1] for row in body] == ["a", "b", "c"]
    assert [row[-1] for row in body] == ["1", "1", "2"]
    assert body[0][4] == body[1][4]


def test_empty_message_adds_nothing(tmp_path):
    path = tmp_path / "events.log"
    with Logger(path) as logger:
        logger.add_message("")
        logger.add_message("x,E,0")
    body = read_lines(path)[1:]
    assert len(body) == 1
    assert body[0].endswith(",2")


def test_echo_receives_each_line(tmp_path):
    path = tmp_path / "events.log"
    echo = io.StringIO()
    with Logger(path, echo) as logger:
        logger.add_message("a,E,1;b,E,2")
    assert echo.getvalue().splitlines() == read_lines(path)[1:]


def test_save_flushes_and_clears_buffer(tmp_path):
    path = tmp_path / "events.log"
    logger = Logger(path)
    logger.add_message("a,E,1")
    logger.save()
    assert len(read_lines(path)) == 2
    logger.save()
    logger.close()
    assert len(read_lines(path)) == 2


def test_full_buffer_is_flushed_before_next_message(tmp_path):
    path = tmp_path / "events.log"
    logger = Logger(path)
    for i in range(Logger.MAX_MESSAGES + 1):
        logger.add_message(f"m,E,{i}")
    assert len(read_lines(path)) == Logger.MAX_MESSAGES + 1
    logger.close()
    assert len(read_lines(path)) == Logger.MAX_MESSAGES + 2


def test_concurrent_writers_are_served_in_ticket_order(tmp_path):
    path = tmp_path / "events.log"
    per_thread = 50
    workers = 8

    with Logger(path) as logger:
        def work(name):
            for i in range(per_thread):
                logger.add_message(f"{name},E,{i}")

        threads = [threading.Thread(target=work, args=(f"t{k}",)) for k in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

    body = [line.split(",") for line in read_lines(path)[1:]]
    tickets = [int(row[-1]) for row in body]
    assert tickets == list(range(1, per_thread * workers + 1))
    for k in range(workers):
        values = [int(row[3]) for row in body if row[1] == f"t{k}"]
        assert values == list(range(per_thread))


def test_unwritable_path_raises(tmp_path):
    with pytest.raises(OSError):
        Logger(tmp_path / "missing" / "events.log")