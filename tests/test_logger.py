import csv
import math

import pytest

from quatkit import Quaternion
from quatkit.logger import CSVLogger


def read_rows(path):
    with open(path, "r", newline="") as f:
        return list(csv.reader(f))


@pytest.fixture
def step_rotation():
    """Ten-degree increment about Z."""
    return Quaternion.from_axis_angle(math.radians(10), [0, 0, 1])


def test_logger_basic_io(tmp_path):
    """Logger creates file and writes header + data."""
    log_path = tmp_path / "test_basic.csv"

    with CSVLogger(log_path, buffer_size=1) as logger:
        logger.log(0, Quaternion(1, 2, 3, 4))

    rows = read_rows(log_path)
    assert rows[0] == ["step", "a", "b", "c", "d", "norm", "unit"]
    assert len(rows) == 2
    assert rows[1][0] == "0"
    assert [float(x) for x in rows[1][1:5]] == [1.0, 2.0, 3.0, 4.0]
    assert float(rows[1][5]) == pytest.approx(math.sqrt(30.0))
    assert rows[1][6] == "0"


def test_logger_buffering(tmp_path, step_rotation):
    """Rows stay in memory until the buffer fills or flush is called."""
    log_path = tmp_path / "test_buffer.csv"
    logger = CSVLogger(log_path, buffer_size=5)

    q = Quaternion.identity()
    for step in range(3):
        q.multiply_in_place(step_rotation)
        logger.log(step, q)

    # Only the header has reached disk
    assert len(read_rows(log_path)) == 1

    for step in range(3, 5):
        q.multiply_in_place(step_rotation)
        logger.log(step, q)
    assert len(read_rows(log_path)) == 6

    logger.log(5, q)
    logger.close()
    rows = read_rows(log_path)
    assert len(rows) == 7
    assert all(row[-1] == "1" for row in rows[1:])


def test_logger_selected_fields(tmp_path):
    log_path = tmp_path / "norm_only.csv"
    with CSVLogger(log_path, fields=["norm"]) as logger:
        logger.log(0.5, Quaternion(0, 3, 4, 0))

    rows = read_rows(log_path)
    assert rows[0] == ["step", "norm"]
    assert rows[1][0] == "0.5"
    assert float(rows[1][1]) == pytest.approx(5.0)


def test_logger_invalid_fields(tmp_path):
    with pytest.raises(ValueError, match="Invalid fields"):
        CSVLogger(tmp_path / "x.csv", fields=["q", "euler"])


def test_logger_creates_parent_dirs(tmp_path):
    log_path = tmp_path / "nested" / "dir" / "log.csv"
    with CSVLogger(log_path) as logger:
        logger.log(0, Quaternion.identity())
    assert log_path.exists()


def test_logger_log_after_close_keeps_data(tmp_path):
    """A closed logger refuses new rows instead of truncating the file."""
    log_path = tmp_path / "closed.csv"
    logger = CSVLogger(log_path)
    logger.log(0, Quaternion.identity())
    logger.close()

    with pytest.raises(ValueError, match="logger is closed"):
        logger.log(1, Quaternion.identity())
    with pytest.raises(ValueError, match="logger is closed"):
        with logger:
            pass

    rows = read_rows(log_path)
    assert rows[0] == ["step", "a", "b", "c", "d", "norm", "unit"]
    assert len(rows) == 2
    assert rows[1][0] == "0"


def test_logger_close_is_idempotent(tmp_path):
    log_path = tmp_path / "twice.csv"
    with CSVLogger(log_path) as logger:
        logger.log(0, Quaternion.identity())
    logger.close()
    assert len(read_rows(log_path)) == 2
