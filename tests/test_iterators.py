import logging
import pytest
import time

import warnings

warnings.filterwarnings("error")
warnings.filterwarnings("ignore", category=ImportWarning)
warnings.filterwarnings("ignore", category=PendingDeprecationWarning)

import progbar


def test_sequence_iterator():
    it = progbar.ProgressIterator(["a", "b", "c"], size=10)
    assert len(it) == 3
    assert it.progress.max_progress == 3

    assert next(it) == "a"
    assert it.progress.progress == 1
    assert next(it) == "b"
    assert next(it) == "c"
    assert it.progress.progress == 3
    with pytest.raises(StopIteration):
        next(it)
    # stays exhausted
    with pytest.raises(StopIteration):
        next(it)

    it.reset()
    assert it.progress.progress == 0
    assert it.progress.speed == 0
    assert next(it) == "a"


def test_sequence_iterator_output(capsys):
    items = list(progbar.ProgressIterator(["x", "y", "z"], format="%curr%/%max%"))
    assert items == ["x", "y", "z"]
    out, err = capsys.readouterr()
    assert out == "\r1/3\r2/3\r3/3", repr(out)


def test_sequence_iterator_given_bar():
    pb = progbar.ProgressBar(format="%prog%", max=10, pipe_handler=lambda b: None)
    it = progbar.ProgressIterator(range(4), progress=pb)
    assert it.progress is pb
    assert list(it) == [0, 1, 2, 3]
    assert pb.progress == 4
    assert pb.line() == "40.00"


def test_sequence_iterator_empty():
    it = progbar.ProgressIterator([])
    assert it.progress.max_progress == 1
    assert list(it) == []
    assert it.progress.progress == 0


def test_range_iterator():
    it = progbar.RangeIterator(0, 10, 2, size=10)
    assert it.progress.max_progress == 5
    assert list(it) == [0, 2, 4, 6, 8]
    assert it.progress.progress == 5
    assert it.current == 10


def test_range_iterator_negative_step():
    it = progbar.RangeIterator(10, 0, -3, size=10)
    assert it.progress.max_progress == 3
    assert list(it) == [10, 7, 4, 1]
    # four steps on a bar of three, the last one is clamped
    assert it.progress.progress == 3


def test_range_iterator_zero_step(caplog):
    it = progbar.RangeIterator(0, 3, 0, size=10)
    assert it.step == progbar.DEFAULT_STEP == 1
    assert list(it) == [0, 1, 2]
    assert "step must not be 0" in caplog.text


def test_package_log_level_applies_to_all_modules(caplog):
    assert progbar.log is logging.getLogger("progbar")
    level = progbar.log.level
    try:
        progbar.log.setLevel(logging.ERROR)
        progbar.RangeIterator(0, 3, 0, size=10)
        progbar.ProgressBar(max=0, pipe_handler=lambda b: None)
        assert caplog.records == []

        progbar.log.setLevel(logging.WARNING)
        progbar.RangeIterator(0, 3, 0, size=10)
        progbar.ProgressBar(max=0, pipe_handler=lambda b: None)
        names = [r.name for r in caplog.records]
        assert names == ["progbar.iterators", "progbar.progress"], "{}".format(names)
    finally:
        progbar.log.setLevel(level)


def test_range_iterator_empty():
    assert list(progbar.RangeIterator(5, 5, size=10)) == []
    assert list(progbar.RangeIterator(5, 0, size=10)) == []
    it = progbar.RangeIterator(0, 5, -1, size=10)
    assert it.progress.max_progress == 1
    assert list(it) == []


def test_range_iterator_reset():
    it = progbar.RangeIterator(3, 6, size=10)
    assert list(it) == [3, 4, 5]
    it.reset()
    assert it.progress.progress == 0
    assert next(it) == 3


def test_range_convenience_constructors():
    it = progbar.range_iterator(0, 3)
    assert it.step == 1
    assert it.progress.format == progbar.DEFAULT_FORMAT
    assert it.progress.bar_size == progbar.DEFAULT_BAR_SIZE
    assert it.progress.bar_char == progbar.DEFAULT_BAR_CHAR
    assert list(it) == [0, 1, 2]

    it = progbar.step_range_iterator(5, 0, -1)
    assert list(it) == [5, 4, 3, 2, 1]
    assert it.progress.progress == 5


def test_stream():
    items = ["a", "b", "c", "d"]
    with progbar.ProgressIterator(items, size=10).stream() as s:
        assert list(s) == items
    assert not s.is_alive()

    with progbar.RangeIterator(10, 0, -3, size=10).stream() as s:
        assert list(s) == [10, 7, 4, 1]
        with pytest.raises(StopIteration):
            next(s)


def test_stream_producer_runs_one_ahead():
    it = progbar.RangeIterator(0, 100, size=10)
    s = it.stream()
    assert next(s) == 0
    time.sleep(0.2)
    # one value handed over, one waiting in the queue, one taken and blocked in put
    assert it.current <= 3
    s.close()


def test_stream_close_early():
    s = progbar.RangeIterator(0, 1000, size=10).stream()
    assert next(s) == 0
    assert next(s) == 1
    s.close()
    assert not s.is_alive()
    with pytest.raises(StopIteration):
        next(s)


class FailingSequence(object):
    def __len__(self):
        return 3

    def __getitem__(self, i):
        if i == 1:
            raise ValueError("element {} is broken".format(i))
        return i


def test_stream_error_is_reraised():
    s = progbar.ProgressIterator(FailingSequence(), size=10).stream()
    assert next(s) == 0
    with pytest.raises(ValueError):
        next(s)
    assert not s.is_alive()


if __name__ == "__main__":
    func = [
        test_sequence_iterator,
        test_sequence_iterator_given_bar,
        test_sequence_iterator_empty,
        test_range_iterator,
        test_range_iterator_negative_step,
        test_range_iterator_empty,
        test_range_iterator_reset,
        test_range_convenience_constructors,
        test_stream,
        test_stream_producer_runs_one_ahead,
        test_stream_close_early,
        test_stream_error_is_reraised,
        lambda: print("END"),
    ]

    for f in func:
        print()
        print("#" * 80)
        print("##  {}".format(f.__name__))
        print()
        f()
        time.sleep(0.1)
