# -*- coding: utf-8 -*-
"""
Iterators which report their progress
-------------------------------------

    * :py:class:`.ProgressIterator` walks through a sequence, the bar shows how many elements were taken.
    * :py:class:`.RangeIterator` counts from ``start`` to ``end`` (exclusive) in steps of ``step``.

Both are ordinary (restartable) python iterators::

    for f in ProgressIterator(files):
        process(f)

and can be turned into a :py:class:`.ProgressStream` where a background thread takes the
elements and hands them over one at a time.
"""
import logging
import queue
import threading

from . import terminal
from .progress import ProgressBar, DEFAULT_BAR_SIZE, DEFAULT_STEP

log = logging.getLogger(__name__)

# interval in seconds at which a blocked producer checks whether the stream was closed
POLL_INTERVAL = 0.05


class ProgressIterator(object):
    """iterate over the elements of ``seq``, each element taken advances the bar

    :param seq:       an indexable sequence with a length
    :param progress:  the :py:class:`.ProgressBar` to use, if None a bar with ``max=len(seq)``
        is created from ``format``, ``size`` and ``char``
    """
    def __init__(self, seq, progress=None, format=None, size=DEFAULT_BAR_SIZE, char=None):
        self.seq = seq
        self.index = 0
        if progress is None:
            progress = ProgressBar(format=format, max=len(seq), size=size, char=char)
        self.progress = progress

    def __iter__(self):
        return self

    def __next__(self):
        if self.index >= len(self.seq):
            raise StopIteration
        value = self.seq[self.index]
        self.index += 1
        self.progress.set_progress(self.index)
        return value

    def __len__(self):
        return len(self.seq)

    def reset(self):
        self.index = 0
        self.progress.reset()

    def stream(self):
        """start a producer thread, see :py:class:`.ProgressStream`"""
        return ProgressStream(self)


class RangeIterator(object):
    """like ``range(start, end, step)`` with a progress bar

    A ``step`` of zero is replaced by :py:data:`DEFAULT_STEP`. The bar is sized to
    ``(end - start) // step`` which the bar itself raises to at least 1.
    """
    def __init__(self, start, end, step=DEFAULT_STEP, format=None, size=DEFAULT_BAR_SIZE, char=None):
        if step == 0:
            log.warning("step must not be 0, use %s instead", DEFAULT_STEP)
            step = DEFAULT_STEP
        self.start = start
        self.end = end
        self.step = step
        self.current = start
        self.progress = ProgressBar(format=format, max=(end - start) // step, size=size, char=char)

    def __iter__(self):
        return self

    def __next__(self):
        if (self.step > 0 and self.current >= self.end) or (self.step < 0 and self.current <= self.end):
            raise StopIteration
        value = self.current
        self.current += self.step
        self.progress.step()
        return value

    def reset(self):
        self.current = self.start
        self.progress.reset()

    def stream(self):
        """start a producer thread, see :py:class:`.ProgressStream`"""
        return ProgressStream(self)


def range_iterator(start, end):
    return RangeIterator(start, end)


def step_range_iterator(start, end, step):
    return RangeIterator(start, end, step)


_END = object()

class ProgressStream(object):
    """
    hands over the elements of an iterator which are taken by a background thread

    The thread puts one element at a time into a queue of size one, so it runs at most
    one element ahead of the consumer. Leaving the iteration early requires
    :py:meth:`close` (or using the stream as context manager), otherwise the thread
    stays blocked until the interpreter exits::

        with RangeIterator(0, 100).stream() as s:
            for i in s:
                if i == 10:
                    break
    """
    def __init__(self, iterator):
        self._iterator = iterator
        self._queue = queue.Queue(maxsize=1)
        self._stop = threading.Event()
        self._done = False
        self._thread = threading.Thread(target=self._produce)
        self._thread.daemon = True
        self._thread.start()
        log.debug("started producer thread %s", self._thread.name)

    def __enter__(self):
        return self

    def __exit__(self, *exc_args):
        self.close()

    def __iter__(self):
        return self

    def _put(self, item):
        while not self._stop.is_set():
            try:
                self._queue.put(item, timeout=POLL_INTERVAL)
                return True
            except queue.Full:
                continue
        return False

    def _produce(self):
        try:
            for value in self._iterator:
                if not self._put((value, None)):
                    log.debug("stream closed, producer stops early")
                    return
        except Exception as e:
            self._put((_END, e))
            return
        self._put((_END, None))

    def __next__(self):
        if self._done:
            raise StopIteration
        value, error = self._queue.get()
        if value is _END:
            self._done = True
            self._thread.join()
            if error is not None:
                raise error
            raise StopIteration
        return value

    def close(self):
        """stop the producer thread and wait for it to finish"""
        self._stop.set()
        self._done = True
        # a producer blocked in put wakes up within POLL_INTERVAL
        try:
            while True:
                self._queue.get_nowait()
        except queue.Empty:
            pass
        self._thread.join()
        log.debug("producer thread %s joined", self._thread.name)

    def is_alive(self):
        return self._thread.is_alive()
