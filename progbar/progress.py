#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Progress module
---------------

This module provides the single line progress bar :py:class:`.ProgressBar`.

Each call to :py:meth:`ProgressBar.step` or :py:meth:`ProgressBar.set_progress` updates a smoothed
speed estimate and redraws the line in place (carriage return, no newline), e.g.::

    33.33% |■■■■■■■■■■■■■■■■■■■■■■■■■■                                                      | 1/3 [00:01.98, 1.01it/s]

What is shown is controlled by a format string with the following placeholders

    * ``%bar%``  the bar itself, ``bar_size`` cells wide
    * ``%prog%`` percent complete (2 decimals)
    * ``%curr%`` current count
    * ``%max%``  maximum count
    * ``%eta%``  estimated time remaining as ``MM:SS.ss``
    * ``%spd%``  smoothed speed in counts per second (2 decimals)
    * ``%tet%``  total elapsed time since creation (or the last reset)

A literal percent sign is written as ``\\%``.

    .. autoclass:: ProgressBar
        :members:

    .. autofunction:: custom_format
    .. autofunction:: choose_pipe_handler
"""

import html
import logging
import math
import re
import sys
import time
import warnings
from . import terminal

_IPYTHON = True
try:
    import ipywidgets
except ImportError:
    _IPYTHON = False
    warnings.warn("could not load ipywidgets (IPython HTML output will not work)", category=ImportWarning)
try:
    from IPython.display import display
except ImportError:
    _IPYTHON = False
    warnings.warn("could not load  IPython (IPython HTML output will not work)", category=ImportWarning)


log = logging.getLogger(__name__)                               # creates the default log for this module

DEFAULT_FORMAT = "%prog%% |%bar%| %curr%/%max% [%eta%, %spd%it/s]"
DEFAULT_BAR_CHAR = "\u25a0"
DEFAULT_BAR_SIZE = 80
DEFAULT_STEP = 1

# weight of the newest rate sample in the exponential moving average of the speed
GAMMA = 0.5
MIN_DURATION = 1e-6
MIN_SPEED = 0.01


def custom_format(fmt, replacements):
    """substitute ``%key%`` in ``fmt`` by ``replacements[key]`` and unescape ``\\%``

    The template is scanned once from left to right, hence substituted values are never
    scanned again and an escaped ``\\%`` never opens or closes a placeholder.
    Only the keys of ``replacements`` are recognized, any other ``%name%`` is plain text
    and can not hide a placeholder that follows it (``"50%of%max%"`` gives ``"50%of3"``).

    :param fmt:           the template string
    :param replacements:  mapping from placeholder name to its (string) value
    :return:              the formatted string
    """
    pattern = r'\\%'
    if replacements:
        pattern += r'|%(' + '|'.join(map(re.escape, replacements)) + r')%'

    def _sub(m):
        key = m.group(1)
        if key is None:
            return '%'
        return replacements[key]

    return re.sub(pattern, _sub, fmt)


def format_eta(secs):
    """convert seconds to MM:SS.ss, minutes are not wrapped into hours"""
    minutes = int(secs / 60)
    seconds = math.fmod(secs, 60)
    return "{:02d}:{:05.2f}".format(minutes, seconds)


def humanize_time(secs):
    """convert second in to hh:mm:ss format
    """
    if secs is None:
        return '--'

    if secs < 1:
        return "{:.2f}ms".format(secs*1000)
    elif secs < 10:
        return "{:.2f}s".format(secs)
    else:
        mins, secs = divmod(secs, 60)
        hours, mins = divmod(mins, 60)
        return '{:02d}:{:02d}:{:02d}'.format(int(hours), int(mins), int(secs))


class PipeToPrint(object):
    def __call__(self, b):
        print(b, end='')
        sys.stdout.flush()

class PipeToIPythonHTMLWidget(object):
    def __init__(self):
        self.htmlWidget = ipywidgets.widgets.HTML()
        display(self.htmlWidget)

    def __call__(self, b):
        if b == '\n':
            return
        # the widget is replaced as a whole, no need for the carriage return
        line = html.escape(b.lstrip('\r'))
        self.htmlWidget.value = '<style>.widget-html{font-family:monospace}</style><pre>'+line+'</pre>'

PipeHandler = PipeToPrint
def choose_pipe_handler(kind = 'print'):
    """select how progress bars created from now on show their line

    :param kind: ``'print'`` writes to stdout, ``'ipythonhtml'`` updates an HTML widget in a notebook
    """
    global PipeHandler
    if kind == 'print':
        PipeHandler = PipeToPrint
    elif kind == 'ipythonhtml':
        if _IPYTHON:
            PipeHandler = PipeToIPythonHTMLWidget
        else:
            warnings.warn("can not choose ipythonHTML (IPython and/or ipywidgets were not loaded)")
    else:
        warnings.warn("no such pipe handler kind {}".format(kind))


class ProgressBar(object):
    """
    a single line progress bar which redraws itself in place on every update

    All numeric input is clamped rather than rejected: ``max < 1`` is taken as 1 and
    the progress is kept within ``[0, max]``. Use the instance as context manager to
    have the line terminated by a newline when done::

        with ProgressBar(max=len(jobs)) as pb:
            for job in jobs:
                job()
                pb.step()
    """
    def __init__(self,
                 format       = None,
                 max          = 1,
                 size         = DEFAULT_BAR_SIZE,
                 char         = None,
                 pipe_handler = None):
        """
        :param format:        template of the line, see module doc for the placeholders,
            empty or None uses :py:data:`DEFAULT_FORMAT`
        :param max:           the count which corresponds to 100%
        :param size:          number of cells of the bar, ``'auto'`` fills the terminal width
        :type size:           int or "auto"
        :param char:          glyph of a filled cell, empty or None uses :py:data:`DEFAULT_BAR_CHAR`
        :param pipe_handler:  callable receiving the rendered line, defaults to the handler
            chosen by :py:func:`choose_pipe_handler`
        """
        if max < 1:
            log.warning("max %s < 1, use 1 instead", max)
            max = 1
        if not format:
            format = DEFAULT_FORMAT
        if not char:
            char = DEFAULT_BAR_CHAR

        self.format = format
        self.max_progress = max
        self.bar_size = size
        self.bar_char = char
        self.progress = 0
        self.speed = 0.
        self.gamma = GAMMA
        self.start_time = time.time()
        self.init_time = self.start_time

        if pipe_handler is None:
            pipe_handler = PipeHandler()
        self.pipe_handler = pipe_handler

    def __enter__(self):
        return self

    def __exit__(self, *exc_args):
        # the in place line is never terminated by the updates themselves
        self.pipe_handler('\n')

    def __repr__(self):
        return "{}({}/{})".format(self.__class__.__name__, self.progress, self.max_progress)

    def step(self):
        """advance the progress by one"""
        self.set_progress(self.progress + 1)

    def set_progress(self, value):
        """set the progress to ``value`` (clamped to ``[0, max]``), update the speed and render

        The speed is an exponential moving average of the rate observed since the previous
        update. Moving backwards yields negative rate samples.
        """
        now = time.time()
        duration = now - self.start_time
        if duration <= MIN_DURATION:
            duration = MIN_DURATION
        self.start_time = now

        if value < 0:
            value = 0
        elif value > self.max_progress:
            value = self.max_progress

        delta = value - self.progress
        self.speed = self.speed + self.gamma * (delta / duration - self.speed)
        self.progress = value
        self.render()

    def reset(self):
        """set progress and speed to zero and restart the clocks, nothing is rendered"""
        self.progress = 0
        self.speed = 0.
        self.start_time = time.time()
        self.init_time = self.start_time
        log.debug("reset %s", self)

    def fields(self):
        """the strings substituted for the placeholders (except ``bar``)"""
        time_remaining = (self.max_progress - self.progress) / max(self.speed, MIN_SPEED)
        return {'spd' : "{:.2f}".format(self.speed),
                'eta' : format_eta(time_remaining),
                'curr': "{}".format(self.progress),
                'max' : "{}".format(self.max_progress),
                'prog': "{:.2f}".format(100 * self.progress / self.max_progress),
                'tet' : humanize_time(time.time() - self.init_time)}

    def bar(self, size):
        filled = int(size * self.progress / self.max_progress)
        return self.bar_char * filled + ' ' * (size - filled)

    def line(self):
        """the current state formatted according to the template"""
        replacements = self.fields()
        if '%bar%' in self.format:
            size = self.bar_size
            if size == 'auto':
                replacements['bar'] = ''
                size = terminal.available_bar_width(custom_format(self.format, replacements))
            replacements['bar'] = self.bar(size)
        return custom_format(self.format, replacements)

    def render(self):
        """overwrite the current terminal line with the current state"""
        line = self.line()
        try:
            self.pipe_handler('\r' + line)
        except (OSError, ValueError) as e:
            log.debug("could not write progress line: %s", e)
