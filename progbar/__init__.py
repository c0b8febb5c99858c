# -*- coding: utf-8 -*-

__version__ = '0.1.0'

"""
Progbar
=======

A single line progress bar in ASCII art which features

  * percentage, counters and a bar of configurable width and fill glyph
  * smoothed speed and estimated time remaining
  * iterators over sequences and integer ranges which advance the bar as you go
  * IPython notebook html output available

The line is described by a template such as the default
::

    %prog%% |%bar%| %curr%/%max% [%eta%, %spd%it/s]

which renders like
::

    40.00% |■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■■                                                | 4/10 [00:03.00, 2.00it/s]

Usage:
------

::

    import progbar

    for i in progbar.range_iterator(0, 1000):
        do_something(i)
    print()

    with progbar.ProgressBar(max=len(jobs), size='auto') as pb:
        for job in jobs:
            job()
            pb.step()

If you have IPython (and ipywidgets) installed, call ``progbar.choose_pipe_handler('ipythonhtml')``
to show the line in an HTML widget instead of stdout.
"""

from .progress import *
from .iterators import *
from .terminal import package_log as log
