#!/usr/bin/env python
# -*- coding: utf-8 -*-
import sys
import time
# setup path to import progbar
from os.path import abspath, dirname, split
# Add parent directory to beginning of path variable
sys.path = [split(dirname(abspath(__file__)))[0]] + sys.path

import progbar

# the elements are taken by a background thread which runs at most one element ahead
with progbar.step_range_iterator(100, 0, -5).stream() as s:
    for i in s:
        time.sleep(0.05)
print()

# leaving early: closing the stream (here on context exit) stops the producer thread
with progbar.RangeIterator(0, 10000, size=40).stream() as s:
    for i in s:
        if i == 300:
            break
print()
print("producer still running: {}".format(s.is_alive()))
