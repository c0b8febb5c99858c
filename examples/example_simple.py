#!/usr/bin/env python
# -*- coding: utf-8 -*-
import sys
import time
# setup path to import progbar
from os.path import abspath, dirname, split
# Add parent directory to beginning of path variable
sys.path = [split(dirname(abspath(__file__)))[0]] + sys.path

import progbar

def sum_of_squares(N, pb):
    s = 0
    for i in range(1, N+1):
        s += i*i
        if i % 1000 == 0:
            pb.set_progress(i)      # clamped to max, renders the line in place
    return s

N = 2000000

# the context management terminates the line with a newline on exit
with progbar.ProgressBar(max=N, size='auto') as pb:
    sum_of_squares(N, pb)

# iterate over a range, the bar advances with every element
for i in progbar.range_iterator(0, 50):
    time.sleep(0.02)
print()

# iterate over a sequence with a custom template, \% is a literal percent sign
words = "the quick brown fox jumps over the lazy dog".split()
for w in progbar.ProgressIterator(words, format="%curr%/%max% words (%prog%\\%) %bar%", size=30, char="#"):
    time.sleep(0.1)
print()
