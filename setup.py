#!/usr/bin/env python
# -*- coding: utf-8 -*-
# To create a distribution package for pip or easy-install:
# python setup.py sdist

from setuptools import setup
import os
from progbar import __version__



author      = "progbar developers"
authors     = [author]
description = 'A single line terminal progress bar with speed and ETA, plus progress reporting iterators.'
name        = 'progbar'
version = __version__
__this__ = os.path.abspath(os.path.dirname(__file__))

# Get the long description from the relevant file
with open(os.path.join(__this__, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

if __name__ == "__main__":
    setup(
        name=name,
        author=author,
        version=version,
        packages=[name],
        package_dir={name: name},
        license="BSD (3 clause)",
        description=description,
        long_description=long_description,
        long_description_content_type='text/markdown',
        keywords=["progress", "bar", "ascii", "art", "iterator", "eta"],
        python_requires='>=3.6',
        extras_require={
            'ipython': ['ipywidgets', 'IPython'],
            'test': ['pytest', 'numpy'],
        },
        classifiers= [
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3',
            'License :: OSI Approved :: BSD License',
            'Topic :: Utilities',
            'Intended Audience :: Developers'],
        platforms=['ALL']
        )
