# -*- coding: utf-8 -*-
import shutil
import sys
import logging


class MultiLineFormatter(logging.Formatter):
    """pads a multiline log message with spaces such that

     <HEAD> msg_line1
            msg_line2
             ...
    """
    def format(self, record):
        _str = logging.Formatter.format(self, record)
        header = _str.split(record.message)[0]
        _str = _str.replace('\n', '\n' + ' '*len(header))
        return _str

def_handl = logging.StreamHandler(stream = sys.stderr)          # the default handler simply uses stderr
def_handl.setLevel(logging.DEBUG)                               # ... listens to all messaged
fmt = MultiLineFormatter('%(asctime)s %(name)s %(levelname)s : %(message)s')
def_handl.setFormatter(fmt)                                     # ... and pads multiline messaged
package_log = logging.getLogger(__package__)                   # parent of the module logs, controls the verbosity
package_log.addHandler(def_handl)
log = logging.getLogger(__name__)                               # creates the default log for this module


def get_terminal_width(default=80):
    """ Determine the number of columns of the terminal attached to stdout

    Parameters
    ----------
    default : int
        Width to use when the terminal size can not be found
        (e.g. output redirected to a file or a pipe).

    Returns
    -------
    width : int
    """
    try:
        width = shutil.get_terminal_size(fallback=(default, 24)).columns
    except (OSError, ValueError) as e:
        log.debug("could not determine terminal size (%s), use default width %s", e, default)
        return default
    if width <= 0:
        return default
    return width


def available_bar_width(line_without_bar, default=80):
    """the number of cells left for the bar when the rest of the line
    takes up len(line_without_bar) characters, never negative
    """
    width = get_terminal_width(default=default)
    # keep the last column free, some terminals wrap when it is written
    return max(width - len(line_without_bar) - 1, 0)
