# -*- coding: utf-8 -*-
import os
import errno
import time


def mkdir_p(path):
    """ Creates directory ; if exists does nothing """
    try:
        os.makedirs(path)
    except OSError as exc:
        if exc.errno == errno.EEXIST and os.path.isdir(path):
            pass
        else:
            raise exc


def timestamped_name(prefix, ext, stamp=None):
    """
    Returns a file name of the form <prefix>_<stamp>.<ext>, where stamp
    defaults to the current time in nanoseconds (unique for successive runs)
    """
    if stamp is None:
        stamp = time.time_ns()
    return f"{prefix}_{stamp}.{ext}"
