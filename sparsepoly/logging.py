"""Timed, indented progress messages for the calculator driver.

Nothing is printed unless --verbose is given.  Messages go to standard error
so they never mix with calculator output.

Important functions:
 - task: a context manager that times one phase of the work
 - event: a message indented under the innermost running task
 - dump_profile: total time spent in each (nested) task
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from sparsepoly.opts import Option

verbose = Option("verbose", bool, False, description="Log each step and its duration to stderr")

# Seconds spent in each task, keyed by the path of enclosing task names.
_times = defaultdict(float)
_task_stack = []
_begin = datetime.datetime.now()

def event(message):
    if verbose.value:
        print("  " * len(_task_stack) + message, file=sys.stderr)

@contextmanager
def task(name, **kwargs):
    details = ""
    if kwargs:
        details = " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"
    event("{}{}...".format(name, details))
    _task_stack.append(name)
    start = datetime.datetime.now()
    try:
        yield
    finally:
        duration = (datetime.datetime.now() - start).total_seconds()
        _times[tuple(_task_stack)] += duration
        _task_stack.pop()
        event("Finished {} [duration={:.3}s]".format(name, duration))

def dump_profile(out):
    duration = (datetime.datetime.now() - _begin).total_seconds()
    out.write("Total duration: {:.3} seconds\n".format(duration))
    for path in sorted(_times.keys(), key=_times.get, reverse=True):
        out.write("{:16.3} {}\n".format(_times[path], ", ".join(path)))
