"""Utility functions not found in the standard libraries.

Important functions:
 - @typechecked: decorator to perform runtime typechecking
 - open_maybe_stdin: open a file, or standard input for "-"
"""

# builtins
from functools import wraps
import sys
import os
import inspect

def check_type(value, ty, value_name="value"):
    """
    Verify that the given value has the given type.
        value      - the value to check
        ty         - the type to check for, or None to do no checking
                     (for example, if types come from Python type annotations, and
                     the Python formal variable does not have a type annotation)
        value_name - the variable or expression that evaluates to `value`;
                     printed in diagnostic messages

    ty is a class; the value must be an instance of it, except that an int
    is accepted where a float is expected.  Raises TypeError otherwise.
    """

    if ty is None:
        pass
    elif ty is float:
        if not isinstance(value, (int, float)):
            raise TypeError("{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__))
    elif not isinstance(value, ty):
        raise TypeError("{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__))

def typechecked(f):
    """
    Use the @typechecked decorator on a function to perform run-time typechecking.
    The docstring for `check_type` describes how type annotations should look.
    """
    argspec = inspect.getfullargspec(f)
    annotations = f.__annotations__
    @wraps(f)
    def g(*args, **kwargs):
        for argname, argval in zip(argspec.args, args):
            check_type(argval, annotations.get(argname), argname)
        for argname, argval in kwargs.items():
            check_type(argval, annotations.get(argname), argname)
        ret = f(*args, **kwargs)
        check_type(ret, annotations.get("return"), "return")
        return ret
    return g

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle.
    The safest usage of this function is

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)
