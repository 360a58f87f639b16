"""Tools to define local options.

Modules that have a tunable setting (log verbosity, output precision) declare
an Option next to the code that reads it.  `setup` informs an argparse parser
about every Option defined so far, and `read` copies the parsed values back.
Tests use `snapshot` and `restore` to undo whatever a command line changed.
"""

# All Option objects that have ever been created.
_OPTS = []

# Values that `restore` set before the owning module was imported.
_DEFAULT_VALUE_OVERRIDES = {}

_TYPES = (bool, str, int, float)

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None):
        assert type in _TYPES
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        _OPTS.append(self)

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`.")

def _argname(o):
    if o.type is bool:
        return ("no-" + o.name) if o.default else o.name
    return o.name

def _help(o):
    if o.type is bool:
        return o.description
    default = "default={}".format(repr(o.default))
    return "{} ({})".format(o.description, default) if o.description else default

def setup(parser):
    for o in _OPTS:
        flag = "--" + _argname(o)
        if o.type is bool:
            parser.add_argument(flag, action="store_true", default=False, help=_help(o))
        else:
            parser.add_argument(flag, type=o.type, metavar=o.metavar, default=o.default, help=_help(o))

def read(args):
    for o in _OPTS:
        value = getattr(args, _argname(o).replace("-", "_"))
        if o.type is bool and o.default:
            value = not value
        o.value = value

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES

    for o in _OPTS:
        o.value = snap.get(o.name, o.value)

    _DEFAULT_VALUE_OVERRIDES = dict(snap)
