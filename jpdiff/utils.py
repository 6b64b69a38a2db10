# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import math
import os
import sys


# Path of the document root, used when the whole document is replaced
ROOT_PATH = "/"


class InputError(Exception):
    """A document could not be loaded.

    Carries the name of the offending file and the underlying cause.
    """
    action = "load"

    def __init__(self, filename, cause):
        self.filename = filename
        self.cause = cause
        super(InputError, self).__init__(filename, cause)

    def __str__(self):
        return "Could not {} {}: {}".format(self.action, self.filename, self.cause)


class UnreadableInput(InputError):
    """The file could not be opened or read as text."""
    action = "open"


class UnparseableInput(InputError):
    """The file contents are not a well-formed JSON document."""
    action = "deserialize"


def _reject_constant(name):
    raise ValueError("Non-standard JSON constant {}".format(name))


def _parse_finite_float(text):
    value = float(text)
    if math.isinf(value):
        raise ValueError("Number out of range: {}".format(text))
    return value


def parse_document(text):
    """Parse JSON text into a value tree.

    NaN and Infinity are rejected: they are not JSON, and NaN would
    break structural equality. Numbers too large for a float (e.g. 1e400)
    are rejected as well instead of becoming Infinity.
    """
    return json.loads(text, parse_constant=_reject_constant,
                      parse_float=_parse_finite_float)


def read_document(f):
    """Read and return a JSON document from filename

    Parameters:
        f:  The filename to read from.
            Alternatively a file-like object can be passed.

    Raises UnreadableInput if the file cannot be read, and
    UnparseableInput if its contents cannot be parsed.
    """
    name = f if isinstance(f, str) else getattr(f, "name", repr(f))
    try:
        if isinstance(f, str):
            with io.open(f, encoding="utf-8") as fo:
                text = fo.read()
        else:
            text = f.read()
            if isinstance(text, bytes):
                text = text.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableInput(name, e) from e

    try:
        return parse_document(text)
    except ValueError as e:
        raise UnparseableInput(name, e) from e


def child_path(prefix, segment):
    """Path of the child `segment` (a key or an index) below prefix.

    The root has the empty prefix, so first-level paths are '/segment'.
    Segments are joined as is, without escaping.
    """
    return "{}/{}".format(prefix or "", segment)


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """

    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
