import json
import os
import pathlib
import tempfile

import numpy

def format_number(value, precision=None):
    """Format a number for path data: positional notation (never scientific),
    no trailing zeros or decimal point, and no negative zero.

    If precision is None, the shortest representation that round-trips to the
    same float is used; otherwise at most 'precision' digits after the decimal
    point are written."""
    text = numpy.format_float_positional(float(value), precision=precision, unique=True, trim='-')
    if text == '-0':
        text = '0'
    return text

class _NumpyEncoder(json.JSONEncoder):
    """JSON encoder that is smart about converting iterators and numpy arrays to
    lists, and converting numpy scalars to python scalars.
    """
    def default(self, o):
        if isinstance(o, numpy.generic):
            return o.item()
        if isinstance(o, numpy.ndarray):
            return o.tolist()
        try:
            return list(o)
        except TypeError:
            return super().default(o)

_READABLE_ENCODER = _NumpyEncoder(indent=4, sort_keys=True)

def json_encode_legible_to_str(data):
    """Encode nicely-formatted JSON to a string."""
    return _READABLE_ENCODER.encode(data)

def json_encode_legible_to_file(data, f):
    """Encode nicely-formatted JSON to an open file handle."""
    for chunk in _READABLE_ENCODER.iterencode(data):
        f.write(chunk)

def write_atomic(text, filename, suffix=None):
    """Write text to a file, atomically replacing any existing file.

    The text is written to a temporary file in the same directory, which is
    then moved into place. An error thus never leaves a partially-overwritten
    destination file: the result of this function is all or none.

    Parameters:
        text: string to write
        filename: string or pathlib.Path object for destination file.
        suffix: if provided, the temporary file will have the same name as
            the original file, plus this suffix and then some arbitrary characters
            to ensure uniqueness. If not provided, the suffix will be 'temp'.
            If a suffix is provided, in the event of a file-write error, the
            partially written temp file will be left for possible user-recovery.
            Otherwise, the file will be removed if an error occurs.
    """
    filename = pathlib.Path(filename)
    prefix = filename.name + '-{}.'.format('temp' if suffix is None else suffix)
    fd, tmp_path = tempfile.mkstemp(prefix=prefix, dir=str(filename.parent))
    try:
        with os.fdopen(fd, 'w') as f:
            f.write(text)
        os.replace(tmp_path, str(filename))
    except Exception:
        if not suffix:
            # if no suffix provided, assume that there's no interest in user-recovery
            # of half-written files.
            os.remove(tmp_path)
        raise

def json_encode_atomic_legible_to_file(data, filename, suffix=None):
    """Encode nicely-formatted JSON and if there was no error, atomically write.
    See write_atomic() for the meaning of the parameters."""
    write_atomic(json_encode_legible_to_str(data), filename, suffix)
