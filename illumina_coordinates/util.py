"""
Utility functions and exceptions used throughout the package.

These are largely just the error types for malformed identifiers and small
wrappers for decoding individual text fields.
"""

import warnings
import yaml

# Largest value for each unsigned field width used in sequence identifiers
UINT_MAX = {8: 2**8 - 1, 16: 2**16 - 1}


class IlluminaError(Exception):
    """Any sort of malformed-identifier exception."""


class SplitError(IlluminaError):
    """The line was not structured as expected (wrong number of segments)."""


class ParseError(IlluminaError):
    """A field was present but could not be decoded (e.g. not an integer)."""


def parse_uint(token, bits, field="field"):
    """Decode an unsigned decimal integer of the given bit width.

    Only ASCII digits are accepted, so signs, whitespace, underscores and
    other things int() would happily take are rejected.  An empty token or a
    value too large for the width raises ParseError as well.
    """
    if token.isdigit() and token.isascii():
        value = int(token)
        if value <= UINT_MAX[bits]:
            return value
        reason = "%d exceeds %d-bit maximum" % (value, bits)
    else:
        reason = "invalid literal for unsigned integer: %r" % token
    raise ParseError("could not parse %s from %r" % (field, token)) from ValueError(reason)

def yaml_load(path):
    """Load YAML from a file, assuming a dictionary if empty."""
    with open(path) as fin:
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", category=DeprecationWarning)
            data = yaml.safe_load(fin)
    # If there's no actual yaml data in the file (like, say, just a bunch of
    # comments) we get None!  That makes it tricky later on so for our purposes
    # we'll catch that and default to a dict.
    data = data or {}
    return data
