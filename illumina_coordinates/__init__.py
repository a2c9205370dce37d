"""
Package to parse Illumina sequence identifiers.

Brief package structure overview:

identifier.parse_sequence_identifier turns one FASTQ header line, like
"@M03745:11:000000000-B54L5:1:2108:4127:8949 1:N:0:0", into an immutable
SequenceIdentifier giving the cluster's location on the flow cell and the
read details.  identifier.parse_coordinates handles the older form with only
the location half.  Malformed lines raise SplitError (wrong structure) or
ParseError (bad field), both IlluminaErrors from the util module.  The report
module parses many lines at once and writes CSV, and the benchmark module
compares the parser against a regular expression version.

Illumina was not involved in the creation of this package in any way.
"""

from . import config
from .util import IlluminaError, SplitError, ParseError
from .identifier import (
    Sample, SampleNumber, SampleSequence, SequenceCoordinates, SequenceIdentifier,
    parse, parse_sequence_identifier, parse_coordinates)
CONFIG = config.layer_configs([config.path_for_config()])

def __deduce_version():
    """Return version string for this package, if installed.

    This infers the version originally defined in setup.py, but only if it can
    find an installed package and the filesystem path for the loaded package
    agrees with it.
    """
    from importlib.metadata import version, files, PackageNotFoundError
    from pathlib import Path
    try:
        # Is there an installed package matching this package name, *and* does
        # that package refer to this very file we're currently in?  If so,
        # return that version string, but in any other case, return an empty
        # string.
        ver = version(__package__)
        this = [p for p in (files(__package__) or [])
                if p.locate().exists() and Path(__file__).samefile(p.locate())]
        if this:
            return ver
    except PackageNotFoundError:
        pass
    return ""

__version__ = __deduce_version()
