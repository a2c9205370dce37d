"""
Parse Illumina sequence identifiers into typed records.

A sequence identifier is the header line of each FASTQ record, like this:

    @M03745:11:000000000-B54L5:1:2108:4127:8949 1:N:0:0

The fields left of the space describe where the cluster was on the flow cell:

    M03745           ID of the sequencing machine (the leading @ is dropped)
    11               run count for this machine
    000000000-B54L5  ID of the flow cell ("B54L5" is printed on the glass)
    1                lane number.  Always 1 for MiSeqs.
    2108             side of the flow cell (2), swath (1), and tile (8).  For
                     HiSeqs each lane is two tiles wide; the first pass
                     left-to-right is swath one and the returning pass is
                     swath two.  For MiSeqs swath is always 1 and the tile is
                     a number from 1 to 19.
    4127             x-position of the cluster in the tile, arbitrary units
    8949             y-position of the cluster in the tile, arbitrary units

The fields right of the space describe the read itself:

    1                read number (1 is the forward read of a paired run)
    N                filtered for low quality?  Y or N.
    0                control number, with 0 meaning not a control read
    0                sample number from the sample sheet, or for Undetermined
                     reads, the index sequence that didn't match any sample

Older instruments wrote only the left half.  There's nothing in the line
itself to say which form to expect, so the caller picks a grammar:
parse_sequence_identifier for the full form and parse_coordinates for the
coordinate-only form.

This splits the text on fixed delimiters rather than using a regular
expression.  Well-formed lines are checked with a handful of string methods
and decoded in one go; only a line that fails that check is decoded field by
field to find which field is wrong.  How this compares to a regular
expression depends on the interpreter, so see the benchmark module (or the
benchmark action) for numbers on a given machine.
"""

from collections import namedtuple
from .util import SplitError, ParseError, UINT_MAX, parse_uint

COORDINATE_FIELDS = [
    "sequencer_id", "run_count", "flow_cell_id", "lane",
    "side", "swath", "tile", "x", "y"]
READ_FIELDS = ["read", "is_filtered", "control_number", "sample"]

FILTER_FLAGS = {"Y": True, "N": False}


class TypedTuple:
    """Tuple behavior, except only equal to the same type with the same values.

    A plain namedtuple compares equal to any tuple holding the same values,
    so SampleNumber(0) would equal (0,) and a SequenceCoordinates would equal
    a bare tuple of its nine fields.
    """

    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, tuple(self)))


class Sample(TypedTuple):
    """The sample a read was assigned to.

    Use SampleNumber or SampleSequence; this base just ties the two together
    for isinstance checks.
    """

    __slots__ = ()

    @property
    def value(self):
        """The sample number or sequence, whichever this holds."""
        return self[0]

    def __str__(self):
        return str(self.value)


class SampleNumber(Sample, namedtuple("SampleNumber", ["number"])):
    """Sample number from the sample sheet."""

    __slots__ = ()


class SampleSequence(Sample, namedtuple("SampleSequence", ["sequence"])):
    """Index sequence of a read in the Undetermined reads."""

    __slots__ = ()


class SequenceCoordinates(TypedTuple, namedtuple("SequenceCoordinates", COORDINATE_FIELDS)):
    """The location of a cluster on a flow cell, from the left half of an identifier."""

    __slots__ = ()

    def as_dict(self):
        """Field names to values, in order."""
        return dict(self._asdict())


class SequenceIdentifier(
        TypedTuple, namedtuple("SequenceIdentifier", COORDINATE_FIELDS + READ_FIELDS)):
    """A fully parsed sequence identifier: cluster location plus read details."""

    __slots__ = ()

    @property
    def coordinates(self):
        """Just the cluster location, as a SequenceCoordinates."""
        return _new(SequenceCoordinates, self[:len(COORDINATE_FIELDS)])

    def as_dict(self):
        """Field names to values, in order, with the sample as its bare value."""
        data = dict(self._asdict())
        data["sample"] = self.sample.value
        return data


# Records are built straight from tuples, skipping the keyword handling in
# the namedtuple constructors.
_new = tuple.__new__

# Sample values are immutable, so every read from sample 1 can share one.
SAMPLE_NUMBERS = [_new(SampleNumber, (num,)) for num in range(UINT_MAX[8] + 1)]


def _split_error(tokens, count, what, sep, text):
    return SplitError(
        "expected %d %s separated by %r but found %d in %r" % (
            count, what, sep, len(tokens), text))

# Parsing runs in two tiers.  The _fast_ functions check that a whole group
# of tokens is well-formed with a few string methods and decode it in one go,
# returning None if anything is off.  The _decode_ functions go field by field
# to raise ParseError for the first bad one, so they only run on bad lines.

def _fast_left(left):
    sequencer_id, run_count, flow_cell_id, lane, compound, x, y = left
    digits = run_count + lane + compound + x + y
    if not (len(sequencer_id) > 1 and run_count and lane and len(compound) > 2 and x and y
            and digits.isdigit() and digits.isascii()):
        return None
    run_count = int(run_count)
    lane = int(lane)
    tile = int(compound[2:])
    x = int(x)
    y = int(y)
    if run_count > 65535 or x > 65535 or y > 65535 or lane > 255 or tile > 255:
        return None
    return (sequencer_id[1:], run_count, flow_cell_id, lane,
            int(compound[0]), int(compound[1]), tile, x, y)

def _decode_left(left):
    """Decode the seven location tokens into a tuple of coordinate values."""
    # The @ is removed by position only; whatever the first character is, it
    # isn't part of the ID.
    sequencer_id = left[0][1:]
    if not sequencer_id:
        raise ParseError("empty sequencer ID in %r" % left[0])
    run_count = parse_uint(left[1], 16, "run_count")
    flow_cell_id = left[2]
    lane = parse_uint(left[3], 8, "lane")
    # side and swath are one digit each and the tile is whatever is left, so
    # 2108 is side 2, swath 1, tile 8 and 1119 is side 1, swath 1, tile 19.
    compound = left[4]
    side = parse_uint(compound[:1], 8, "side")
    swath = parse_uint(compound[1:2], 8, "swath")
    tile = parse_uint(compound[2:], 8, "tile")
    x = parse_uint(left[5], 16, "x")
    y = parse_uint(left[6], 16, "y")
    return (sequencer_id, run_count, flow_cell_id, lane, side, swath, tile, x, y)

def _decode_right(right):
    """Decode the read and control numbers, checking the filter flag between them."""
    read = parse_uint(right[0], 8, "read")
    if right[1] not in FILTER_FLAGS:
        raise ParseError("filter flag should be Y or N, not %r" % right[1])
    control_number = parse_uint(right[2], 8, "control_number")
    return read, control_number

def parse_sample(token):
    """SampleNumber for a sample number token, or SampleSequence for anything else."""
    # Not being a number isn't an error here: Undetermined reads list the
    # index sequence instead.
    if token.isdigit() and token.isascii():
        num = int(token)
        if num <= UINT_MAX[8]:
            return SAMPLE_NUMBERS[num]
    return _new(SampleSequence, (token,))

def parse_sequence_identifier(text):
    """Parse a full sequence identifier into a SequenceIdentifier.

    Surrounding whitespace (like the newline when reading line by line) is
    ignored.  Raises SplitError if the line doesn't have the expected number
    of space- and colon-delimited fields and ParseError if a field can't be
    decoded.  The sample field never fails on its own: anything that isn't a
    sample number is kept as a SampleSequence.

    >>> seq_id = parse_sequence_identifier(
    ...     "@M03745:11:000000000-B54L5:1:2108:4127:8949 1:N:0:0")
    >>> seq_id.flow_cell_id, seq_id.tile, seq_id.x, seq_id.y
    ('000000000-B54L5', 8, 4127, 8949)
    >>> seq_id.sample
    SampleNumber(number=0)
    """
    halves = text.strip().split(" ")
    if len(halves) != 2:
        raise _split_error(halves, 2, "halves", " ", text)
    # Check the shape of both halves before decoding anything so a badly
    # structured line is always a SplitError.
    left = halves[0].split(":")
    right = halves[1].split(":")
    if len(left) != 7:
        raise _split_error(left, 7, "location fields", ":", halves[0])
    if len(right) != 4:
        raise _split_error(right, 4, "read fields", ":", halves[1])
    coords = _fast_left(left) or _decode_left(left)
    read, flag, control_number, sample = right
    digits = read + control_number
    if read and control_number and flag in FILTER_FLAGS and digits.isdigit() and digits.isascii():
        read = int(read)
        control_number = int(control_number)
        if read > 255 or control_number > 255:
            read, control_number = _decode_right(right)
    else:
        read, control_number = _decode_right(right)
    return _new(
        SequenceIdentifier,
        coords + (read, flag == "Y", control_number, parse_sample(sample)))

def parse_coordinates(text):
    """Parse a coordinate-only sequence identifier into a SequenceCoordinates.

    This is the older form without the read/filter/control/sample half, like
    "@M03745:11:000000000-B54L5:1:2108:4127:8949".  A line that does have a
    second half is a SplitError here.
    """
    halves = text.strip().split(" ")
    if len(halves) != 1:
        raise _split_error(halves, 1, "halves", " ", text)
    left = halves[0].split(":")
    if len(left) != 7:
        raise _split_error(left, 7, "location fields", ":", halves[0])
    return _new(SequenceCoordinates, _fast_left(left) or _decode_left(left))

GRAMMARS = {
    "full": parse_sequence_identifier,
    "coordinates": parse_coordinates}

def parse(text, grammar="full"):
    """Parse a sequence identifier with the named grammar ("full" or "coordinates")."""
    try:
        func = GRAMMARS[grammar]
    except KeyError:
        raise ValueError(
            'grammar should be one of %s, not "%s"' % (", ".join(GRAMMARS), grammar)) from None
    return func(text)
