"""
Compare the split-based parser against a regular expression equivalent.

parse_sequence_identifier_regex gives the same records and error types as
identifier.parse_sequence_identifier, and is handy as an independent check
on it.  compare() times the two against each other.
"""

import re
import time
import logging
from .identifier import SequenceIdentifier, FILTER_FLAGS, parse_sequence_identifier, parse_sample
from .util import SplitError, ParseError, parse_uint

LOGGER = logging.getLogger(__name__)

EXAMPLE_IDENTIFIER = "@M03745:11:000000000-B54L5:1:2108:4127:8949 1:N:0:0"

PATTERN = re.compile(
    r"[^: ]([^: ]+):([0-9]+):([^: ]*):([0-9]+):([0-9])([0-9])([0-9]+):([0-9]+):([0-9]+)"
    r" ([0-9]+):([YN]):([0-9]+):([^: ]*)")

# Anything with the right number of fields in each half.  Lines that fit this
# but not PATTERN have a bad field rather than a bad structure.
SHAPE = re.compile(r"[^: ]*(?::[^: ]*){6} [^: ]*(?::[^: ]*){3}")


def parse_sequence_identifier_regex(text):
    """Parse a full sequence identifier using a regular expression."""
    text = text.strip()
    match = PATTERN.fullmatch(text)
    if not match:
        if SHAPE.fullmatch(text):
            raise ParseError("malformed field in %r" % text)
        raise SplitError("not structured like a sequence identifier: %r" % text)
    (sequencer_id, run_count, flow_cell_id, lane, side, swath, tile, x, y,
     read, flag, control_number, sample) = match.groups()
    return SequenceIdentifier(
        sequencer_id,
        parse_uint(run_count, 16, "run_count"),
        flow_cell_id,
        parse_uint(lane, 8, "lane"),
        parse_uint(side, 8, "side"),
        parse_uint(swath, 8, "swath"),
        parse_uint(tile, 8, "tile"),
        parse_uint(x, 16, "x"),
        parse_uint(y, 16, "y"),
        parse_uint(read, 8, "read"),
        FILTER_FLAGS[flag],
        parse_uint(control_number, 8, "control_number"),
        parse_sample(sample))

def measure(func, text, count):
    """Seconds taken to call func(text) count times."""
    start = time.perf_counter()
    for _ in range(count):
        func(text)
    return time.perf_counter() - start

def compare(text=EXAMPLE_IDENTIFIER, count=100000):
    """Time both parsers on the same line.

    Returns a dictionary with the per-call time in seconds for the "split"
    and "regex" parsers and the "speedup" of the first over the second.
    """
    if count < 1:
        raise ValueError("count should be at least 1, not %d" % count)
    # Parse once up front so a bad line fails before timing anything.
    parse_sequence_identifier(text)
    parse_sequence_identifier_regex(text)
    timings = {
        "count": count,
        "split": measure(parse_sequence_identifier, text, count) / count,
        "regex": measure(parse_sequence_identifier_regex, text, count) / count}
    timings["speedup"] = timings["regex"] / timings["split"]
    LOGGER.info(
        "%d calls: split %.3g s/call, regex %.3g s/call, %.2fx speedup",
        count, timings["split"], timings["regex"], timings["speedup"])
    return timings
