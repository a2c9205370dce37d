"""
Parse many identifier lines at once and write the results as CSV.

The parser itself only ever sees one line.  This is the caller side of that
arrangement: it walks an iterable of lines (an open file, sys.stdin, a list),
decides what to do about malformed ones, and renders a report.
"""

import sys
import csv
import logging
from .identifier import parse, COORDINATE_FIELDS, READ_FIELDS
from .logging import IdentifierLoggerAdapter
from .util import IlluminaError

LOGGER = logging.getLogger(__name__)

ON_ERROR = ["skip", "abort", "keep"]

REPORT_FIELDS = {
    "full": ["line"] + COORDINATE_FIELDS + READ_FIELDS,
    "coordinates": ["line"] + COORDINATE_FIELDS}


def parse_lines(lines, grammar="full", on_error="skip", logger=None):
    """Parse each non-blank line, yielding (line number, record) pairs.

    Line numbers start at 1 and count blank lines too, so they match the
    input.  on_error controls what happens with a malformed line:

    skip: log a warning and move on
    abort: log an error and re-raise the IlluminaError
    keep: yield (line number, exception) in place of a record
    """
    if on_error not in ON_ERROR:
        raise ValueError(
            'on_error should be one of %s, not "%s"' % (", ".join(ON_ERROR), on_error))
    logger = logger or LOGGER
    for linenum, text in enumerate(lines, 1):
        if not text.strip():
            continue
        try:
            record = parse(text, grammar)
        except IlluminaError as err:
            adapter = IdentifierLoggerAdapter(
                logger, {"line": linenum, "text": text, "grammar": grammar})
            if on_error == "abort":
                adapter.error("line %d: %s: %s", linenum, type(err).__name__, err)
                raise
            if on_error == "skip":
                adapter.warning("skipping line %d: %s: %s", linenum, type(err).__name__, err)
                continue
            yield linenum, err
        else:
            yield linenum, record

def report_fields(grammar="full", with_errors=False):
    """CSV column names for a report in the given grammar."""
    fields = list(REPORT_FIELDS[grammar])
    if with_errors:
        fields.append("error")
    return fields

def write_report(pairs, out_file=sys.stdout, grammar="full", max_width=0, with_errors=False):
    """Render (line number, record) pairs as CSV to the given file handle.

    pairs is what parse_lines produces.  Exceptions in place of records (from
    on_error="keep") are written as rows with only the line number and the
    error text, so with_errors must be set for those.

    max_width: maximum column width in characters.  Strings beyond this
    length will be truncated and displayed with "..."  Set to 0 for no
    maximum.

    Returns the number of rows written.
    """
    writer = csv.DictWriter(out_file, report_fields(grammar, with_errors))
    writer.writeheader()
    count = 0
    for linenum, record in pairs:
        if isinstance(record, Exception):
            if not with_errors:
                raise ValueError("line %d holds an error but with_errors is off" % linenum)
            entry = {"error": "%s: %s" % (type(record).__name__, record)}
        else:
            entry = record.as_dict()
        entry["line"] = linenum
        for key in entry:
            data = str(entry[key])
            if 0 < max_width < len(data):
                # Widths under four leave room for only part of the ellipsis
                data = data[0:max(max_width-3, 0)] + "..."[:max_width]
            entry[key] = data
        writer.writerow(entry)
        count += 1
    return count
