"""
Executable interface for use as a script.

See the main function for usage.
"""

import sys
import argparse
import logging
from . import config
from . import benchmark
from .identifier import GRAMMARS
from .report import ON_ERROR, parse_lines, write_report
from .util import IlluminaError
from . import __version__ as VERSION

DOCS = {}
DOCS["description"] = "Parse Illumina sequence identifiers."
DOCS["epilog"] = """
The actions are:

parse:     Parse each identifier given as an argument, or each line of
           standard input if there are none, and write a CSV table of the
           fields to standard output.  For example:
           grep "^@M03745:" reads.fastq | illumina-coordinates
benchmark: Time the parser against a regular expression equivalent, using
           the first identifier given or a built-in example.
"""

PARSER = argparse.ArgumentParser(
    description=DOCS["description"],
    epilog=DOCS["epilog"],
    formatter_class=argparse.RawDescriptionHelpFormatter)
PARSER.add_argument("identifier", nargs="*",
                    help="sequence identifier lines (default: read from stdin)")
PARSER.add_argument("-c", "--config", help="path to configuration file")
PARSER.add_argument("-a", "--action", default="parse",
                    help="program action (default: %(default)s)",
                    choices=["parse", "benchmark"])
PARSER.add_argument("-g", "--grammar", choices=list(GRAMMARS),
                    help="identifier form to expect (default from config)")
PARSER.add_argument("-e", "--on-error", choices=ON_ERROR,
                    help="how to handle malformed lines (default from config)")
PARSER.add_argument("-V", "--version", action="store_true",
                    help="Print installed version of illumina_coordinates package")
PARSER.add_argument("-v", "--verbose", action="count", default=0,
                    help="Increment log verbosity")
PARSER.add_argument("-q", "--quiet", action="count", default=0,
                    help="Decrement log verbosity")

LOGGER = logging.getLogger()

def _setup_log(verbose, quiet):
    # Handle warnings via logging
    logging.captureWarnings(True)
    # Configure the root logger
    # each -v or -q decreases or increases the log level by 10, starting from
    # WARNING by default.
    lvl_current = LOGGER.getEffectiveLevel()
    lvl_subtract = (verbose - quiet) * 10
    verbosity = max(0, lvl_current - lvl_subtract)
    logging.basicConfig(stream=sys.stderr, level=verbosity)

def _action_parse(conf, identifiers, out_file):
    grammar = conf.get("grammar", "full")
    on_error = conf.get("on_error", "skip")
    lines = identifiers or sys.stdin
    pairs = parse_lines(lines, grammar=grammar, on_error=on_error)
    try:
        count = write_report(
            pairs, out_file, grammar,
            max_width=conf.get("report", {}).get("max_width", 0),
            with_errors=on_error == "keep")
    except IlluminaError:
        # parse_lines already logged the details
        return 1
    LOGGER.info("Wrote %d rows", count)
    return 0

def _action_benchmark(conf, identifiers, out_file):
    text = identifiers[0] if identifiers else benchmark.EXAMPLE_IDENTIFIER
    count = conf.get("benchmark", {}).get("count", 100000)
    try:
        timings = benchmark.compare(text, count)
    except IlluminaError as err:
        LOGGER.critical("Can't benchmark with %r: %s", text, err)
        return 1
    out_file.write("identifier: %s\n" % text.strip())
    out_file.write("calls:      %d\n" % timings["count"])
    out_file.write("split:      %.3f us/call\n" % (timings["split"] * 1e6))
    out_file.write("regex:      %.3f us/call\n" % (timings["regex"] * 1e6))
    out_file.write("speedup:    %.2fx\n" % timings["speedup"])
    return 0

def main(args_raw=None, out_file=None):
    """Executable interface for use as a script.

    Command-line arguments are defined by PARSER.  Run with --help to see from
    the command-line.  Returns the exit status, which is 1 if the action
    couldn't finish (a malformed line with on_error set to abort, or an
    invalid setting)."""
    out_file = out_file or sys.stdout
    status = 0
    try:
        if args_raw:
            args = PARSER.parse_args(args_raw)
        else:
            args = PARSER.parse_args()
        _setup_log(args.verbose, args.quiet)
        # In order, layer together the package default, system default, action
        # default, and command-line config path (if present), and then any
        # command-line options on top of that.
        try:
            conf = config.load_config(
                args.action, args.config,
                {"grammar": args.grammar, "on_error": args.on_error})
        except ValueError as err:
            LOGGER.critical("Invalid configuration: %s", err)
            return 1
        # If specific in the config, modify the log level.  Call _setup_log
        # again so that the command-line flags are applied after the new level
        # is set.
        newlevel = conf.get("loglevel")
        if not newlevel is None: # (since 0 is distinct from not set)
            LOGGER.setLevel(newlevel)
            _setup_log(args.verbose, args.quiet)
        if args.version:
            out_file.write((VERSION or "Not installed") + "\n")
        elif args.action == "parse":
            status = _action_parse(conf, args.identifier, out_file)
        elif args.action == "benchmark":
            status = _action_benchmark(conf, args.identifier, out_file)
    except BrokenPipeError:
        pass
    return status

if __name__ == '__main__':
    sys.exit(main())
