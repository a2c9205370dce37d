"""
Custom logging with tracking of which input line a message is about.
"""

import logging


class IdentifierLoggerAdapter(logging.LoggerAdapter):
    """A logger adapter to automatically add input line context to log records.

    This uses LoggerAdapter's default implementation of the "process" method to
    use the "extra" argument in the logging calls, which in turn makes these
    extra key/value pairs show up as attributes of the log records.  The
    recognized keys are:

    line: 1-based line number (coerced to int)
    text: the input text, with surrounding whitespace removed
    grammar: the grammar name the line was parsed with

    Anything else is passed through as-is.
    """

    def __init__(self, logger, extra=None):
        if extra is None:
            extra = {}
        super().__init__(logger, extra)
        self._parse(extra)

    def _parse(self, extra):
        if extra.get("line") is not None:
            extra["line"] = int(extra["line"])
        text = extra.get("text")
        if text is not None:
            extra["text"] = str(text).strip()
        if extra.get("grammar") is not None:
            extra["grammar"] = str(extra["grammar"])
