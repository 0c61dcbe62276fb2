import logging
import sys
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler


def logger():
    return logging.getLogger("traceability")


def configure_logger(debug: bool, rich: bool = True) -> logging.Logger:
    """Attach a handler to the `traceability` logger. Calling this again
    replaces the handler installed by the previous call."""
    class BackTickHighlighter(RegexHighlighter):
        highlights = [r"`(?P<bold>[^`]*)`"]

    log = logger()
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    for h in list(log.handlers):
        log.removeHandler(h)

    handler: logging.Handler
    if rich:
        handler = RichHandler(show_path=debug, highlighter=BackTickHighlighter())
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stdout)

    log.addHandler(handler)
    return log
