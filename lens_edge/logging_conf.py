import logging, sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler = None

def configure_logging(level: str = "INFO"):
    global _handler
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(_handler)
