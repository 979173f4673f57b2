import logging


logger: logging.Logger = logging.getLogger("kpz")
logger.addHandler(logging.StreamHandler())
# Reported expression errors are warnings; anything noisier has to be asked for.
logger.setLevel(logging.WARNING)


def format_number(value: float) -> str:
    """Format a result the way a C++ stream prints a double (6 significant digits)."""
    return '%g' % value
