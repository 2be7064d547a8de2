import logging


def alternate_offsets():
    """Yield 0, 1, -1, 2, -2, 3, ... forever.

    Used to visit vertex indices around a remembered position, nearest first.
    """
    current = 0
    increment = 0
    sign = 1
    while True:
        sign = -sign
        current += sign * increment
        increment += 1
        yield current


def parse_int(value):
    try:
        return int(value)
    except ValueError:
        return None


def parse_float(f):
    try:
        return float(f)
    except ValueError:
        return None


logger = logging.getLogger('polypuzzle')
logger.setLevel(logging.INFO)
logging.basicConfig()


def log(msg, level=logging.DEBUG):
    logger.log(level, msg)
