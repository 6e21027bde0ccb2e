from rbshuffle.lib.reorder import reorder, seeded_random
from rbshuffle.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    reorder.__name__,
    seeded_random.__name__,
]
