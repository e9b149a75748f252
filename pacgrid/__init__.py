"""A small terminal Pac-Man game on a 10x10 grid."""

__version__ = "0.1.0"