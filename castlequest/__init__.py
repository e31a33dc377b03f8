"""A console text adventure: find the princess in a fixed or generated castle, avoid the monster."""

__version__ = "0.1.0"