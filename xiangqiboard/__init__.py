"""Chinese chess board model with move rules, check detection, game records and a terminal front end."""

__version__ = "0.1.0"