"""A maze-chase arcade game: maze rules, ghosts, pac-man, scoring and a pygame front end."""

__version__ = "0.1.0"