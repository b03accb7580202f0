"""Model mixed martial arts fighters, referees and fights, and format reports on them."""

__version__ = "0.1.0"