"""Hebrew Train - round generation and answer checking for Hebrew vocabulary drills."""

__version__ = "0.1.0"
