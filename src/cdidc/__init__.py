"""cdidc - print MusicBrainz and CDDB IDs of a compact disc."""

__version__ = "1.0.0"
NAME = "cdidc"
