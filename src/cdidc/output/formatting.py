"""Identifier line formatting."""

MUSICBRAINZ_LABEL = "Musicbrainz Disc ID: "
CDDB_LABEL = "CDDB ID: "


def _format(label: str, value: str, brief: bool) -> str:
    if brief:
        return value
    return f"{label}{value}"


def format_musicbrainz_id(disc_id: str, brief: bool = False) -> str:
    """Format a MusicBrainz Disc ID for printing (without trailing newline)."""
    return _format(MUSICBRAINZ_LABEL, disc_id, brief)


def format_cddb_id(freedb_id: str, brief: bool = False) -> str:
    """Format a CDDB ID for printing (without trailing newline)."""
    return _format(CDDB_LABEL, freedb_id, brief)
