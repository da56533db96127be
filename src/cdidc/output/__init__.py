"""Output formatting module."""

from cdidc.output.formatting import (
    CDDB_LABEL,
    MUSICBRAINZ_LABEL,
    format_cddb_id,
    format_musicbrainz_id,
)

__all__ = [
    "CDDB_LABEL",
    "MUSICBRAINZ_LABEL",
    "format_cddb_id",
    "format_musicbrainz_id",
]
