"""Disc identifier models."""

from typing import Self

from pydantic import BaseModel, computed_field


class IdSelection(BaseModel):
    """Which disc identifiers should be printed."""

    musicbrainz: bool = True
    cddb: bool = True

    @classmethod
    def from_flags(cls, cddb: bool = False, musicbrainz: bool = False) -> Self:
        """Build a selection from the -c/-m flags.

        Asking for neither type is the same as asking for both.
        """
        return cls(
            musicbrainz=musicbrainz or not cddb,
            cddb=cddb or not musicbrainz,
        )


class DiscIds(BaseModel):
    """Identifiers read from a disc.

    Only the values that were asked for are filled in. The strings come
    straight from libdiscid and are never inspected.
    """

    device: str
    musicbrainz_id: str | None = None
    freedb_id: str | None = None
    submission_url: str | None = None

    @computed_field
    @property
    def can_submit(self) -> bool:
        """Whether a submission URL was retrieved."""
        return bool(self.submission_url)
