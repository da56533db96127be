"""Tests for identifier line formatting."""

from cdidc.output.formatting import format_cddb_id, format_musicbrainz_id


class TestFormatting:
    """Test labelled and brief output."""

    def test_musicbrainz_labelled(self) -> None:
        """Labelled MusicBrainz line."""
        assert format_musicbrainz_id("abc-") == "Musicbrainz Disc ID: abc-"

    def test_cddb_labelled(self) -> None:
        """Labelled CDDB line."""
        assert format_cddb_id("820b420b") == "CDDB ID: 820b420b"

    def test_brief_is_bare_value(self) -> None:
        """Brief mode drops the label entirely."""
        assert format_musicbrainz_id("abc-", brief=True) == "abc-"
        assert format_cddb_id("820b420b", brief=True) == "820b420b"
