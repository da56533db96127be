"""Disc identifier lookup through libdiscid.

Uses the python-discid binding to read the table of contents of an audio CD
and hand back the MusicBrainz Disc ID, the FreeDB/CDDB ID and the MusicBrainz
submission URL. All TOC reading and checksum work happens inside libdiscid.
"""

import contextlib
from collections.abc import Iterator
from types import ModuleType
from typing import Any

import structlog

from cdidc.core.disc import DiscIds, IdSelection

log = structlog.get_logger()


class DiscReadError(Exception):
    """The disc could not be read."""

    pass


class LibraryUnavailableError(DiscReadError):
    """python-discid or the native libdiscid could not be loaded."""

    pass


def _load_library() -> ModuleType:
    """Import the discid binding.

    Raises:
        LibraryUnavailableError: If the binding or libdiscid is missing
    """
    try:
        import discid
    except ImportError as e:
        raise LibraryUnavailableError(
            "python-discid is not installed. Install with: pip install discid"
        ) from e
    except OSError as e:
        # Raised by the binding when the shared library cannot be found
        raise LibraryUnavailableError(f"libdiscid could not be loaded: {e}") from e

    return discid


def get_default_device() -> str:
    """Get the platform's default optical drive as reported by libdiscid."""
    return _load_library().get_default_device()


@contextlib.contextmanager
def open_disc(device: str) -> Iterator[Any]:
    """Read the disc in a drive and hold its handle for the block.

    Only the TOC needed for the identifiers is read; no MCN or ISRC
    features are requested, so libdiscid performs a sparse read.

    The native handle is freed when the binding's disc object is
    collected, so callers must drop their own reference before leaving
    the block.

    Args:
        device: Device path (e.g., /dev/cdrom)

    Yields:
        The libdiscid disc handle

    Raises:
        DiscReadError: If the TOC cannot be read
    """
    lib = _load_library()

    log.debug("Reading disc TOC", device=device)
    try:
        disc = lib.read(device, features=[])
    except lib.DiscError as e:
        log.debug("Disc read failed", device=device, error=str(e))
        raise DiscReadError(str(e)) from e
    except NotImplementedError as e:
        # libdiscid has no disc reading support on this platform
        raise DiscReadError(f"reading discs is not supported here: {e}") from e

    try:
        yield disc
    finally:
        # Last reference once the caller has dropped theirs
        del disc
        log.debug("Released disc handle", device=device)


def read_disc_ids(device: str, selection: IdSelection, submit: bool = False) -> DiscIds:
    """Read the identifiers a run needs from the disc in a drive.

    Args:
        device: Device path (e.g., /dev/cdrom)
        selection: Which identifiers to print
        submit: Also fetch the MusicBrainz submission URL

    Returns:
        DiscIds with the requested values filled in

    Raises:
        DiscReadError: If the TOC cannot be read
    """
    ids = DiscIds(device=device)

    with open_disc(device) as disc:
        if selection.musicbrainz:
            ids.musicbrainz_id = disc.id
        if submit:
            ids.submission_url = disc.submission_url
        if selection.cddb:
            ids.freedb_id = disc.freedb_id
        del disc

    log.info(
        "Read disc IDs",
        device=device,
        musicbrainz_id=ids.musicbrainz_id,
        freedb_id=ids.freedb_id,
    )
    return ids
