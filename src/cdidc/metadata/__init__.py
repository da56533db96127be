"""Disc identification through libdiscid."""

from cdidc.metadata.libdiscid import (
    DiscReadError,
    LibraryUnavailableError,
    get_default_device,
    open_disc,
    read_disc_ids,
)

__all__ = [
    "DiscReadError",
    "LibraryUnavailableError",
    "get_default_device",
    "open_disc",
    "read_disc_ids",
]
