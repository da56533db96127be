"""Core models."""

from cdidc.core.disc import DiscIds, IdSelection

__all__ = ["DiscIds", "IdSelection"]
