"""Browser launching for disc ID submission."""

from cdidc.browser.launcher import launch_browser

__all__ = ["launch_browser"]
