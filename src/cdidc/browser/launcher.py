"""Fire-and-forget browser launch for disc ID submission.

The browser runs in a forked child that replaces itself with the browser
executable. The parent never waits for it; if the browser cannot be started
the child reports the failure itself, since there is no channel back.
"""

import os
import sys

import structlog

from cdidc import NAME
from cdidc.i18n import _

log = structlog.get_logger()


def launch_browser(browser: str, url: str) -> int:
    """Open a URL with a browser command in a detached child process.

    Returns immediately after forking.

    Args:
        browser: Browser command, looked up in PATH
        url: URL passed as the browser's only argument

    Returns:
        Process ID of the child
    """
    # Anything still buffered would otherwise be written twice
    sys.stdout.flush()
    sys.stderr.flush()

    pid = os.fork()
    if pid == 0:
        _exec_browser(browser, url)

    log.info("Launched browser", browser=browser, url=url, pid=pid)
    return pid


def _exec_browser(browser: str, url: str) -> None:
    """Child side of launch_browser. Never returns."""
    stdout_copy = os.dup(1)
    stderr_copy = os.dup(2)

    # Keep the browser's own chatter off the terminal
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, 1)
    os.dup2(devnull, 2)
    os.close(devnull)

    try:
        os.execvp(browser, [browser, url])
    except OSError as e:
        message = _("%s: Failed to start %s: %s\n") % (NAME, browser, e.strerror or e)
        os.write(stderr_copy, message.encode())
        os.write(stdout_copy, (_("Submission URL: %s\n") % url).encode())
    finally:
        os.close(stdout_copy)
        os.close(stderr_copy)
        os._exit(1)
