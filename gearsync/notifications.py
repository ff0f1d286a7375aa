"""Native OS notifications for Gear Sync."""

import logging
import platform
import shutil
import subprocess

logger = logging.getLogger(__name__)

APP_TITLE = "Gear Sync"


def send_notification(title: str, message: str) -> None:
    """Send a native OS notification. Failures are logged, never raised."""
    system = platform.system()
    try:
        if system == "Darwin":
            _run(["osascript", "-e", _applescript(title, message)], timeout=5)
        elif system == "Linux" and shutil.which("notify-send"):
            _run(["notify-send", "--app-name", APP_TITLE, title, message], timeout=5)
        else:
            logger.debug(f"Notifications not supported on {system}")
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Failed to send notification: {e}")


def notify_rate_limit_reached() -> None:
    send_notification(
        APP_TITLE,
        "Strava rate limit reached. Remaining gear will sync tomorrow.",
    )


def notify_sync_failed(reason: str) -> None:
    send_notification(APP_TITLE, f"Gear sync failed: {reason}")


def _applescript(title: str, message: str) -> str:
    # Escape backslashes and double quotes for AppleScript string literals.
    def quote(text: str) -> str:
        return text.replace("\\", "\\\\").replace('"', '\\"')

    return f'display notification "{quote(message)}" with title "{quote(title)}"'


def _run(args: list[str], timeout: int) -> None:
    subprocess.run(args, capture_output=True, timeout=timeout)
