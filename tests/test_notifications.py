"""Tests for OS notification delivery."""

import subprocess
from unittest.mock import patch

from gearsync.notifications import (
    notify_rate_limit_reached,
    notify_sync_failed,
    send_notification,
)


class TestSendNotification:
    """Tests for send_notification()."""

    @patch("gearsync.notifications.platform.system", return_value="Darwin")
    @patch("gearsync.notifications.subprocess.run")
    def test_macos_calls_osascript(self, mock_run, _mock_sys):
        send_notification("Title", "Body")

        mock_run.assert_called_once()
        args = mock_run.call_args[0][0]
        assert args[:2] == ["osascript", "-e"]
        assert args[2] == 'display notification "Body" with title "Title"'

    @patch("gearsync.notifications.platform.system", return_value="Darwin")
    @patch("gearsync.notifications.subprocess.run")
    def test_macos_escapes_quotes(self, mock_run, _mock_sys):
        send_notification('Say "hello"', 'It\'s a "test"')

        script = mock_run.call_args[0][0][2]
        assert '\\"hello\\"' in script
        assert '\\"test\\"' in script

    @patch("gearsync.notifications.shutil.which", return_value="/usr/bin/notify-send")
    @patch("gearsync.notifications.platform.system", return_value="Linux")
    @patch("gearsync.notifications.subprocess.run")
    def test_linux_calls_notify_send(self, mock_run, _mock_sys, _mock_which):
        send_notification("Title", "Body")

        args = mock_run.call_args[0][0]
        assert args[0] == "notify-send"
        assert args[-2:] == ["Title", "Body"]

    @patch("gearsync.notifications.shutil.which", return_value=None)
    @patch("gearsync.notifications.platform.system", return_value="Linux")
    @patch("gearsync.notifications.subprocess.run")
    def test_linux_without_notify_send(self, mock_run, _mock_sys, _mock_which):
        send_notification("Title", "Body")

        mock_run.assert_not_called()

    @patch("gearsync.notifications.platform.system", return_value="Windows")
    @patch("gearsync.notifications.subprocess.run")
    def test_unsupported_platform_no_error(self, mock_run, _mock_sys):
        send_notification("Title", "Body")

        mock_run.assert_not_called()

    @patch("gearsync.notifications.platform.system", return_value="Darwin")
    @patch(
        "gearsync.notifications.subprocess.run",
        side_effect=subprocess.TimeoutExpired("osascript", 5),
    )
    def test_failure_is_logged_not_raised(self, mock_run, _mock_sys):
        send_notification("Title", "Body")


class TestGearNotifications:
    @patch("gearsync.notifications.send_notification")
    def test_rate_limit_message(self, mock_send):
        notify_rate_limit_reached()

        title, message = mock_send.call_args[0]
        assert title == "Gear Sync"
        assert "rate limit" in message

    @patch("gearsync.notifications.send_notification")
    def test_sync_failed_includes_reason(self, mock_send):
        notify_sync_failed("API error (404)")

        assert "API error (404)" in mock_send.call_args[0][1]
