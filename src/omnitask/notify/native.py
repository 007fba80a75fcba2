# SPDX-License-Identifier: MIT

"""
Desktop notifications through the host platform's notifier.

Supported backends:
- notify-send (Linux / BSD desktops)
- osascript (macOS)
- PowerShell toast (Windows)

When no backend is available, or native notifications are disabled in the
configuration, permission is denied and show() does nothing.
"""

import logging
import platform
import shutil
import subprocess
from enum import StrEnum
from typing import Optional, Protocol
from xml.sax.saxutils import escape as xml_escape

logger = logging.getLogger(__name__)

APP_TITLE = "OmniTask"


class NotificationPermission(StrEnum):
    GRANTED = "granted"
    DENIED = "denied"
    UNSET = "unset"


class NativeNotificationChannel(Protocol):
    @property
    def permission(self) -> NotificationPermission: ...

    def request_permission(self) -> NotificationPermission: ...

    def show(self, title: str, body: str, tag: str) -> None: ...


def _escape_applescript(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _escape_powershell(text: str) -> str:
    return text.replace("'", "''")


class NativeNotifier:
    def __init__(self, enabled: bool = True, timeout_seconds: float = 10.0) -> None:
        self.enabled = enabled
        self.timeout_seconds = timeout_seconds
        self._permission = NotificationPermission.UNSET
        self._command: Optional[list[str]] = None

    @property
    def permission(self) -> NotificationPermission:
        return self._permission

    def request_permission(self) -> NotificationPermission:
        if not self.enabled:
            self._permission = NotificationPermission.DENIED
            return self._permission

        self._command = self.__detect_backend()
        if self._command is None:
            logger.info("No native notification backend found; using in-app log only")
            self._permission = NotificationPermission.DENIED
        else:
            self._permission = NotificationPermission.GRANTED
        return self._permission

    def __detect_backend(self) -> Optional[list[str]]:
        system = platform.system()
        if system == "Darwin":
            osascript = shutil.which("osascript")
            return [osascript] if osascript else None
        if system == "Windows":
            powershell = shutil.which("powershell") or shutil.which("pwsh")
            return [powershell] if powershell else None
        notify_send = shutil.which("notify-send")
        return [notify_send] if notify_send else None

    def __build_command(self, title: str, body: str, tag: str) -> list[str]:
        if self._command is None:
            raise ValueError("no native notification backend")
        executable = self._command[0]
        system = platform.system()

        if system == "Darwin":
            script = (
                f'display notification "{_escape_applescript(body)}" '
                f'with title "{_escape_applescript(APP_TITLE)}" '
                f'subtitle "{_escape_applescript(title)}"'
            )
            return [executable, "-e", script]

        if system == "Windows":
            ps_script = f"""
            [Windows.UI.Notifications.ToastNotificationManager, Windows.UI.Notifications, ContentType = WindowsRuntime] | Out-Null
            [Windows.Data.Xml.Dom.XmlDocument, Windows.Data.Xml.Dom.XmlDocument, ContentType = WindowsRuntime] | Out-Null
            $template = @'
            <toast><visual><binding template="ToastText02">
                <text id="1">{xml_escape(title)}</text>
                <text id="2">{xml_escape(body)}</text>
            </binding></visual></toast>
'@
            $xml = New-Object Windows.Data.Xml.Dom.XmlDocument
            $xml.LoadXml($template)
            $toast = New-Object Windows.UI.Notifications.ToastNotification $xml
            $toast.Tag = '{_escape_powershell(tag)}'
            [Windows.UI.Notifications.ToastNotificationManager]::CreateToastNotifier('{APP_TITLE}').Show($toast)
            """
            return [executable, "-Command", ps_script]

        # The stack tag lets the desktop replace a previous alert with the same tag
        return [
            executable,
            f"--app-name={APP_TITLE}",
            f"--hint=string:x-dunst-stack-tag:{tag}",
            f"--hint=string:x-canonical-private-synchronous:{tag}",
            title,
            body,
        ]

    def show(self, title: str, body: str, tag: str) -> None:
        if self._permission != NotificationPermission.GRANTED:
            return
        try:
            subprocess.run(
                self.__build_command(title, body, tag),
                capture_output=True,
                timeout=self.timeout_seconds,
                check=True,
            )
        except (OSError, subprocess.SubprocessError, ValueError) as e:
            logger.warning("Native notification failed: %s", e)
