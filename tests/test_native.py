# SPDX-License-Identifier: MIT

import subprocess

import pytest

from omnitask.notify import native
from omnitask.notify.native import NativeNotifier, NotificationPermission


@pytest.fixture()
def linux_desktop(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    calls: list[list[str]] = []
    monkeypatch.setattr(native.platform, "system", lambda: "Linux")
    monkeypatch.setattr(
        native.shutil,
        "which",
        lambda name: "/usr/bin/notify-send" if name == "notify-send" else None,
    )

    def fake_run(command: list[str], **kwargs) -> subprocess.CompletedProcess:
        calls.append(command)
        return subprocess.CompletedProcess(command, 0)

    monkeypatch.setattr(native.subprocess, "run", fake_run)
    return calls


def test_disabled_notifier_is_denied(linux_desktop: list[list[str]]) -> None:
    notifier = NativeNotifier(enabled=False)

    assert notifier.request_permission() == NotificationPermission.DENIED
    notifier.show("title", "body", "tag")
    assert linux_desktop == []


def test_show_before_permission_does_nothing(linux_desktop: list[list[str]]) -> None:
    notifier = NativeNotifier()

    notifier.show("title", "body", "tag")

    assert notifier.permission == NotificationPermission.UNSET
    assert linux_desktop == []


def test_notify_send_gets_title_body_and_tag(linux_desktop: list[list[str]]) -> None:
    notifier = NativeNotifier()

    assert notifier.request_permission() == NotificationPermission.GRANTED
    notifier.show("OmniTask Reminder", "You have 2 tasks due today!", "daily")

    command = linux_desktop[0]
    assert command[0] == "/usr/bin/notify-send"
    assert command[-2:] == ["OmniTask Reminder", "You have 2 tasks due today!"]
    assert "--hint=string:x-dunst-stack-tag:daily" in command


def test_missing_backend_is_denied(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(native.platform, "system", lambda: "Linux")
    monkeypatch.setattr(native.shutil, "which", lambda name: None)

    assert NativeNotifier().request_permission() == NotificationPermission.DENIED


def test_failing_backend_is_swallowed(
    linux_desktop: list[list[str]], monkeypatch: pytest.MonkeyPatch
) -> None:
    def broken_run(command: list[str], **kwargs) -> subprocess.CompletedProcess:
        raise subprocess.CalledProcessError(1, command)

    notifier = NativeNotifier()
    notifier.request_permission()
    monkeypatch.setattr(native.subprocess, "run", broken_run)

    notifier.show("title", "body", "tag")


def test_windows_toast_escapes_xml(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(native.platform, "system", lambda: "Windows")
    monkeypatch.setattr(
        native.shutil,
        "which",
        lambda name: "C:/powershell.exe" if name == "powershell" else None,
    )

    def fake_run(command: list[str], **kwargs) -> subprocess.CompletedProcess:
        calls.append(command)
        return subprocess.CompletedProcess(command, 0)

    monkeypatch.setattr(native.subprocess, "run", fake_run)

    notifier = NativeNotifier()
    notifier.request_permission()
    notifier.show("OmniTask Reminder", "Reminder: R&D <plan>. Check your dashboard.", "tag")

    script = calls[0][-1]
    assert "Reminder: R&amp;D &lt;plan&gt;. Check your dashboard." in script
    assert "R&D <plan>" not in script
