import subprocess
import threading

import pytest
from pytest import MonkeyPatch

from devstation.lib import sudo
from devstation.lib.exceptions import RequirementError
from devstation.lib.hardware import SysInfo
from devstation.lib.sudo import SudoKeepAlive, check_privileges


class FakeRun:
	def __init__(self, validate_rc: int = 0) -> None:
		self.validate_rc = validate_rc
		self.calls: list[list[str]] = []
		self.refreshed = threading.Event()

	def __call__(self, cmd: list[str], **kwargs: object) -> subprocess.CompletedProcess:
		self.calls.append(cmd)

		if cmd == ['sudo', '-v']:
			return subprocess.CompletedProcess(cmd, self.validate_rc)

		self.refreshed.set()
		return subprocess.CompletedProcess(cmd, 0)


@pytest.fixture
def fake_run(monkeypatch: MonkeyPatch) -> FakeRun:
	run = FakeRun()
	monkeypatch.setattr(sudo.subprocess, 'run', run)
	return run


def test_refuses_root(monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr(SysInfo, 'is_root', staticmethod(lambda: True))
	monkeypatch.setattr(sudo, 'binary_exists', lambda name: True)

	with pytest.raises(RequirementError, match='should not be run as root'):
		check_privileges()


def test_requires_sudo(monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr(SysInfo, 'is_root', staticmethod(lambda: False))
	monkeypatch.setattr(sudo, 'binary_exists', lambda name: False)

	with pytest.raises(RequirementError, match='sudo is required'):
		check_privileges()


def test_regular_user_with_sudo(monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr(SysInfo, 'is_root', staticmethod(lambda: False))
	monkeypatch.setattr(sudo, 'binary_exists', lambda name: name == 'sudo')

	check_privileges()


def test_keep_alive_refreshes_until_stopped(fake_run: FakeRun) -> None:
	keep_alive = SudoKeepAlive(interval=0.01)

	with keep_alive:
		assert keep_alive.running
		assert fake_run.refreshed.wait(timeout=5)

	assert not keep_alive.running
	assert fake_run.calls[0] == ['sudo', '-v']
	assert ['sudo', '-n', 'true'] in fake_run.calls

	# no refresh happens once stopped
	calls = len(fake_run.calls)
	threading.Event().wait(0.05)
	assert len(fake_run.calls) == calls


def test_keep_alive_fails_without_credentials(fake_run: FakeRun) -> None:
	fake_run.validate_rc = 1
	keep_alive = SudoKeepAlive(interval=0.01)

	with pytest.raises(RequirementError):
		keep_alive.start()

	assert not keep_alive.running
	assert fake_run.calls == [['sudo', '-v']]


def test_disabled_keep_alive_runs_nothing(fake_run: FakeRun) -> None:
	keep_alive = SudoKeepAlive(enabled=False)

	keep_alive.start()
	assert not keep_alive.running

	keep_alive.stop()
	assert fake_run.calls == []
