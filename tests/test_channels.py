import hashlib
from pathlib import Path

import pytest
from pytest import MonkeyPatch

from devstation.lib import aur, devtools, download
from devstation.lib.aur import Paru
from devstation.lib.exceptions import DownloadError
from devstation.lib.flatpak import FLATHUB_URL, Flatpak
from devstation.lib.git_config import configure_git

from .conftest import CommandRecorder


def test_flatpak_user_commands(recorder: CommandRecorder) -> None:
	flatpak = Flatpak()
	flatpak.add_remote()
	flatpak.install(['com.spotify.Client', 'com.discordapp.Discord'])
	flatpak.uninstall_unused()

	assert recorder.commands == [
		['flatpak', 'remote-add', '--if-not-exists', 'flathub', FLATHUB_URL],
		['flatpak', 'install', '-y', '--noninteractive', 'flathub', 'com.spotify.Client', 'com.discordapp.Discord'],
		['flatpak', 'uninstall', '--unused', '-y'],
	]


def test_flatpak_system_commands_use_sudo(recorder: CommandRecorder) -> None:
	Flatpak(system=True).add_remote()
	assert recorder.commands == [['sudo', 'flatpak', 'remote-add', '--if-not-exists', 'flathub', FLATHUB_URL]]


def test_flatpak_install_nothing(recorder: CommandRecorder) -> None:
	Flatpak().install([])
	assert recorder.commands == []


def test_paru_install(recorder: CommandRecorder) -> None:
	Paru().install(['visual-studio-code-bin', 'ttf-ms-fonts'])
	assert recorder.commands == [['paru', '-S', '--needed', '--noconfirm', 'visual-studio-code-bin', 'ttf-ms-fonts']]


def test_paru_bootstrap(recorder: CommandRecorder, monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr(aur, 'binary_exists', lambda name: False)

	assert Paru().bootstrap() is True

	clone, build = recorder.commands
	assert clone[:3] == ['git', 'clone', 'https://aur.archlinux.org/paru-bin.git']
	assert build == ['makepkg', '-si', '--noconfirm']


def test_paru_bootstrap_skipped_when_installed(recorder: CommandRecorder, monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr(aur, 'binary_exists', lambda name: True)

	assert Paru().bootstrap() is False
	assert recorder.commands == []


def test_paru_clean(recorder: CommandRecorder) -> None:
	Paru().clean()
	assert recorder.commands == [['paru', '-Sc', '--noconfirm']]


def test_run_remote_script(recorder: CommandRecorder, monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr(download, 'fetch', lambda url: b'echo installing\n')

	download.run_remote_script('https://starship.rs/install.sh', interpreter=['sh'], args=['--yes'])
	download.run_remote_script('https://pyenv.run', interpreter=['bash'])

	assert recorder.commands == [['sh', '-s', '--', '--yes'], ['bash']]
	assert recorder.inputs == [b'echo installing\n', b'echo installing\n']


def test_run_remote_script_dry_run_does_not_fetch(recorder: CommandRecorder, monkeypatch: MonkeyPatch) -> None:
	def fail(url: str) -> bytes:
		raise AssertionError('fetched in dry run')

	monkeypatch.setattr(download, 'fetch', fail)

	download.run_remote_script('https://example.org/install.sh', dry_run=True)
	assert recorder.commands == [['sh']]


def test_fetch_reports_unreachable_hosts() -> None:
	with pytest.raises(DownloadError) as exc:
		download.fetch('http://127.0.0.1:9/unreachable', timeout=1)

	assert exc.value.url == 'http://127.0.0.1:9/unreachable'


def test_configure_git(recorder: CommandRecorder) -> None:
	assert configure_git('Jane Doe', 'jane@example.org') == ['user.name', 'user.email']

	assert recorder.commands == [
		['git', 'config', '--global', 'user.name', 'Jane Doe'],
		['git', 'config', '--global', 'user.email', 'jane@example.org'],
	]


def test_configure_git_skips_empty_answers(recorder: CommandRecorder) -> None:
	assert configure_git('', None) == []
	assert configure_git('', 'jane@example.org') == ['user.email']
	assert recorder.commands == [['git', 'config', '--global', 'user.email', 'jane@example.org']]


def test_composer_checksum(recorder: CommandRecorder, monkeypatch: MonkeyPatch) -> None:
	installer = b'<?php // composer installer'
	published = {
		devtools.COMPOSER_INSTALLER: installer,
		devtools.COMPOSER_SIGNATURE: b'0000',
	}

	monkeypatch.setattr(devtools, 'binary_exists', lambda name: False)
	monkeypatch.setattr(devtools, 'fetch', lambda url: published[url])

	with pytest.raises(DownloadError):
		devtools.install_composer()

	assert recorder.commands == []

	published[devtools.COMPOSER_SIGNATURE] = hashlib.sha384(installer).hexdigest().encode() + b'\n'

	assert devtools.install_composer(install_dir=Path('/usr/local/bin')) is True
	assert recorder.commands[0][0] == 'php'
	assert recorder.commands[1][:4] == ['sudo', 'install', '-m', '755']
	assert recorder.commands[1][-1] == '/usr/local/bin/composer'


def test_add_user_to_group(recorder: CommandRecorder, monkeypatch: MonkeyPatch) -> None:
	monkeypatch.setattr(devtools, 'user_in_group', lambda user, group: False)
	assert devtools.add_user_to_group('jane', 'docker') is True

	monkeypatch.setattr(devtools, 'user_in_group', lambda user, group: True)
	assert devtools.add_user_to_group('jane', 'docker') is False

	assert recorder.commands == [['sudo', 'usermod', '-aG', 'docker', 'jane']]


def test_laravel_project_is_created_once(recorder: CommandRecorder, tmp_path: Path) -> None:
	base = tmp_path / 'Development' / 'laravel-projects'

	assert devtools.create_laravel_project(base) is True
	assert recorder.commands[0] == ['composer', 'create-project', 'laravel/laravel', 'example-app']

	(base / 'example-app').mkdir()
	recorder.commands.clear()

	assert devtools.create_laravel_project(base) is False
	assert recorder.commands == []
