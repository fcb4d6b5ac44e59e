from pathlib import Path

import pytest

from devstation.lib.exceptions import PackageError, RequirementError, SysCallError
from devstation.lib.pacman import Pacman, PacmanConfig

from .conftest import CommandRecorder


@pytest.fixture
def pacman(tmp_path: Path) -> Pacman:
	return Pacman(db_lock=tmp_path / 'db.lck')


def test_install_command(recorder: CommandRecorder, pacman: Pacman) -> None:
	pacman.install(['git', 'curl'])
	assert recorder.commands == [['sudo', 'pacman', '-S', '--needed', '--noconfirm', 'git', 'curl']]


def test_install_single_package(recorder: CommandRecorder, pacman: Pacman) -> None:
	pacman.install('steam')
	assert recorder.commands == [['sudo', 'pacman', '-S', '--needed', '--noconfirm', 'steam']]


def test_install_nothing_is_a_noop(recorder: CommandRecorder, pacman: Pacman) -> None:
	pacman.install([])
	pacman.install(['', ''])
	assert recorder.commands == []


def test_upgrade_and_update(recorder: CommandRecorder, pacman: Pacman) -> None:
	pacman.upgrade()
	pacman.update()

	# the upgrade already synchronised the databases
	assert recorder.commands == [['sudo', 'pacman', '-Syu', '--noconfirm']]


def test_install_failure_propagates(recorder: CommandRecorder, pacman: Pacman) -> None:
	recorder.failures[('sudo', 'pacman', '-S')] = 1

	with pytest.raises(PackageError) as exc:
		pacman.install('does-not-exist')

	assert isinstance(exc.value.__cause__, SysCallError)


def test_remove_failure_is_tolerated(recorder: CommandRecorder, pacman: Pacman) -> None:
	recorder.failures[('sudo', 'pacman', '-Rns')] = 1

	assert pacman.remove(['not-installed']) is False
	assert recorder.find('sudo', 'pacman', '-Rns') == [['sudo', 'pacman', '-Rns', '--noconfirm', 'not-installed']]

	with pytest.raises(SysCallError):
		pacman.remove(['not-installed'], tolerate_failure=False)


def test_autoremove_orphans(recorder: CommandRecorder, pacman: Pacman) -> None:
	recorder.outputs[('pacman', '-Qtdq')] = b'libfoo\nlibbar\n'

	pacman.autoremove()

	assert recorder.commands == [
		['pacman', '-Qtdq'],
		['sudo', 'pacman', '-Rns', '--noconfirm', 'libfoo', 'libbar'],
	]


def test_autoremove_without_orphans(recorder: CommandRecorder, pacman: Pacman) -> None:
	# pacman -Qtdq exits 1 when there are no orphans
	recorder.failures[('pacman', '-Qtdq')] = 1

	pacman.autoremove()

	assert recorder.commands == [['pacman', '-Qtdq']]


def test_clean(recorder: CommandRecorder, pacman: Pacman) -> None:
	pacman.clean()
	assert recorder.commands == [['sudo', 'pacman', '-Sc', '--noconfirm']]


def test_waits_for_database_lock(recorder: CommandRecorder, tmp_path: Path) -> None:
	lock = tmp_path / 'db.lck'
	lock.touch()

	pacman = Pacman(db_lock=lock, lock_timeout=0.5)

	with pytest.raises(RequirementError):
		pacman.install('git')

	assert recorder.commands == []


def test_enable_multilib(pacman_conf: Path) -> None:
	config = PacmanConfig(pacman_conf)
	assert config.is_enabled('multilib') is False

	config.enable('multilib')
	assert config.apply() is True

	content = pacman_conf.read_text()
	assert '\n[multilib]\nInclude = /etc/pacman.d/mirrorlist\n' in content
	assert '#[multilib-testing]' in content
	assert PacmanConfig(pacman_conf).is_enabled('multilib')


def test_enable_multilib_twice_is_a_noop(recorder: CommandRecorder, pacman: Pacman, pacman_conf: Path) -> None:
	pacman.enable_multilib(PacmanConfig(pacman_conf))
	first = pacman_conf.read_text()

	assert recorder.commands == [['sudo', 'pacman', '-Sy', '--noconfirm']]

	pacman.enable_multilib(PacmanConfig(pacman_conf))

	assert pacman_conf.read_text() == first
	assert len(recorder.commands) == 1


def test_multilib_dry_run_leaves_file_alone(pacman_conf: Path) -> None:
	original = pacman_conf.read_text()

	config = PacmanConfig(pacman_conf, dry_run=True)
	config.enable('multilib')

	assert config.apply() is True
	assert pacman_conf.read_text() == original
