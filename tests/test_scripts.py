import hashlib
import importlib
from pathlib import Path
from types import ModuleType, SimpleNamespace
from typing import Any

import pytest
from pytest import MonkeyPatch

from devstation.lib import apt as apt_module
from devstation.lib import aur, devtools, dotfiles, shell
from devstation.lib import installer as installer_module
from devstation.lib import pacman as pacman_module
from devstation.lib.apt import Apt
from devstation.lib.args import SCRIPTS, Arguments, ProvisionConfig
from devstation.lib.exceptions import SelectionError
from devstation.lib.hardware import Distro
from devstation.lib.installer import Provisioner
from devstation.lib.package_manager import PackageManager
from devstation.lib.pacman import Pacman, PacmanConfig
from devstation.lib.shell import OH_MY_ZSH_INSTALLER, ZshSetup
from devstation.lib.sudo import SudoKeepAlive
from devstation.scripts import arch_dev, arch_enhanced, arch_minimal, arch_workstation, debian_trixie

from .conftest import CommandRecorder


@pytest.fixture
def host(monkeypatch: MonkeyPatch, pacman_conf: Path) -> None:
	"""
	A host with nothing installed yet, owned by a bash user called jane
	"""
	monkeypatch.delenv('ZSH_CUSTOM', raising=False)
	monkeypatch.setattr('getpass.getuser', lambda: 'jane')
	monkeypatch.setattr(aur, 'binary_exists', lambda name: False)
	monkeypatch.setattr(devtools, 'binary_exists', lambda name: False)
	monkeypatch.setattr(devtools, 'user_in_group', lambda user, group: False)
	monkeypatch.setattr(ZshSetup, 'current_shell', lambda self: '/bin/bash')
	monkeypatch.setattr(ZshSetup, 'current_user', lambda self: 'jane')
	monkeypatch.setattr(pacman_module, 'PacmanConfig', lambda dry_run=False: PacmanConfig(pacman_conf, dry_run=dry_run))


def _arch(tmp_path: Path, config: ProvisionConfig | None = None) -> Provisioner:
	return Provisioner(
		Arguments(dry_run=True, silent=True),
		config or ProvisionConfig(),
		package_manager=Pacman(dry_run=True, db_lock=tmp_path / 'db.lck'),
		home=tmp_path,
	)


def _debian(tmp_path: Path, config: ProvisionConfig | None = None) -> Provisioner:
	return Provisioner(
		Arguments(dry_run=True, silent=True),
		config or ProvisionConfig(),
		distro=Distro.Debian,
		package_manager=Apt(dry_run=True, sources_dir=tmp_path / 'sources.list.d', keyring_dir=tmp_path / 'keyrings'),
		home=tmp_path,
	)


def test_every_script_is_loadable() -> None:
	for script in SCRIPTS:
		module = importlib.import_module(f'devstation.scripts.{script}')

		assert isinstance(module.DISTRO, Distro)
		assert module.TITLE
		assert callable(module.provision)
		assert callable(module.perform_installation)


def test_arch_dev(recorder: CommandRecorder, host: None, tmp_path: Path) -> None:
	config = ProvisionConfig(
		desktop='2',
		multimedia=['1', '4', '7'],
		gaming=True,
		docker_desktop=False,
		extra_packages=['htop'],
	)
	provisioner = _arch(tmp_path, config)

	arch_dev.validate(provisioner)
	arch_dev.provision(provisioner)

	installed = recorder.installed()

	assert recorder.commands[0] == ['sudo', 'pacman', '-Syu', '--noconfirm']
	assert 'plasma' in installed
	assert 'gnome' not in installed
	assert installed[-1] == 'htop'
	assert {'gimp', 'obs-studio', 'vlc', 'steam', 'wine'} <= set(installed)
	assert 'krita' not in installed

	assert ['sudo', 'systemctl', 'enable', 'sddm'] in recorder.commands
	assert recorder.find('sudo', 'systemctl', 'enable', 'power-profiles-daemon') == [['sudo', 'systemctl', 'enable', 'power-profiles-daemon']]
	assert ['sudo', 'usermod', '-aG', 'docker', 'jane'] in recorder.commands
	assert ['sudo', 'chsh', '-s', '/usr/bin/zsh', 'jane'] in recorder.commands

	aur_packages = [package for cmd in recorder.find('paru', '-S') for package in cmd[4:]]
	assert 'docker-desktop' not in aur_packages
	assert {'visual-studio-code-bin', 'onlyoffice-bin', 'ttf-ms-fonts'} <= set(aur_packages)

	assert provisioner.steps[0] == 'System update'
	assert 'Desktop environment: KDE Plasma' in provisioner.summary
	assert 'Multimedia applications: GIMP, OBS Studio, VLC' in provisioner.summary


def test_arch_dev_skips_everything_optional(recorder: CommandRecorder, host: None, tmp_path: Path) -> None:
	provisioner = _arch(tmp_path, ProvisionConfig(multimedia=['10'], gaming=False))

	arch_dev.provision(provisioner)

	installed = recorder.installed()

	# silent runs fall back to the first desktop
	assert 'gnome' in installed
	assert not {'gimp', 'vlc', 'steam', 'wine'} & set(installed)
	assert 'Multimedia applications: none' in provisioner.summary


def test_arch_dev_rejects_unknown_answers(recorder: CommandRecorder, host: None, tmp_path: Path) -> None:
	provisioner = _arch(tmp_path, ProvisionConfig(desktop='7'))

	with pytest.raises(SelectionError):
		arch_dev.validate(provisioner)

	assert recorder.commands == []


def test_arch_minimal(recorder: CommandRecorder, host: None, tmp_path: Path) -> None:
	provisioner = _arch(tmp_path, ProvisionConfig(desktop='1'))

	arch_minimal.validate(provisioner)
	arch_minimal.provision(provisioner)

	installed = recorder.installed()
	flatpak = next(i for i, cmd in enumerate(recorder.commands) if cmd[:2] == ['flatpak', 'remote-add'])
	desktop = next(i for i, cmd in enumerate(recorder.commands) if 'gnome-shell' in cmd)

	assert flatpak < desktop
	assert 'gnome-extra' not in installed
	assert ['sudo', 'systemctl', 'enable', 'gdm'] in recorder.commands
	assert ['paru', '-Sc', '--noconfirm'] in recorder.commands
	assert ['sudo', 'pacman', '-Sc', '--noconfirm'] not in recorder.commands
	assert 'GNOME extensions: Extension Manager, AppIndicator, GSConnect' in provisioner.summary


def test_arch_enhanced(recorder: CommandRecorder, host: None, tmp_path: Path) -> None:
	provisioner = _arch(tmp_path)

	arch_enhanced.provision(provisioner)

	installed = recorder.installed()

	# multilib is enabled and the database refreshed before steam is installed
	refresh = recorder.commands.index(['sudo', 'pacman', '-Sy', '--noconfirm'])
	steam = next(i for i, cmd in enumerate(recorder.commands) if 'steam' in cmd)
	assert refresh < steam

	assert {'goverlay', 'docker-buildx'} <= set(installed)
	assert ['paru', '-S', '--needed', '--noconfirm', 'protonplus'] in recorder.commands
	assert ['sudo', 'pacman', '-Sc', '--noconfirm'] in recorder.commands
	assert any(cmd[:3] == ['git', 'clone', '--depth=1'] and cmd[-1].endswith('themes/nord-extended') for cmd in recorder.commands)


def test_arch_workstation(recorder: CommandRecorder, host: None, tmp_path: Path) -> None:
	provisioner = _arch(tmp_path)

	arch_workstation.provision(provisioner)

	installed = recorder.installed()

	assert {'exa', 'docker-buildx'} <= set(installed)
	assert ['paru', '-S', '--needed', '--noconfirm', 'visual-studio-code-bin', 'google-chrome'] in recorder.commands
	assert ['sh', '-s', '--', '--yes'] in recorder.commands
	assert ['sudo', 'systemctl', 'enable', 'power-profiles-daemon'] in recorder.commands


def test_debian_trixie(recorder: CommandRecorder, host: None, tmp_path: Path) -> None:
	config = ProvisionConfig(gaming=False, git_name='Jane Doe', git_email='jane@example.org')
	provisioner = _debian(tmp_path, config)

	debian_trixie.provision(provisioner)

	installed = recorder.installed()

	assert {'zsh', 'nodejs', 'code', 'kitty', 'php-cli'} <= set(installed)
	assert recorder.find('sudo', 'flatpak', 'remote-add') != []
	assert recorder.find('flatpak') == []

	flatpak_apps = [app for cmd in recorder.find('sudo', 'flatpak', 'install') for app in cmd[6:]]
	assert 'com.valvesoftware.Steam' not in flatpak_apps
	assert 'com.obsproject.Studio' in flatpak_apps

	debs = [cmd[-1] for cmd in recorder.find('sudo', 'dpkg', '-i')]
	assert [Path(deb).name for deb in debs] == ['docker-desktop-amd64.deb', 'onlyoffice-desktopeditors_amd64.deb']

	assert ['git', 'config', '--global', 'user.name', 'Jane Doe'] in recorder.commands
	assert ['sudo', 'tee', str(tmp_path / 'sources.list.d' / 'vscode.list')] in recorder.commands
	assert recorder.find('composer', 'create-project') != []
	assert 'Gaming apps skipped' in provisioner.summary
	assert 'Docker Desktop installed' in provisioner.summary


def test_debian_release_check(monkeypatch: MonkeyPatch, os_release_debian: Path, capsys: pytest.CaptureFixture[str]) -> None:
	from devstation.lib import hardware

	monkeypatch.setattr(hardware, '_sys_info', hardware._SysInfo(os_release_path=os_release_debian))
	debian_trixie.check_release()
	assert 'designed for Debian 13' not in capsys.readouterr().out

	monkeypatch.setattr(hardware, '_sys_info', hardware._SysInfo(os_release_path=Path('/nonexistent')))
	debian_trixie.check_release()
	assert 'designed for Debian 13' in capsys.readouterr().out


class HostEffects:
	"""
	Wraps the command recorder so the commands that create files on a
	real host leave them behind, which is what a second run looks at.
	"""

	def __init__(self, recorder: CommandRecorder, home: Path) -> None:
		self.recorder = recorder
		self.home = home
		self.remote_scripts: list[str] = []

	def __call__(self, cmd: list[str], **kwargs: Any) -> Any:
		result = self.recorder(cmd, **kwargs)

		match cmd:
			case ['git', 'clone', '--depth=1', _, dest]:
				Path(dest).mkdir(parents=True)
			case ['composer', 'create-project', _, name]:
				(Path(kwargs['working_directory']) / name).mkdir(parents=True)
			case ['sudo', 'tee', dest]:
				Path(dest).parent.mkdir(parents=True, exist_ok=True)
				Path(dest).write_bytes(kwargs.get('input_data') or b'')
			case ['sudo', 'install', '-D', *_, dest]:
				Path(dest).parent.mkdir(parents=True, exist_ok=True)
				Path(dest).touch()

		return result

	def run_remote_script(self, url: str, interpreter: list[str] | None = None, **kwargs: Any) -> None:
		self.remote_scripts.append(url)

		installs = {
			OH_MY_ZSH_INSTALLER: self.home / '.oh-my-zsh',
			devtools.PYENV_INSTALLER: self.home / '.pyenv',
			devtools.NVM_INSTALLER: self.home / '.nvm',
		}
		if target := installs.get(url):
			target.mkdir(parents=True)
		if url == devtools.NVM_INSTALLER:
			(self.home / '.nvm' / 'nvm.sh').touch()

	def tool_exists(self, name: str) -> bool:
		match name:
			case 'composer':
				return self.recorder.find('sudo', 'install', '-m', '755') != []
			case 'starship':
				return devtools.STARSHIP_INSTALLER in self.remote_scripts
		return True


@pytest.fixture
def host_effects(monkeypatch: MonkeyPatch, recorder: CommandRecorder, host: None, tmp_path: Path) -> HostEffects:
	effects = HostEffects(recorder, tmp_path)
	composer_installer = b'<?php // composer setup'

	def fake_fetch(url: str, timeout: int = 60) -> bytes:
		if url == devtools.COMPOSER_SIGNATURE:
			return hashlib.sha384(composer_installer).hexdigest().encode()
		return composer_installer

	for module in (shell, devtools, apt_module):
		monkeypatch.setattr(module, 'SysCommand', effects)

	monkeypatch.setattr(shell, 'run_remote_script', effects.run_remote_script)
	monkeypatch.setattr(devtools, 'run_remote_script', effects.run_remote_script)
	monkeypatch.setattr(devtools, 'binary_exists', effects.tool_exists)
	monkeypatch.setattr(devtools, 'fetch', fake_fetch)
	monkeypatch.setattr(apt_module, 'fetch', lambda url: b'armored key')
	monkeypatch.setattr(debian_trixie, 'download', lambda url, dest: dest)
	monkeypatch.setattr(debian_trixie, 'install_font_archive', lambda url, font_dir: [])
	monkeypatch.setattr(shell, 'locate_binary', lambda name: f'/usr/bin/{name}')

	monkeypatch.setattr(aur, 'binary_exists', lambda name: recorder.find('makepkg') != [])
	monkeypatch.setattr(devtools, 'user_in_group', lambda user, group: recorder.find('sudo', 'usermod', '-aG', group, user) != [])
	monkeypatch.setattr(ZshSetup, 'current_shell', lambda self: '/usr/bin/zsh' if recorder.find('sudo', 'chsh') else '/bin/bash')

	return effects


@pytest.mark.parametrize('script', SCRIPTS)
def test_second_run_changes_nothing(
	script: str,
	monkeypatch: MonkeyPatch,
	recorder: CommandRecorder,
	host_effects: HostEffects,
	tmp_path: Path,
) -> None:
	module = importlib.import_module(f'devstation.scripts.{script}')

	written: list[Path] = []
	write_dotfile = dotfiles.write_dotfile

	def tracking_write(path: Path, content: str, mode: int | None = None) -> bool:
		changed = write_dotfile(path, content, mode)
		if changed:
			written.append(path)
		return changed

	monkeypatch.setattr(dotfiles, 'write_dotfile', tracking_write)

	def provisioner() -> Provisioner:
		if module.DISTRO == Distro.Debian:
			package_manager: PackageManager = Apt(sources_dir=tmp_path / 'sources.list.d', keyring_dir=tmp_path / 'keyrings', silent=True)
		else:
			package_manager = Pacman(db_lock=tmp_path / 'db.lck', silent=True)

		return Provisioner(
			Arguments(silent=True),
			ProvisionConfig(),
			distro=module.DISTRO,
			package_manager=package_manager,
			home=tmp_path,
		)

	module.provision(provisioner())

	assert written
	assert host_effects.remote_scripts

	first_run = len(recorder.commands)
	written.clear()
	host_effects.remote_scripts.clear()

	module.provision(provisioner())

	second_run = recorder.commands[first_run:]

	assert not [cmd for cmd in second_run if cmd[:2] == ['git', 'clone']]
	assert ['makepkg', '-si', '--noconfirm'] not in second_run
	assert not [cmd for cmd in second_run if cmd[:2] in (['sudo', 'chsh'], ['sudo', 'usermod'], ['sudo', 'tee'])]
	assert not [cmd for cmd in second_run if cmd[:2] == ['composer', 'create-project'] or cmd[0] == 'gpg']
	assert ['sudo', 'pacman', '-Sy', '--noconfirm'] not in second_run
	assert written == []
	assert set(host_effects.remote_scripts) <= {devtools.NODESOURCE_SETUP}


@pytest.mark.parametrize('module', [arch_dev, arch_minimal])
def test_unknown_answers_fail_before_sudo(module: ModuleType, monkeypatch: MonkeyPatch, recorder: CommandRecorder, host: None) -> None:
	def no_sudo(*args: Any) -> None:
		raise AssertionError('sudo was reached with invalid answers')

	monkeypatch.setattr(installer_module, 'check_privileges', no_sudo)
	monkeypatch.setattr(SudoKeepAlive, 'start', no_sudo)

	handler = SimpleNamespace(args=Arguments(silent=True), config=ProvisionConfig(desktop='7'))

	with pytest.raises(SelectionError):
		module.perform_installation(handler)

	assert recorder.commands == []
