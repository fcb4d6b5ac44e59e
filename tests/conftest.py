from collections.abc import Iterator
from pathlib import Path

import pytest
from pytest import MonkeyPatch

from devstation.lib.args import Arguments, ProvisionConfig
from devstation.lib.exceptions import SysCallError
from devstation.lib.output import logger

_SYSCOMMAND_USERS = [
	'devstation.lib.package_manager',
	'devstation.lib.pacman',
	'devstation.lib.pacman.config',
	'devstation.lib.apt',
	'devstation.lib.aur',
	'devstation.lib.flatpak',
	'devstation.lib.download',
	'devstation.lib.shell',
	'devstation.lib.devtools',
	'devstation.lib.git_config',
	'devstation.lib.installer',
]


class CommandRecorder:
	"""
	Stands in for SysCommand: records every command instead of running it.
	``outputs`` and ``failures`` are keyed by a command prefix.
	"""

	def __init__(self) -> None:
		self.commands: list[list[str]] = []
		self.inputs: list[bytes | None] = []
		self.outputs: dict[tuple[str, ...], bytes] = {}
		self.failures: dict[tuple[str, ...], int] = {}

	def _lookup(self, cmd: list[str], table: dict) -> object:
		for prefix, value in table.items():
			if tuple(cmd[: len(prefix)]) == prefix:
				return value
		return None

	def __call__(self, cmd: str | list[str], **kwargs: object) -> 'FakeSysCommand':
		cmd = cmd.split() if isinstance(cmd, str) else list(cmd)
		self.commands.append(cmd)
		self.inputs.append(kwargs.get('input_data'))  # type: ignore[arg-type]

		if (exit_code := self._lookup(cmd, self.failures)) is not None:
			raise SysCallError(f'{cmd} exited with abnormal exit code [{exit_code}]', exit_code)  # type: ignore[arg-type]

		output = self._lookup(cmd, self.outputs) or b''
		return FakeSysCommand(cmd, output)  # type: ignore[arg-type]

	def find(self, *prefix: str) -> list[list[str]]:
		return [cmd for cmd in self.commands if tuple(cmd[: len(prefix)]) == prefix]

	def installed(self) -> list[str]:
		"""
		All package names handed to an install transaction, in order
		"""
		packages = []
		for cmd in self.commands:
			if cmd[:2] == ['sudo', 'pacman'] and cmd[2] == '-S':
				packages += cmd[5:]
			elif cmd[:4] == ['sudo', 'env', 'DEBIAN_FRONTEND=noninteractive', 'apt'] and cmd[4:6] == ['install', '-y']:
				packages += cmd[6:]
		return packages


class FakeSysCommand:
	def __init__(self, cmd: list[str], output: bytes = b'') -> None:
		self.cmd = cmd
		self.exit_code = 0
		self._trace_log = output

	def __iter__(self) -> Iterator[bytes]:
		for line in self._trace_log.splitlines():
			yield line + b'\n'

	def decode(self, encoding: str = 'utf-8', errors: str = 'backslashreplace', strip: bool = True) -> str:
		val = self._trace_log.decode(encoding, errors=errors)
		return val.strip() if strip else val

	def output(self, remove_cr: bool = True) -> bytes:
		return self._trace_log


@pytest.fixture(autouse=True)
def log_dir(tmp_path_factory: pytest.TempPathFactory, monkeypatch: MonkeyPatch) -> Path:
	path = tmp_path_factory.mktemp('logs')
	monkeypatch.setattr(logger, '_path', path)
	return path


@pytest.fixture
def recorder(monkeypatch: MonkeyPatch) -> CommandRecorder:
	rec = CommandRecorder()

	for module in _SYSCOMMAND_USERS:
		monkeypatch.setattr(f'{module}.SysCommand', rec)

	return rec


@pytest.fixture
def arguments() -> Arguments:
	return Arguments()


@pytest.fixture
def provision_config() -> ProvisionConfig:
	return ProvisionConfig()


@pytest.fixture(scope='session')
def config_fixture() -> Path:
	return Path(__file__).parent / 'data' / 'test_config.json'


@pytest.fixture(scope='session')
def invalid_menu_config_fixture() -> Path:
	return Path(__file__).parent / 'data' / 'test_invalid_menu_config.json'


@pytest.fixture
def pacman_conf(tmp_path: Path) -> Path:
	path = tmp_path / 'pacman.conf'
	path.write_text((Path(__file__).parent / 'data' / 'pacman.conf').read_text())
	return path


@pytest.fixture(scope='session')
def os_release_debian() -> Path:
	return Path(__file__).parent / 'data' / 'os-release-debian'


@pytest.fixture(scope='session')
def os_release_endeavouros() -> Path:
	return Path(__file__).parent / 'data' / 'os-release-endeavouros'
