import time
from pathlib import Path
from types import TracebackType

from . import dotfiles, interactions
from .apt import Apt
from .args import Arguments, ProvisionConfig
from .aur import Paru
from .exceptions import ServiceException, SysCallError
from .flatpak import Flatpak
from .general import SysCommand
from .hardware import Distro
from .models.package_set import PackageSetMenu, PackageSource
from .output import debug, error, header, info, log, logger, success, warn
from .package_manager import PackageManager
from .packages.selector import Selection, parse_tokens, resolve_selection, validate_tokens
from .pacman import Pacman
from .shell import ZshSetup
from .sudo import SudoKeepAlive, check_privileges


class Provisioner:
	"""
	Runs one provisioning script: owns the package manager backend, the
	secondary channels (AUR, flatpak) and the answers given up front.

	Used as a context manager around the whole run, which keeps the sudo
	credentials warm and reports the outcome on exit.
	"""

	def __init__(
		self,
		args: Arguments,
		config: ProvisionConfig,
		distro: Distro = Distro.Arch,
		package_manager: PackageManager | None = None,
		home: Path | None = None,
	) -> None:
		self.args = args
		self.config = config
		self.distro = distro
		self.dry_run = args.dry_run
		self.silent = args.silent
		self.home = home or Path.home()

		self.package_manager = package_manager or self._default_package_manager()
		self.paru = Paru(dry_run=self.dry_run, silent=self.silent)
		self.flatpak = Flatpak(system=distro == Distro.Debian, dry_run=self.dry_run, silent=self.silent)
		self.zsh = ZshSetup(home=self.home, dry_run=self.dry_run)

		self._keep_alive = SudoKeepAlive(enabled=not self.dry_run)
		self._summary: list[str] = []
		self._steps: list[str] = []

	def __enter__(self) -> 'Provisioner':
		if not self.dry_run:
			check_privileges()

		self._keep_alive.start()
		return self

	def __exit__(self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback: TracebackType | None) -> bool | None:
		self._keep_alive.stop()

		if exc_type is not None:
			if self._steps:
				error(f'Step "{self._steps[-1]}" failed: {exc_value}')
			warn(f'A log file has been created here: {logger.path}')

			# Return None to propagate the exception
			return None

		success('Setup complete!')
		return None

	def _default_package_manager(self) -> PackageManager:
		match self.distro:
			case Distro.Debian:
				return Apt(dry_run=self.dry_run, silent=self.silent)
			case _:
				return Pacman(dry_run=self.dry_run, silent=self.silent)

	@property
	def pacman(self) -> Pacman:
		assert isinstance(self.package_manager, Pacman)
		return self.package_manager

	@property
	def apt(self) -> Apt:
		assert isinstance(self.package_manager, Apt)
		return self.package_manager

	@property
	def steps(self) -> list[str]:
		return list(self._steps)

	@property
	def summary(self) -> list[str]:
		return list(self._summary)

	def step(self, title: str) -> None:
		self._steps.append(title)
		header(title)

	def add_summary(self, *lines: str) -> None:
		self._summary.extend(lines)

	def add_additional_packages(self, packages: str | list[str]) -> None:
		self.package_manager.install(packages)

	def add_aur_packages(self, packages: str | list[str]) -> None:
		self.paru.install(packages)

	def add_flatpak_apps(self, app_ids: str | list[str]) -> None:
		self.flatpak.install(app_ids)

	def install_selection(self, selection: Selection) -> bool:
		"""
		Installs what was picked from a menu, routed to the channel each
		set belongs to. An empty selection never reaches a package manager.
		"""
		if selection.is_empty():
			info(f'Nothing selected for "{selection.menu.title}", skipping')
			return False

		by_source: dict[PackageSource, list[str]] = {}
		for entry in selection.chosen:
			target = by_source.setdefault(entry.package_set.source, [])
			target.extend(p for p in entry.package_set if p not in target)

		for source, packages in by_source.items():
			match source:
				case PackageSource.Native:
					self.add_additional_packages(packages)
				case PackageSource.Aur:
					self.add_aur_packages(packages)
				case PackageSource.Flatpak:
					self.add_flatpak_apps(packages)

		return True

	def enable_service(self, services: str | list[str]) -> None:
		if isinstance(services, str):
			services = [services]

		for service in services:
			info(f'Enabling service {service}')

			try:
				SysCommand(['sudo', 'systemctl', 'enable', service], dry_run=self.dry_run)
			except SysCallError as err:
				raise ServiceException(f'Unable to enable service {service}: {err}')

	def validate_answers(self, answers: list[tuple[PackageSetMenu, str | list[str] | None]]) -> None:
		"""
		Checks menu answers from the configuration before any step runs,
		raising SelectionError on the first invalid one.
		"""
		for menu, answer in answers:
			if answer is None:
				continue

			validate_tokens(menu, self._as_tokens(answer))

	def choose(self, menu: PackageSetMenu, configured: str | list[str] | None = None) -> Selection:
		if configured is not None:
			debug(f'Using configured answer {configured!r} for "{menu.title}"')
			return resolve_selection(menu, self._as_tokens(configured))

		if self.silent:
			if menu.default is not None:
				tokens = [menu.default]
			elif menu.skip_token is not None:
				tokens = [menu.skip_token]
			else:
				tokens = []

			return resolve_selection(menu, tokens)

		return interactions.select(menu)

	def ask_yes_no(self, prompt: str, configured: bool | None = None, default: bool = False) -> bool:
		if configured is not None:
			return configured

		if self.silent:
			return default

		return interactions.ask_yes_no(prompt, default=default)

	def ask_text(self, prompt: str, configured: str | None = None) -> str:
		if configured is not None:
			return configured

		if self.silent:
			return ''

		return interactions.ask_text(prompt)

	def write_dotfile(self, path: Path, content: str) -> bool:
		if self.dry_run:
			debug(f'[dry-run] write {path}')
			return False

		return dotfiles.write_dotfile(path, content)

	def install_extras(self) -> None:
		"""
		Packages and flatpak applications listed in the configuration on
		top of what the script installs.
		"""
		if self.config.extra_packages:
			self.step('Installing extra packages')
			self.add_additional_packages(self.config.extra_packages)

		if self.config.flatpak_apps:
			self.step('Installing extra Flatpak applications')
			self.add_flatpak_apps(self.config.flatpak_apps)

	def print_summary(self, title: str = 'Summary') -> None:
		header(title)

		for line in self._summary:
			log(f'  • {line}', fg='white')

		print()
		info(f'Log files are available at {logger.directory}')

	def reboot(self) -> None:
		SysCommand(['sudo', 'reboot'], dry_run=self.dry_run)

	def finish(self, countdown: int | None = None, default: bool = False) -> bool:
		"""
		Reboots at the end of a run. With ``countdown`` the reboot happens
		after that many seconds without asking, otherwise the user is asked.
		Returns whether a reboot was issued.
		"""
		if self.args.skip_reboot or self.config.reboot is False:
			info('Reboot skipped. Please reboot manually when ready: sudo reboot')
			return False

		if countdown is not None:
			warn(f'System will reboot in {countdown} seconds... Press Ctrl+C to cancel')

			if not self.dry_run:
				for remaining in range(countdown, 0, -1):
					debug(f'Rebooting in {remaining}')
					time.sleep(1)

			self.reboot()
			return True

		if self.ask_yes_no('Do you want to reboot now? (y/n): ', self.config.reboot, default=default):
			info('Rebooting...')
			self.reboot()
			return True

		info('Reboot skipped. Please reboot manually when ready: sudo reboot')
		warn('Docker group membership and shell changes require a reboot to take effect.')
		return False

	@staticmethod
	def _as_tokens(answer: str | list[str]) -> list[str]:
		if isinstance(answer, str):
			return parse_tokens(answer)
		return [str(token) for token in answer]
