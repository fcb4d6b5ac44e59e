import os
import pwd
from pathlib import Path

from .download import run_remote_script
from .general import SysCommand, locate_binary
from .output import debug, info

OH_MY_ZSH_INSTALLER = 'https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh'

ZSH_PLUGINS = {
	'zsh-autosuggestions': 'https://github.com/zsh-users/zsh-autosuggestions',
	'zsh-syntax-highlighting': 'https://github.com/zsh-users/zsh-syntax-highlighting.git',
	'you-should-use': 'https://github.com/MichaelAquilina/zsh-you-should-use.git',
	'fast-syntax-highlighting': 'https://github.com/zdharma-continuum/fast-syntax-highlighting.git',
	'zsh-autocomplete': 'https://github.com/marlonrichert/zsh-autocomplete.git',
}

ZSH_THEMES = {
	'nord-extended': 'https://github.com/fxbrit/nord-extended.git',
}


def clone_repository(url: str, dest: Path, dry_run: bool = False) -> bool:
	"""
	Shallow clones ``url`` into ``dest`` unless ``dest`` already exists.
	Returns whether a clone took place.
	"""
	if dest.exists():
		debug(f'{dest} already exists, not cloning {url}')
		return False

	SysCommand(['git', 'clone', '--depth=1', url, str(dest)], dry_run=dry_run)
	return True


class ZshSetup:
	def __init__(self, home: Path | None = None, dry_run: bool = False) -> None:
		self.home = home or Path.home()
		self.dry_run = dry_run

	@property
	def oh_my_zsh_dir(self) -> Path:
		return self.home / '.oh-my-zsh'

	@property
	def custom_dir(self) -> Path:
		if custom := os.environ.get('ZSH_CUSTOM'):
			return Path(custom)
		return self.oh_my_zsh_dir / 'custom'

	@property
	def zshrc(self) -> Path:
		return self.home / '.zshrc'

	def install_oh_my_zsh(self) -> bool:
		if self.oh_my_zsh_dir.exists():
			info('Oh My Zsh already installed')
			return False

		info('Installing Oh My Zsh...')
		# the installer would otherwise start a new shell and change the login shell itself
		run_remote_script(
			OH_MY_ZSH_INSTALLER,
			interpreter=['sh'],
			args=['--unattended'],
			environment_vars={'RUNZSH': 'no', 'CHSH': 'no'},
			dry_run=self.dry_run,
		)
		return True

	def install_plugins(self, names: list[str]) -> list[str]:
		cloned = []

		for name in names:
			url = ZSH_PLUGINS[name]
			if clone_repository(url, self.custom_dir / 'plugins' / name, dry_run=self.dry_run):
				cloned.append(name)

		return cloned

	def install_theme(self, name: str, link: bool = False) -> bool:
		"""
		Clones a theme repository into ``custom/themes/<name>``. With
		``link`` the theme file is also symlinked one level up, so the
		theme can be referenced as ``<name>`` instead of ``<name>/<name>``.
		"""
		themes = self.custom_dir / 'themes'
		cloned = clone_repository(ZSH_THEMES[name], themes / name, dry_run=self.dry_run)

		if link and not self.dry_run:
			target = themes / f'{name}.zsh-theme'
			source = themes / name / f'{name}.zsh-theme'

			if not target.is_symlink():
				target.symlink_to(source)

		return cloned

	def current_shell(self) -> str:
		return pwd.getpwuid(os.getuid()).pw_shell

	def current_user(self) -> str:
		return pwd.getpwuid(os.getuid()).pw_name

	def set_default_shell(self) -> bool:
		if Path(self.current_shell()).name == 'zsh':
			debug('Login shell is already zsh')
			return False

		zsh = locate_binary('zsh') if not self.dry_run else '/usr/bin/zsh'

		info('Changing default shell to zsh...')
		# through sudo, chsh would otherwise prompt for the user's password
		SysCommand(['sudo', 'chsh', '-s', zsh, self.current_user()], dry_run=self.dry_run)
		return True
