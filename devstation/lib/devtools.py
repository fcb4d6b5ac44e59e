import grp
import hashlib
import tempfile
from pathlib import Path

from .download import fetch, run_remote_script
from .exceptions import DownloadError, SysCallError
from .general import SysCommand, binary_exists
from .output import debug, info, success, warn

NVM_INSTALLER = 'https://raw.githubusercontent.com/nvm-sh/nvm/v0.39.0/install.sh'
PYENV_INSTALLER = 'https://pyenv.run'
STARSHIP_INSTALLER = 'https://starship.rs/install.sh'
NODESOURCE_SETUP = 'https://deb.nodesource.com/setup_lts.x'
COMPOSER_INSTALLER = 'https://getcomposer.org/installer'
COMPOSER_SIGNATURE = 'https://composer.github.io/installer.sig'

VSCODE_KEY = 'https://packages.microsoft.com/keys/microsoft.asc'
VSCODE_REPOSITORY = 'deb [arch=amd64,arm64,armhf signed-by={keyring}] https://packages.microsoft.com/repos/code stable main'

DOCKER_DESKTOP_DEB = 'https://desktop.docker.com/linux/main/amd64/docker-desktop-amd64.deb'
ONLYOFFICE_DEB = 'https://download.onlyoffice.com/install/desktop/editors/linux/onlyoffice-desktopeditors_amd64.deb'

NERD_FONTS = {
	'JetBrainsMono': 'https://github.com/ryanoasis/nerd-fonts/releases/latest/download/JetBrainsMono.zip',
	'FiraCode': 'https://github.com/ryanoasis/nerd-fonts/releases/latest/download/FiraCode.zip',
}

# node and the nvm functions only exist inside a shell that sourced nvm.sh
_NVM_LTS = 'source "$HOME/.nvm/nvm.sh" && nvm install --lts && nvm use --lts && nvm alias default "lts/*"'


def install_nvm(home: Path, dry_run: bool = False) -> bool:
	if (home / '.nvm' / 'nvm.sh').exists():
		info('nvm already installed')
		installed = False
	else:
		info('Installing nvm (Node Version Manager)...')
		run_remote_script(NVM_INSTALLER, interpreter=['bash'], dry_run=dry_run)
		installed = True

	info('Installing latest LTS Node.js...')
	SysCommand(['bash', '-c', _NVM_LTS], peek_output=True, dry_run=dry_run)

	return installed


def install_pyenv(home: Path, dry_run: bool = False) -> bool:
	if (home / '.pyenv').exists():
		info('pyenv already installed')
		return False

	info('Installing pyenv...')
	run_remote_script(PYENV_INSTALLER, interpreter=['bash'], dry_run=dry_run)
	return True


def install_starship(dry_run: bool = False) -> bool:
	if binary_exists('starship'):
		info('Starship already installed')
		return False

	info('Installing Starship prompt...')
	run_remote_script(STARSHIP_INSTALLER, interpreter=['sh'], args=['--yes'], dry_run=dry_run)
	return True


def setup_nodesource(dry_run: bool = False) -> None:
	info('Setting up the NodeSource LTS repository...')
	run_remote_script(NODESOURCE_SETUP, interpreter=['sudo', '-E', 'bash'], dry_run=dry_run)


def verify_sha384(data: bytes, expected: str) -> bool:
	return hashlib.sha384(data).hexdigest() == expected.strip().lower()


def install_composer(install_dir: Path = Path('/usr/local/bin'), dry_run: bool = False) -> bool:
	"""
	Installs Composer system wide, refusing an installer whose checksum
	does not match the published signature.
	"""
	if binary_exists('composer'):
		info('Composer already installed')
		return False

	info('Installing Composer...')

	if dry_run:
		SysCommand(['php', 'composer-setup.php'], dry_run=True)
		return True

	installer = fetch(COMPOSER_INSTALLER)
	signature = fetch(COMPOSER_SIGNATURE).decode()

	if not verify_sha384(installer, signature):
		raise DownloadError(COMPOSER_INSTALLER, 'Installer corrupt, checksum does not match the published signature')

	debug('Composer installer verified')

	with tempfile.TemporaryDirectory(prefix='devstation-composer-') as tmp:
		setup = Path(tmp) / 'composer-setup.php'
		setup.write_bytes(installer)

		SysCommand(['php', str(setup), f'--install-dir={tmp}', '--filename=composer'])
		SysCommand(['sudo', 'install', '-m', '755', str(Path(tmp) / 'composer'), str(install_dir / 'composer')])

	success('Composer installed')
	return True


def user_in_group(user: str, group: str) -> bool:
	try:
		return user in grp.getgrnam(group).gr_mem
	except KeyError:
		return False


def add_user_to_group(user: str, group: str, dry_run: bool = False) -> bool:
	if user_in_group(user, group):
		debug(f'{user} is already a member of {group}')
		return False

	info(f'Adding {user} to the {group} group')
	SysCommand(['sudo', 'usermod', '-aG', group, user], dry_run=dry_run)
	return True


def create_laravel_project(base_dir: Path, name: str = 'example-app', dry_run: bool = False) -> bool:
	"""
	Creates a sample Laravel project with Sail under ``base_dir``.
	An existing project directory is left alone.
	"""
	project = base_dir / name

	if project.exists():
		info(f'Laravel project {project} already exists')
		return False

	info('Creating sample Laravel project...')

	if not dry_run:
		base_dir.mkdir(parents=True, exist_ok=True)

	SysCommand(['composer', 'create-project', 'laravel/laravel', name], working_directory=base_dir, peek_output=True, dry_run=dry_run)
	SysCommand(['composer', 'require', 'laravel/sail', '--dev'], working_directory=project, peek_output=True, dry_run=dry_run)
	SysCommand(
		['php', 'artisan', 'sail:install', '--with=mysql,redis,meilisearch,mailpit,selenium'],
		working_directory=project,
		peek_output=True,
		dry_run=dry_run,
	)

	success(f'Laravel project created in {project}')
	return True


def refresh_desktop_caches(home: Path, dry_run: bool = False) -> None:
	"""
	Rebuilds the font, desktop entry and mime caches. Each of these is a
	convenience, so a failure only warns.
	"""
	commands = [
		['fc-cache', '-fv'],
		['update-desktop-database', str(home / '.local/share/applications')],
		['update-mime-database', str(home / '.local/share/mime')],
		['xdg-user-dirs-update'],
	]

	for cmd in commands:
		if not binary_exists(cmd[0]) and not dry_run:
			debug(f'{cmd[0]} not available, skipping')
			continue

		try:
			SysCommand(cmd, dry_run=dry_run)
		except SysCallError as err:
			warn(f'{cmd[0]} failed: {err.exit_code}')
