import getpass
import tempfile
from pathlib import Path

from ..lib import devtools
from ..lib.args import ConfigHandler
from ..lib.download import download, install_font_archive
from ..lib.dotfiles import KITTY_NORD, debian_zshrc, vscode_laravel_entry
from ..lib.git_config import configure_git
from ..lib.hardware import Distro, SysInfo
from ..lib.installer import Provisioner
from ..lib.output import info, warn
from ..profiles import package_sets
from . import common

DISTRO = Distro.Debian
TITLE = 'Debian 13 Trixie Setup'

LARAVEL_PROJECTS = Path('Development') / 'laravel-projects'


def check_release() -> None:
	if SysInfo.version_codename() != 'trixie' and SysInfo.version_id() != '13':
		warn('This script is designed for Debian 13 Trixie. Continuing anyway...')


def install_deb(provisioner: Provisioner, url: str) -> None:
	if provisioner.dry_run:
		provisioner.apt.install_deb(Path('/tmp') / Path(url).name)
		return

	with tempfile.TemporaryDirectory(prefix='devstation-deb-') as tmp:
		provisioner.apt.install_deb(download(url, Path(tmp) / Path(url).name))


def update_and_clean(provisioner: Provisioner) -> None:
	apt = provisioner.apt
	apt.update()
	apt.upgrade()
	apt.autoremove()
	apt.clean()


def install_nerd_fonts(provisioner: Provisioner) -> None:
	info('Installing Nerd Fonts...')
	font_dir = provisioner.home / '.local' / 'share' / 'fonts'

	for name, url in devtools.NERD_FONTS.items():
		if provisioner.dry_run:
			info(f'[dry-run] would install {name} Nerd Font into {font_dir}')
			continue

		install_font_archive(url, font_dir)


def install_docker_desktop(provisioner: Provisioner) -> bool:
	if not provisioner.ask_yes_no('Do you want to install Docker Desktop? (Y/n): ', provisioner.config.docker_desktop, default=True):
		info('Skipping Docker Desktop')
		return False

	info('Installing Docker Desktop...')
	install_deb(provisioner, devtools.DOCKER_DESKTOP_DEB)
	devtools.add_user_to_group(getpass.getuser(), 'docker', dry_run=provisioner.dry_run)
	return True


def install_flatpak_apps(provisioner: Provisioner) -> bool:
	provisioner.step('Flatpak applications')

	if not provisioner.ask_yes_no('Do you want to install the gaming applications? (Y/n): ', provisioner.config.gaming, default=True):
		info('Skipping gaming applications')
		gaming = False
	else:
		provisioner.add_flatpak_apps(list(package_sets.FLATPAK_GAMING))
		gaming = True

	provisioner.add_flatpak_apps(list(package_sets.FLATPAK_MEDIA))
	return gaming


def setup_git(provisioner: Provisioner) -> None:
	provisioner.step('Git configuration')

	name = provisioner.ask_text('Enter your Git username (or press Enter to skip): ', provisioner.config.git_name)
	email = provisioner.ask_text('Enter your Git email (or press Enter to skip): ', provisioner.config.git_email)

	configure_git(name, email, dry_run=provisioner.dry_run)


def provision(provisioner: Provisioner) -> None:
	apt = provisioner.apt

	provisioner.step('System update')
	update_and_clean(provisioner)

	provisioner.step('Essential packages')
	common.install_set(provisioner, package_sets.DEBIAN_ESSENTIALS)
	provisioner.flatpak.add_remote()

	info('Installing Intel graphics drivers and firmware...')
	common.install_set(provisioner, package_sets.DEBIAN_INTEL)

	provisioner.step('Development tools')
	common.install_set(provisioner, package_sets.PHP_DEBIAN)
	devtools.install_composer(dry_run=provisioner.dry_run)

	docker_desktop = install_docker_desktop(provisioner)

	info('Installing Node.js and npm...')
	devtools.setup_nodesource(dry_run=provisioner.dry_run)
	provisioner.add_additional_packages('nodejs')

	info('Installing Visual Studio Code...')
	if apt.add_repository('vscode', devtools.VSCODE_KEY, devtools.VSCODE_REPOSITORY):
		apt.update()
	provisioner.add_additional_packages('code')

	provisioner.step('Terminal tools and fonts')
	common.install_set(provisioner, package_sets.DEBIAN_TERMINAL)
	common.install_set(provisioner, package_sets.DEBIAN_FONTS)
	install_nerd_fonts(provisioner)

	provisioner.step('Desktop applications')
	common.install_set(provisioner, package_sets.DEBIAN_GNOME_EXTENSIONS)

	info('Installing OnlyOffice...')
	install_deb(provisioner, devtools.ONLYOFFICE_DEB)

	gaming = install_flatpak_apps(provisioner)

	provisioner.step('Removing GNOME bloatware')
	apt.remove(list(package_sets.GNOME_BLOAT))
	apt.autoremove()
	apt.clean()
	provisioner.flatpak.uninstall_unused()

	provisioner.step('Laravel Sail environment')
	project_base = provisioner.home / LARAVEL_PROJECTS
	devtools.create_laravel_project(project_base, dry_run=provisioner.dry_run)

	setup_git(provisioner)

	common.setup_zsh(
		provisioner,
		debian_zshrc(),
		plugins=['zsh-autosuggestions', 'zsh-syntax-highlighting', 'fast-syntax-highlighting', 'zsh-autocomplete'],
		theme='nord-extended',
		link_theme=True,
		packages=(),
	)

	provisioner.step('Kitty configuration')
	provisioner.write_dotfile(provisioner.home / '.config' / 'kitty' / 'kitty.conf', KITTY_NORD)

	provisioner.install_extras()

	provisioner.step('Final system update')
	update_and_clean(provisioner)

	info('Creating desktop shortcuts...')
	provisioner.write_dotfile(
		provisioner.home / '.local' / 'share' / 'applications' / 'vscode-laravel.desktop',
		vscode_laravel_entry(project_base / 'example-app'),
	)
	devtools.refresh_desktop_caches(provisioner.home, dry_run=provisioner.dry_run)

	provisioner.add_summary(
		'System updated and cleaned',
		'Zsh with Oh My Zsh, Nord Extended theme and essential plugins',
		'Node.js and npm, PHP and Composer, VSCode',
		'Docker Desktop installed' if docker_desktop else 'Docker Desktop skipped',
		f'Laravel Sail project at ~/{LARAVEL_PROJECTS}/example-app',
		'OnlyOffice',
		'Fonts (JetBrains Mono, Fira Code Nerd Fonts, MS Fonts)',
		'Gaming apps (Heroic, Steam, RetroArch, Lutris)' if gaming else 'Gaming apps skipped',
		'Media apps (OBS, Discord, Spotify, Sober)',
		'Terminal tools (Kitty, Cava, Fastfetch)',
		'Intel graphics drivers',
		'GNOME extensions support, GNOME bloatware removed',
	)


def perform_installation(handler: ConfigHandler) -> None:
	check_release()

	with Provisioner(handler.args, handler.config, distro=DISTRO) as provisioner:
		provision(provisioner)

	provisioner.print_summary(TITLE)
	info("Run 'newgrp docker' to apply Docker group changes immediately")
	info(f"Use 'cd ~/{LARAVEL_PROJECTS}/example-app && ./vendor/bin/sail up' to start Laravel")
	provisioner.finish()
