from ..lib import devtools
from ..lib.args import ConfigHandler
from ..lib.dotfiles import arch_dev_zshrc
from ..lib.hardware import Distro
from ..lib.installer import Provisioner
from ..lib.output import info, success
from ..profiles import DESKTOP_FULL_MENU, package_sets, profile_for
from . import common

DISTRO = Distro.Arch
TITLE = 'Arch Linux Developer Environment Setup'


def validate(provisioner: Provisioner) -> None:
	config = provisioner.config
	provisioner.validate_answers(
		[
			(DESKTOP_FULL_MENU, config.desktop),
			(package_sets.MULTIMEDIA_MENU, config.multimedia),
		]
	)


def install_desktop(provisioner: Provisioner) -> list[str]:
	provisioner.step('Desktop environment selection')

	selection = provisioner.choose(DESKTOP_FULL_MENU, provisioner.config.desktop)

	for name in selection.chosen_names():
		info(f'Installing {name}...')
		profile_for(name).install(provisioner)
		success(f'{name} installed successfully')

	return selection.chosen_names()


def install_gaming(provisioner: Provisioner) -> bool:
	provisioner.step('Gaming packages')

	if not provisioner.ask_yes_no('Do you want to install gaming packages? (y/N): ', provisioner.config.gaming):
		info('Skipping gaming packages installation')
		return False

	info('Installing gaming packages...')
	common.install_set(provisioner, package_sets.GAMING_WINE)
	common.install_set(provisioner, package_sets.GAMING_TOOLS)

	info('Installing gaming tools from AUR...')
	provisioner.add_aur_packages(list(package_sets.GAMING_AUR))
	provisioner.add_additional_packages('steam')

	success('Gaming packages installed successfully')
	return True


def provision(provisioner: Provisioner) -> None:
	common.update_system(provisioner)

	provisioner.step('Essential packages')
	common.install_set(provisioner, package_sets.ARCH_ESSENTIALS)

	common.install_hardware_support(provisioner, package_sets.INTEL_FULL, package_sets.NETWORK_FULL)
	common.install_aur_helper(provisioner)

	desktops = install_desktop(provisioner)

	common.install_dev_tools(provisioner)

	docker_desktop = provisioner.ask_yes_no('Do you want to install Docker Desktop? (y/N): ', provisioner.config.docker_desktop)
	if docker_desktop:
		info('Installing Docker Desktop...')
		provisioner.add_aur_packages('docker-desktop')

	provisioner.step('Productivity software')
	info('Installing OnlyOffice with Microsoft fonts...')
	provisioner.add_aur_packages(['onlyoffice-bin', *package_sets.MS_FONTS])

	common.setup_zsh(
		provisioner,
		arch_dev_zshrc(),
		plugins=['zsh-autosuggestions', 'zsh-syntax-highlighting', 'you-should-use'],
		packages=('zsh', 'bat'),
	)

	common.install_flatpak_support(provisioner)

	provisioner.step('Multimedia packages')
	multimedia = provisioner.choose(package_sets.MULTIMEDIA_MENU, provisioner.config.multimedia)
	provisioner.install_selection(multimedia)

	gaming = install_gaming(provisioner)

	provisioner.install_extras()

	provisioner.step('Final system configuration')
	devtools.refresh_desktop_caches(provisioner.home, dry_run=provisioner.dry_run)

	provisioner.add_summary(
		'Intel Alder Lake CPU/GPU support with latest drivers and compute runtime',
		f'Desktop environment: {", ".join(desktops) or "none"}',
		'Development tools: VS Code, Node.js (via NVM), PHP, Composer',
		'Docker for Laravel Sail development' + (' with Docker Desktop' if docker_desktop else ''),
		'OnlyOffice with Microsoft fonts',
		f'Multimedia applications: {", ".join(multimedia.chosen_names()) or "none"}',
		'Zsh with Oh-My-Zsh and configured plugins',
		'Flatpak support',
	)

	if gaming:
		provisioner.add_summary('Gaming packages: Wine, Steam, Heroic, MangoHUD, GameScope')


def perform_installation(handler: ConfigHandler) -> None:
	provisioner = Provisioner(handler.args, handler.config, distro=DISTRO)

	# answers are checked before sudo asks for a password
	validate(provisioner)

	with provisioner:
		provision(provisioner)

	provisioner.print_summary(TITLE)
	provisioner.finish()
