from ..lib.args import ConfigHandler
from ..lib.dotfiles import arch_minimal_zshrc
from ..lib.hardware import Distro
from ..lib.installer import Provisioner
from ..lib.output import info, success
from ..profiles import DESKTOP_MINIMAL_MENU, package_sets, profile_for
from . import common

DISTRO = Distro.Arch
TITLE = 'Minimal Arch Linux Developer Environment Setup'

REBOOT_COUNTDOWN = 10


def validate(provisioner: Provisioner) -> None:
	provisioner.validate_answers([(DESKTOP_MINIMAL_MENU, provisioner.config.desktop)])


def provision(provisioner: Provisioner) -> None:
	common.update_system(provisioner)

	provisioner.step('Essential packages')
	common.install_set(provisioner, package_sets.ARCH_MINIMAL_ESSENTIALS)

	common.install_hardware_support(provisioner, package_sets.INTEL_MINIMAL, package_sets.NETWORK_MINIMAL)
	common.install_aur_helper(provisioner)

	# flatpak first, GNOME extensions are managed through it
	common.install_flatpak_support(provisioner)

	provisioner.step('Desktop environment selection (minimal)')
	selection = provisioner.choose(DESKTOP_MINIMAL_MENU, provisioner.config.desktop)

	for name in selection.chosen_names():
		info(f'Installing {name}...')
		profile_for(name).install(provisioner)
		success(f'{name} installed successfully')

	common.install_dev_tools(provisioner, docker=package_sets.DOCKER_MINIMAL)
	info('Docker installed successfully (Docker Desktop can be installed separately if needed)')

	common.install_fonts(provisioner)

	common.setup_zsh(
		provisioner,
		arch_minimal_zshrc(),
		plugins=['zsh-autosuggestions', 'zsh-syntax-highlighting'],
		packages=('zsh', 'bat'),
	)

	provisioner.install_extras()

	common.cleanup_arch(provisioner)

	provisioner.add_summary(
		'Intel Alder Lake CPU/GPU support (minimal drivers)',
		f'Minimal desktop environment: {", ".join(selection.chosen_names()) or "none"}',
	)

	if 'GNOME Minimal' in selection.chosen_names():
		provisioner.add_summary('GNOME extensions: Extension Manager, AppIndicator, GSConnect')

	provisioner.add_summary(
		'Development tools: VS Code, Node.js (NVM), PHP, Composer, Docker',
		'Zsh with Oh-My-Zsh and essential plugins',
		'Flatpak support',
		'System optimized and cleaned',
	)


def perform_installation(handler: ConfigHandler) -> None:
	provisioner = Provisioner(handler.args, handler.config, distro=DISTRO)

	# answers are checked before sudo asks for a password
	validate(provisioner)

	with provisioner:
		provision(provisioner)

	provisioner.print_summary(TITLE)
	provisioner.finish(countdown=REBOOT_COUNTDOWN)
