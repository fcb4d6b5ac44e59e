from ..lib.args import ConfigHandler
from ..lib.dotfiles import arch_enhanced_zshrc
from ..lib.hardware import Distro
from ..lib.installer import Provisioner
from ..lib.output import info, success
from ..profiles import package_sets
from . import common

DISTRO = Distro.Arch
TITLE = 'Enhanced Arch Linux Developer Environment Setup'


def install_gaming(provisioner: Provisioner) -> None:
	provisioner.step('Gaming tools and Steam')

	info('Enabling the multilib repository for 32-bit support...')
	provisioner.pacman.enable_multilib()

	common.install_set(provisioner, package_sets.GAMING_ENHANCED)
	provisioner.add_aur_packages('protonplus')

	success('Gaming tools installed')


def provision(provisioner: Provisioner) -> None:
	common.update_system(provisioner)

	provisioner.step('Essential packages')
	common.install_set(provisioner, package_sets.ARCH_ENHANCED_ESSENTIALS)

	common.install_hardware_support(provisioner, package_sets.INTEL_MINIMAL, package_sets.NETWORK_MINIMAL)
	common.install_aur_helper(provisioner)
	common.install_power_management(provisioner)

	install_gaming(provisioner)

	common.install_flatpak_support(provisioner)
	common.install_dev_tools(provisioner, docker=package_sets.DOCKER_BUILDX)
	common.install_fonts(provisioner)

	common.setup_zsh(
		provisioner,
		arch_enhanced_zshrc(),
		plugins=['zsh-autosuggestions', 'zsh-syntax-highlighting', 'you-should-use'],
		theme='nord-extended',
	)

	provisioner.install_extras()

	common.cleanup_arch(provisioner, clean_pacman_cache=True)

	provisioner.add_summary(
		'Intel Alder Lake CPU/GPU support (minimal drivers)',
		'Gaming tools: Steam, GameMode, MangoHUD, GOverlay, ProtonPlus',
		'Development tools: VS Code, Node.js (NVM), PHP, Composer, Docker',
		'Terminal tools: Neovim, Kitty, Cava, ImageMagick',
		'Zsh with Oh-My-Zsh, nord-extended theme, and essential plugins',
		'Flatpak support',
		'System optimized and cleaned',
		'Aliases: install, update, remove, orphan, cleanup',
	)


def perform_installation(handler: ConfigHandler) -> None:
	with Provisioner(handler.args, handler.config, distro=DISTRO) as provisioner:
		provision(provisioner)

	provisioner.print_summary(TITLE)
	provisioner.finish()
