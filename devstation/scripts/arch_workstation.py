from ..lib import devtools
from ..lib.args import ConfigHandler
from ..lib.dotfiles import STARSHIP_CATPPUCCIN, arch_workstation_zshrc
from ..lib.hardware import Distro
from ..lib.installer import Provisioner
from ..lib.output import info, log, success
from ..profiles import package_sets
from . import common

DISTRO = Distro.Arch
TITLE = 'Enhanced Developer Environment'

BANNER = r'''
    ╔═╗┬─┐┌─┐┬ ┬  ╦  ┬┌┐┌┬ ┬─┐ ┬  ╔═╗┌─┐┌┬┐┬ ┬┌─┐
    ╠═╣├┬┘│  ├─┤  ║  ││││││ │┌┴┬┘  ╚═╗├┤  │ │ │├─┘
    ╩ ╩┴└─└─┘┴ ┴  ╩═╝┴┘└┘└─┘┴ └─  ╚═╝└─┘ ┴ └─┘┴
'''


def print_banner() -> None:
	for line in BANNER.strip('\n').splitlines():
		log(line, fg='magenta')
	log(f'{TITLE:^52}', fg='magenta')


def install_dev_tools(provisioner: Provisioner) -> None:
	provisioner.step('Development tools')

	info('Installing Visual Studio Code and Google Chrome...')
	provisioner.add_aur_packages(['visual-studio-code-bin', 'google-chrome'])

	common.install_node(provisioner)

	info('Installing pyenv and Python build dependencies...')
	common.install_set(provisioner, package_sets.PYTHON_BUILD_DEPS)
	devtools.install_pyenv(provisioner.home, dry_run=provisioner.dry_run)
	info("Pyenv installed - use 'pyenv install <version>' to install Python versions")

	common.install_docker(provisioner, package_sets.DOCKER_BUILDX)

	success('Development tools installed successfully')


def setup_shell(provisioner: Provisioner) -> None:
	common.setup_zsh(
		provisioner,
		arch_workstation_zshrc(),
		plugins=['zsh-autosuggestions', 'zsh-syntax-highlighting', 'you-should-use'],
		packages=('zsh', 'bat', 'exa'),
	)

	info('Installing Starship prompt...')
	devtools.install_starship(dry_run=provisioner.dry_run)
	provisioner.write_dotfile(provisioner.home / '.config' / 'starship.toml', STARSHIP_CATPPUCCIN)

	success('Shell configuration completed with Starship and Catppuccin theme')


def provision(provisioner: Provisioner) -> None:
	print_banner()

	common.update_system(provisioner)

	provisioner.step('Essential packages')
	common.install_set(provisioner, package_sets.ARCH_WORKSTATION_ESSENTIALS)
	success('Essential packages installed successfully')

	common.install_hardware_support(provisioner, package_sets.INTEL_MINIMAL, package_sets.NETWORK_MINIMAL)
	common.install_power_management(provisioner)
	success('Intel hardware support configured')

	common.install_aur_helper(provisioner)
	common.install_flatpak_support(provisioner)

	install_dev_tools(provisioner)
	common.install_fonts(provisioner, fonts=package_sets.FONTS_NERD)
	setup_shell(provisioner)

	provisioner.install_extras()

	common.cleanup_arch(provisioner)

	provisioner.add_summary(
		'Intel Alder Lake CPU/GPU support',
		'Essential system tools (btop, fastfetch, yt-dlp, cava, zenity, amberol)',
		'Development tools: VS Code, Google Chrome, Node.js via NVM, Python via Pyenv, Docker',
		'Zsh with Oh-My-Zsh, Starship prompt with Catppuccin theme',
		'Fonts: JetBrains Mono Nerd Font + system fonts',
		'Flatpak support ready for additional applications',
		'System optimized and cleaned',
	)


def perform_installation(handler: ConfigHandler) -> None:
	with Provisioner(handler.args, handler.config, distro=DISTRO) as provisioner:
		provision(provisioner)

	provisioner.print_summary('Installation summary')
	provisioner.finish(default=True)
