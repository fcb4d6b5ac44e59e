import getpass

from ..lib import devtools
from ..lib.dotfiles import ZshrcConfig
from ..lib.installer import Provisioner
from ..lib.models.package_set import PackageSet
from ..lib.output import info, success
from ..profiles import package_sets


def update_system(provisioner: Provisioner) -> None:
	provisioner.step('System update')
	provisioner.package_manager.upgrade()


def install_set(provisioner: Provisioner, package_set: PackageSet) -> None:
	info(f'Installing {package_set.name.lower()}...')
	provisioner.add_additional_packages(list(package_set))


def install_hardware_support(provisioner: Provisioner, intel: PackageSet, network: PackageSet) -> None:
	provisioner.step('Intel hardware support (Alder Lake + Iris Xe)')
	install_set(provisioner, intel)

	info('Installing network tools...')
	install_set(provisioner, network)
	provisioner.enable_service('NetworkManager')


def install_power_management(provisioner: Provisioner) -> None:
	provisioner.add_additional_packages('power-profiles-daemon')
	provisioner.enable_service('power-profiles-daemon')


def install_aur_helper(provisioner: Provisioner) -> None:
	provisioner.step('AUR helper installation')
	provisioner.paru.bootstrap()


def install_flatpak_support(provisioner: Provisioner) -> None:
	provisioner.step('Flatpak support')
	provisioner.add_additional_packages('flatpak')
	provisioner.flatpak.add_remote()


def install_node(provisioner: Provisioner) -> None:
	info('Installing NVM for Node.js management...')
	devtools.install_nvm(provisioner.home, dry_run=provisioner.dry_run)


def install_docker(provisioner: Provisioner, docker: PackageSet) -> None:
	info('Installing Docker...')
	install_set(provisioner, docker)
	provisioner.enable_service('docker')
	devtools.add_user_to_group(getpass.getuser(), 'docker', dry_run=provisioner.dry_run)


def install_dev_tools(provisioner: Provisioner, docker: PackageSet = package_sets.DOCKER) -> None:
	provisioner.step('Development tools')

	info('Installing Visual Studio Code...')
	provisioner.add_aur_packages('visual-studio-code-bin')

	install_node(provisioner)

	info('Installing PHP and Composer...')
	install_set(provisioner, package_sets.PHP_ARCH)

	install_docker(provisioner, docker)


def install_fonts(provisioner: Provisioner, fonts: PackageSet = package_sets.FONTS) -> None:
	provisioner.step('Fonts')
	install_set(provisioner, fonts)

	info('Installing Microsoft fonts...')
	provisioner.add_aur_packages(list(package_sets.MS_FONTS))


def setup_zsh(
	provisioner: Provisioner,
	zshrc: ZshrcConfig,
	plugins: list[str],
	theme: str | None = None,
	link_theme: bool = False,
	packages: tuple[str, ...] = ('zsh',),
) -> None:
	provisioner.step('Shell setup (Zsh + Oh My Zsh)')
	provisioner.add_additional_packages(list(packages))

	zsh = provisioner.zsh
	zsh.install_oh_my_zsh()

	info('Installing Zsh plugins...')
	zsh.install_plugins(plugins)

	if theme:
		zsh.install_theme(theme, link=link_theme)

	provisioner.write_dotfile(zsh.zshrc, zshrc.render())
	zsh.set_default_shell()


def cleanup_arch(provisioner: Provisioner, clean_pacman_cache: bool = False) -> None:
	provisioner.step('Cleanup and optimization')
	info('Cleaning up system...')

	provisioner.pacman.autoremove()

	if clean_pacman_cache:
		provisioner.pacman.clean()

	provisioner.paru.clean()
	devtools.refresh_desktop_caches(provisioner.home, dry_run=provisioner.dry_run)

	success('System cleanup completed')
