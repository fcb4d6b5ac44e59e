from ..lib.models.package_set import MenuEntry, PackageSet, PackageSetMenu, PackageSource

# Arch Linux

ARCH_ESSENTIALS = PackageSet(
	'Essentials',
	(
		'base-devel',
		'git',
		'wget',
		'curl',
		'unzip',
		'vim',
		'nano',
		'btop',
		'fastfetch',
		'tree',
		'rsync',
		'man-db',
		'cava',
		'man-pages',
	),
)

ARCH_MINIMAL_ESSENTIALS = PackageSet(
	'Essentials',
	(
		'base-devel',
		'git',
		'wget',
		'curl',
		'unzip',
		'vim',
		'nano',
		'btop',
		'fastfetch',
		'tree',
		'rsync',
		'man-db',
		'man-pages',
		'bash-completion',
		'net-tools',
		'libxcrypt-compat',
	),
)

ARCH_ENHANCED_ESSENTIALS = PackageSet(
	'Essentials',
	ARCH_MINIMAL_ESSENTIALS.packages[:6] + ('neovim',) + ARCH_MINIMAL_ESSENTIALS.packages[6:] + ('kitty', 'cava', 'imagemagick'),
	description='Base tools plus Neovim, Kitty, Cava and ImageMagick',
)

ARCH_WORKSTATION_ESSENTIALS = PackageSet(
	'Essentials',
	ARCH_MINIMAL_ESSENTIALS.packages + ('yt-dlp', 'zenity', 'cava', 'amberol'),
)

INTEL_FULL = PackageSet(
	'Intel Alder Lake',
	(
		'intel-ucode',
		'mesa',
		'lib32-mesa',
		'vulkan-intel',
		'lib32-vulkan-intel',
		'intel-media-driver',
		'libva-intel-driver',
		'libva-utils',
		'intel-gpu-tools',
		'xf86-video-intel',
		'intel-compute-runtime',
		'intel-media-sdk',
		'vpl-gpu-rt',
	),
	description='Intel CPU microcode, Iris Xe graphics and compute runtime',
)

INTEL_MINIMAL = PackageSet(
	'Intel Alder Lake',
	(
		'intel-ucode',
		'mesa',
		'vulkan-intel',
		'intel-media-driver',
		'libva-intel-driver',
		'libva-utils',
		'intel-gpu-tools',
		'intel-compute-runtime',
		'vpl-gpu-rt',
	),
	description='Intel CPU microcode and Iris Xe graphics (minimal set)',
)

NETWORK_FULL = PackageSet(
	'Network',
	(
		'networkmanager',
		'network-manager-applet',
		'wireless_tools',
		'wpa_supplicant',
		'netctl',
		'dhcpcd',
		'libxcrypt-compat',
	),
)

NETWORK_MINIMAL = PackageSet(
	'Network',
	(
		'networkmanager',
		'network-manager-applet',
		'wireless_tools',
		'wpa_supplicant',
	),
)

PHP_ARCH = PackageSet('PHP', ('php', 'php-intl', 'php-gd', 'php-sqlite', 'composer'))

DOCKER = PackageSet('Docker', ('docker', 'docker-compose'))
DOCKER_MINIMAL = PackageSet('Docker', ('docker',))
DOCKER_BUILDX = PackageSet('Docker', ('docker', 'docker-compose', 'docker-buildx'))

FONTS = PackageSet(
	'Fonts',
	(
		'ttf-liberation',
		'ttf-dejavu',
		'noto-fonts',
		'noto-fonts-emoji',
		'noto-fonts-cjk',
		'noto-fonts-extra',
		'ttf-jetbrains-mono',
		'ttf-firacode-nerd',
	),
)

FONTS_NERD = PackageSet(
	'Fonts',
	FONTS.packages[:6] + ('ttf-jetbrains-mono-nerd',),
)

MS_FONTS = PackageSet('Microsoft fonts', ('ttf-ms-fonts',), source=PackageSource.Aur)

PYTHON_BUILD_DEPS = PackageSet(
	'Python build dependencies',
	(
		'make',
		'openssl',
		'zlib',
		'bzip2',
		'readline',
		'sqlite',
		'llvm',
		'ncurses',
		'xz',
		'tk',
		'libxml2',
		'libxslt',
		'libffi',
	),
)

GAMING_WINE = PackageSet(
	'Wine',
	(
		'wine',
		'wine-mono',
		'wine-gecko',
		'winetricks',
		'lib32-libpulse',
		'lib32-alsa-plugins',
		'lib32-libxml2',
		'lib32-mpg123',
		'lib32-lcms2',
		'lib32-giflib',
		'lib32-libpng',
		'lib32-gnutls',
		'lib32-freetype2',
	),
)

GAMING_TOOLS = PackageSet(
	'Gaming utilities',
	('gamemode', 'lib32-gamemode', 'gamescope', 'mangohud', 'lib32-mangohud'),
)

GAMING_AUR = PackageSet(
	'Gaming AUR tools',
	('protontricks', 'goverlay', 'heroic-games-launcher-bin'),
	source=PackageSource.Aur,
)

GAMING_ENHANCED = PackageSet(
	'Gaming',
	('steam', 'gamemode', 'lib32-gamemode', 'mangohud', 'lib32-mangohud', 'goverlay'),
)

MULTIMEDIA_MENU = PackageSetMenu(
	'Select Multimedia Packages to Install',
	(
		MenuEntry('1', 'GIMP (Image Editor)', PackageSet('GIMP', ('gimp',))),
		MenuEntry('2', 'Inkscape (Vector Graphics)', PackageSet('Inkscape', ('inkscape',))),
		MenuEntry('3', 'Kdenlive (Video Editor)', PackageSet('Kdenlive', ('kdenlive',))),
		MenuEntry('4', 'OBS Studio (Streaming/Recording)', PackageSet('OBS Studio', ('obs-studio',))),
		MenuEntry('5', 'Blender (3D Creation)', PackageSet('Blender', ('blender',))),
		MenuEntry('6', 'Audacity (Audio Editor)', PackageSet('Audacity', ('audacity',))),
		MenuEntry('7', 'VLC Media Player', PackageSet('VLC', ('vlc',))),
		MenuEntry('8', 'Krita (Digital Painting)', PackageSet('Krita', ('krita',))),
	),
	multi=True,
	all_token='9',
	skip_token='10',
	prompt='Enter your choices separated by spaces (e.g., 1 3 4 7): ',
	all_label='All multimedia packages',
	skip_label='Skip multimedia packages',
)

# Debian

DEBIAN_ESSENTIALS = PackageSet(
	'Essentials',
	(
		'curl',
		'wget',
		'git',
		'software-properties-common',
		'apt-transport-https',
		'ca-certificates',
		'gnupg',
		'lsb-release',
		'build-essential',
		'unzip',
		'flatpak',
		'gnome-software-plugin-flatpak',
		'zsh',
	),
)

DEBIAN_INTEL = PackageSet(
	'Intel graphics',
	(
		'intel-media-va-driver-non-free',
		'i965-va-driver',
		'mesa-va-drivers',
		'firmware-misc-nonfree',
		'intel-microcode',
		'vainfo',
	),
)

PHP_DEBIAN = PackageSet(
	'PHP',
	(
		'php',
		'php-cli',
		'php-fpm',
		'php-json',
		'php-common',
		'php-mysql',
		'php-zip',
		'php-gd',
		'php-mbstring',
		'php-curl',
		'php-xml',
		'php-pear',
		'php-bcmath',
		'php-dev',
	),
)

DEBIAN_TERMINAL = PackageSet('Terminal tools', ('kitty', 'cava', 'fastfetch'))

DEBIAN_FONTS = PackageSet('Fonts', ('fonts-liberation', 'fonts-liberation2', 'ttf-mscorefonts-installer'))

DEBIAN_GNOME_EXTENSIONS = PackageSet(
	'GNOME extensions',
	('gnome-shell-extension-manager', 'gnome-shell-extension-appindicator', 'gnome-shell-extension-gsconnect'),
)

FLATPAK_GAMING = PackageSet(
	'Gaming applications',
	('com.heroicgameslauncher.hgl', 'com.valvesoftware.Steam', 'org.libretro.RetroArch', 'net.lutris.Lutris'),
	source=PackageSource.Flatpak,
)

FLATPAK_MEDIA = PackageSet(
	'Media and communication',
	('com.obsproject.Studio', 'com.discordapp.Discord', 'com.spotify.Client', 'org.vinegarhq.Sober'),
	source=PackageSource.Flatpak,
)

GNOME_BLOAT = PackageSet(
	'GNOME bloatware',
	(
		'gnome-games',
		'gnome-music',
		'gnome-photos',
		'gnome-weather',
		'gnome-maps',
		'gnome-contacts',
		'gnome-documents',
		'evolution',
		'totem',
		'cheese',
		'rhythmbox',
		'shotwell',
		'simple-scan',
		'gnome-mahjongg',
		'gnome-mines',
		'gnome-sudoku',
		'aisleriot',
		'four-in-a-row',
		'gnome-chess',
		'gnome-klotski',
		'gnome-nibbles',
		'gnome-robots',
		'gnome-tetravex',
		'hitori',
		'iagno',
		'lightsoff',
		'five-or-more',
		'quadrapassel',
		'gnome-taquin',
		'swell-foop',
		'tali',
	),
)
