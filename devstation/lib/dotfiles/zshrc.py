from dataclasses import dataclass, field

NVM_INIT = '''\
export NVM_DIR="$HOME/.nvm"
[ -s "$NVM_DIR/nvm.sh" ] && \\. "$NVM_DIR/nvm.sh"
[ -s "$NVM_DIR/bash_completion" ] && \\. "$NVM_DIR/bash_completion"'''

PYENV_INIT = '''\
export PYENV_ROOT="$HOME/.pyenv"
export PATH="$PYENV_ROOT/bin:$PATH"
eval "$(pyenv init -)"'''

STARSHIP_INIT = 'eval "$(starship init zsh)"'

DEBIAN_PATHS = '''\
export PATH="$HOME/.local/bin:$PATH"
export PATH="$HOME/.config/composer/vendor/bin:$PATH"
export PATH="./node_modules/.bin:$PATH"'''

HISTORY_SETTINGS = '''\
bindkey "^[[A" history-substring-search-up
bindkey "^[[B" history-substring-search-down

HISTSIZE=10000
SAVEHIST=10000
HISTFILE=~/.zsh_history
setopt HIST_VERIFY
setopt SHARE_HISTORY
setopt APPEND_HISTORY
setopt INC_APPEND_HISTORY
setopt HIST_IGNORE_DUPS
setopt HIST_IGNORE_ALL_DUPS
setopt HIST_REDUCE_BLANKS
setopt HIST_IGNORE_SPACE
setopt HIST_EXPIRE_DUPS_FIRST'''

COMPLETION_STYLE = '''\
zstyle ':completion:*' menu select
zstyle ':completion:*' group-name ''
zstyle ':completion:*:descriptions' format '%F{cyan}-- %d --%f'
zstyle ':completion:*:warnings' format '%F{red}No matches for: %d%f'
zstyle ':completion:*' matcher-list 'm:{a-z}={A-Z}' 'r:|[._-]=* r:|=*' 'l:|=* r:|=*\''''

FASTFETCH_GREETING = '''\
if command -v fastfetch &> /dev/null; then
    fastfetch
fi'''

BASE_ALIASES = {
	'll': 'ls -alF',
	'la': 'ls -A',
	'l': 'ls -CF',
	'..': 'cd ..',
	'...': 'cd ../..',
	'grep': 'grep --color=auto',
}

SAIL_ALIAS = {
	'sail': '[ -f sail ] && bash sail || bash vendor/bin/sail',
}

PACMAN_ALIASES = {
	'pacup': 'sudo pacman -Syu',
	'pacin': 'sudo pacman -S',
	'pacrem': 'sudo pacman -Rns',
	'pacsearch': 'pacman -Ss',
	'pacinfo': 'pacman -Si',
	'paclist': 'pacman -Q',
	'pacorphan': 'sudo pacman -Rns $(pacman -Qtdq)',
	'pacclean': 'sudo pacman -Sc',
	'pacupgrade': 'sudo pacman -Syu && paru -Sua',
}

PACMAN_SHORT_ALIASES = {
	'install': 'sudo pacman -Sy',
	'update': 'sudo pacman -Syu',
	'remove': 'sudo pacman -Rns',
	'search': 'pacman -Ss',
	'info': 'pacman -Si',
	'orphan': 'sudo pacman -Rns $(pacman -Qtdq)',
	'cleanup': 'sudo pacman -Sc && paru -Sc',
}

APT_ALIASES = {
	'ff': 'fastfetch',
	'update': 'sudo apt update && sudo apt upgrade',
	'install': 'sudo apt install',
	'search': 'apt search',
	'clean': 'sudo apt autoremove && sudo apt autoclean',
}

DOCKER_ALIASES = {
	'dps': 'docker ps',
	'dpa': 'docker ps -a',
	'di': 'docker images',
	'dex': 'docker exec -it',
	'dlog': 'docker logs',
	'dcp': 'docker-compose',
	'dcup': 'docker-compose up -d',
	'dcdown': 'docker-compose down',
	'dcps': 'docker-compose ps',
	'dclogs': 'docker-compose logs',
}

LARAVEL_ALIASES = {
	'sail': './vendor/bin/sail',
	'artisan': 'php artisan',
	'tinker': 'php artisan tinker',
	'serve': 'php artisan serve',
	'migrate': 'php artisan migrate',
	'rollback': 'php artisan migrate:rollback',
	'seed': 'php artisan db:seed',
	'fresh': 'php artisan migrate:fresh --seed',
}

NODE_ALIASES = {
	'ni': 'npm install',
	'ns': 'npm start',
	'nr': 'npm run',
	'nt': 'npm test',
	'nb': 'npm run build',
	'nw': 'npm run watch',
}


@dataclass
class ZshrcConfig:
	theme: str = 'robbyrussell'
	plugins: list[str] = field(default_factory=lambda: ['git'])
	options: dict[str, str] = field(default_factory=dict)
	aliases: list[dict[str, str]] = field(default_factory=list)
	init_blocks: list[str] = field(default_factory=list)
	trailer_blocks: list[str] = field(default_factory=list)

	def render(self) -> str:
		lines = [
			'# Oh My Zsh configuration',
			'export ZSH="$HOME/.oh-my-zsh"',
			'',
			f'ZSH_THEME="{self.theme}"',
			'',
		]

		for key, value in self.options.items():
			lines.append(f'{key}="{value}"')
		if self.options:
			lines.append('')

		lines.append('plugins=(')
		lines.extend(f'    {plugin}' for plugin in self.plugins)
		lines.append(')')
		lines.append('')
		lines.append('source $ZSH/oh-my-zsh.sh')

		for block in self.init_blocks:
			lines.append('')
			lines.append(block)

		merged: dict[str, str] = {}
		for group in self.aliases:
			merged.update(group)

		if merged:
			lines.append('')
			lines.append('# Aliases')
			for name, command in merged.items():
				quoted = command.replace("'", "'\\''")
				lines.append(f"alias {name}='{quoted}'")

		for block in self.trailer_blocks:
			lines.append('')
			lines.append(block)

		return '\n'.join(lines) + '\n'


def arch_dev_zshrc() -> ZshrcConfig:
	return ZshrcConfig(
		plugins=['git', 'zsh-autosuggestions', 'zsh-syntax-highlighting', 'you-should-use', 'zsh-bat', 'nvm', 'docker', 'python', 'archlinux'],
		aliases=[BASE_ALIASES, {'bat': 'batcat'}, SAIL_ALIAS],
		init_blocks=[NVM_INIT],
	)


def arch_minimal_zshrc() -> ZshrcConfig:
	return ZshrcConfig(
		plugins=['git', 'zsh-autosuggestions', 'zsh-syntax-highlighting', 'nvm', 'docker', 'archlinux'],
		aliases=[BASE_ALIASES, SAIL_ALIAS],
		init_blocks=[NVM_INIT],
	)


def arch_enhanced_zshrc() -> ZshrcConfig:
	return ZshrcConfig(
		theme='nord-extended/nord-extended',
		plugins=['git', 'zsh-autosuggestions', 'zsh-syntax-highlighting', 'nvm', 'docker', 'archlinux', 'you-should-use'],
		aliases=[BASE_ALIASES, PACMAN_SHORT_ALIASES, SAIL_ALIAS],
		init_blocks=[NVM_INIT],
	)


def arch_workstation_zshrc() -> ZshrcConfig:
	return ZshrcConfig(
		theme='',
		plugins=['git', 'zsh-autosuggestions', 'zsh-syntax-highlighting', 'nvm', 'docker', 'docker-compose', 'archlinux', 'you-should-use', 'pyenv'],
		aliases=[
			BASE_ALIASES,
			{'cat': 'bat --style=plain', 'ls': 'exa --icons'},
			PACMAN_ALIASES,
			SAIL_ALIAS,
			{'d': 'docker', 'dc': 'docker-compose', 'dps': 'docker ps', 'di': 'docker images'},
			{'python': 'python3', 'pip': 'pip3'},
		],
		init_blocks=[STARSHIP_INIT, NVM_INIT, PYENV_INIT],
		trailer_blocks=['fastfetch'],
	)


def debian_zshrc() -> ZshrcConfig:
	return ZshrcConfig(
		theme='nord-extended',
		options={
			'HYPHEN_INSENSITIVE': 'true',
			'ENABLE_CORRECTION': 'true',
			'COMPLETION_WAITING_DOTS': 'true',
		},
		plugins=[
			'git',
			'docker',
			'docker-compose',
			'node',
			'npm',
			'composer',
			'laravel',
			'zsh-autosuggestions',
			'zsh-syntax-highlighting',
			'fast-syntax-highlighting',
			'colored-man-pages',
			'extract',
			'web-search',
			'history-substring-search',
			'sudo',
			'z',
		],
		aliases=[
			BASE_ALIASES,
			{'fgrep': 'fgrep --color=auto', 'egrep': 'egrep --color=auto'},
			APT_ALIASES,
			DOCKER_ALIASES,
			LARAVEL_ALIASES,
			NODE_ALIASES,
		],
		trailer_blocks=[DEBIAN_PATHS, HISTORY_SETTINGS, COMPLETION_STYLE, FASTFETCH_GREETING],
	)
