from pathlib import Path

KITTY_NORD = '''\
# Font configuration
font_family JetBrainsMono Nerd Font
font_size 12.0

# Nord color scheme
background #2e3440
foreground #d8dee9
cursor #d8dee9

# Black
color0 #3b4252
color8 #4c566a

# Red
color1 #bf616a
color9 #bf616a

# Green
color2 #a3be8c
color10 #a3be8c

# Yellow
color3 #ebcb8b
color11 #ebcb8b

# Blue
color4 #81a1c1
color12 #81a1c1

# Magenta
color5 #b48ead
color13 #b48ead

# Cyan
color6 #88c0d0
color14 #8fbcbb

# White
color7 #e5e9f0
color15 #eceff4

# Window
window_padding_width 10
background_opacity 0.95

# Tabs
tab_bar_style powerline
tab_powerline_style slanted

# Performance
repaint_delay 10
input_delay 3
sync_to_monitor yes

active_tab_foreground #2e3440
active_tab_background #88c0d0
inactive_tab_foreground #d8dee9
inactive_tab_background #4c566a
'''

STARSHIP_CATPPUCCIN = '''\
format = """
[](#cba6f7)\\
$os\\
$username\\
[](bg:#f38ba8 fg:#cba6f7)\\
$directory\\
[](fg:#f38ba8 bg:#fab387)\\
$git_branch\\
$git_status\\
[](fg:#fab387 bg:#a6e3a1)\\
$c\\
$elixir\\
$elm\\
$golang\\
$haskell\\
$java\\
$julia\\
$nodejs\\
$nim\\
$rust\\
$scala\\
$python\\
[](fg:#a6e3a1 bg:#89b4fa)\\
$docker_context\\
[](fg:#89b4fa bg:#b4befe)\\
$time\\
[ ](fg:#b4befe)\\
"""

[username]
show_always = true
style_user = "bg:#cba6f7 fg:#11111b"
style_root = "bg:#cba6f7 fg:#11111b"
format = '[$user ]($style)'

[directory]
style = "bg:#f38ba8 fg:#11111b"
format = "[ $path ]($style)"
truncation_length = 3
truncation_symbol = "…/"

[git_branch]
symbol = ""
style = "bg:#fab387 fg:#11111b"
format = '[ $symbol $branch ]($style)'

[git_status]
style = "bg:#fab387 fg:#11111b"
format = '[$all_status$ahead_behind ]($style)'

[nodejs]
symbol = ""
style = "bg:#a6e3a1 fg:#11111b"
format = '[ $symbol ($version) ]($style)'

[python]
symbol = ""
style = "bg:#a6e3a1 fg:#11111b"
format = '[ $symbol ($version) ]($style)'

[rust]
symbol = ""
style = "bg:#a6e3a1 fg:#11111b"
format = '[ $symbol ($version) ]($style)'

[docker_context]
symbol = " "
style = "bg:#89b4fa fg:#11111b"
format = '[ $symbol $context ]($style)'

[time]
disabled = false
time_format = "%R"
style = "bg:#b4befe fg:#11111b"
format = '[ ♥ $time ]($style)'
'''


def desktop_entry(
	name: str,
	exec_cmd: str,
	icon: str,
	comment: str = '',
	categories: list[str] | None = None,
	terminal: bool = False,
) -> str:
	"""
	Renders a freedesktop ``.desktop`` launcher.
	"""
	lines = [
		'[Desktop Entry]',
		f'Name={name}',
		f'Comment={comment}',
		f'Exec={exec_cmd}',
		f'Icon={icon}',
		f'Terminal={"true" if terminal else "false"}',
		'Type=Application',
	]

	if categories:
		lines.append(f'Categories={";".join(categories)};')

	return '\n'.join(lines) + '\n'


def vscode_laravel_entry(project_dir: Path) -> str:
	return desktop_entry(
		name='VSCode Laravel',
		exec_cmd=f'code {project_dir}',
		icon='code',
		comment='Open VSCode with Laravel project',
		categories=['Development'],
	)
