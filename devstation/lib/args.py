import argparse
import json
import sys
import urllib.parse
from argparse import ArgumentParser
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.dataclasses import dataclass as p_dataclass

from .download import fetch
from .exceptions import DownloadError
from .hardware import Distro, SysInfo
from .output import error, logger, set_debug, warn
from .packages.selector import parse_tokens

SCRIPTS = [
	'arch_dev',
	'arch_minimal',
	'arch_enhanced',
	'arch_workstation',
	'debian_trixie',
]


@p_dataclass
class Arguments:
	config: Path | None = None
	config_url: str | None = None
	script: str | None = None
	silent: bool = False
	dry_run: bool = False
	debug: bool = False
	skip_reboot: bool = False
	list_scripts: bool = False
	log_dir: Path | None = None


class ProvisionConfig(BaseModel):
	"""
	Answers to the interactive questions, given up front for unattended runs.
	``None`` means "ask", or use the documented default with ``--silent``.
	"""

	model_config = ConfigDict(extra='forbid')

	script: str | None = None
	desktop: str | None = None
	multimedia: list[str] | None = None
	gaming: bool | None = None
	docker_desktop: bool | None = None
	git_name: str | None = None
	git_email: str | None = None
	reboot: bool | None = None
	extra_packages: list[str] = []
	flatpak_apps: list[str] = []

	@field_validator('desktop', mode='before')
	@classmethod
	def validate_desktop(cls, value: Any) -> Any:
		# menu tokens are written as numbers more often than not
		if isinstance(value, int) and not isinstance(value, bool):
			return str(value)
		return value

	@field_validator('multimedia', mode='before')
	@classmethod
	def validate_multimedia(cls, value: Any) -> Any:
		if isinstance(value, str):
			return parse_tokens(value)

		if isinstance(value, list):
			return [str(token) if isinstance(token, int) and not isinstance(token, bool) else token for token in value]

		return value

	def safe_json(self) -> dict[str, Any]:
		return self.model_dump(exclude_none=True)


class ConfigHandler:
	def __init__(self) -> None:
		self._parser: ArgumentParser = self._define_arguments()
		self._args: Arguments = self._parse_args()

		config = self._parse_config()

		try:
			self._config = ProvisionConfig(**config)
		except ValidationError as err:
			error(f'Invalid configuration: {err}')
			sys.exit(1)

	@property
	def config(self) -> ProvisionConfig:
		return self._config

	@property
	def args(self) -> Arguments:
		return self._args

	def get_script(self) -> str:
		if script := self.args.script:
			return script

		if script := self.config.script:
			return script

		match SysInfo.distro():
			case Distro.Debian:
				return 'debian_trixie'
			case _:
				return 'arch_dev'

	def _get_version(self) -> str:
		try:
			return version('devstation')
		except PackageNotFoundError:
			return 'devstation version not found'

	def _define_arguments(self) -> ArgumentParser:
		parser = ArgumentParser(
			prog='devstation',
			description='Provision a Linux development and gaming workstation',
			formatter_class=argparse.ArgumentDefaultsHelpFormatter,
		)
		parser.add_argument(
			'-v',
			'--version',
			action='version',
			default=False,
			version='%(prog)s ' + self._get_version(),
		)
		parser.add_argument(
			'--config',
			type=Path,
			nargs='?',
			default=None,
			help='JSON file with answers to the interactive questions',
		)
		parser.add_argument(
			'--config-url',
			type=str,
			nargs='?',
			default=None,
			help='Url to a JSON configuration file',
		)
		parser.add_argument(
			'--script',
			nargs='?',
			type=str,
			choices=SCRIPTS,
			help='Provisioning script to run, defaults to one matching the running distribution',
		)
		parser.add_argument(
			'--silent',
			action='store_true',
			default=False,
			help='Disables all prompts, unanswered questions take their default. Requires a configuration',
		)
		parser.add_argument(
			'--dry-run',
			'--dry_run',
			action='store_true',
			default=False,
			help='Print the commands that would run instead of running them',
		)
		parser.add_argument(
			'--debug',
			action='store_true',
			default=False,
			help='Show debug output on the console',
		)
		parser.add_argument(
			'--skip-reboot',
			action='store_true',
			default=False,
			help='Never reboot at the end of a run',
		)
		parser.add_argument(
			'--list-scripts',
			action='store_true',
			default=False,
			help='List the available scripts and exit',
		)
		parser.add_argument(
			'--log-dir',
			type=Path,
			nargs='?',
			default=None,
			help='Directory for install.log and cmd_history.txt (default: ~/.cache/devstation)',
		)

		return parser

	def _parse_args(self) -> Arguments:
		argparse_args = vars(self._parser.parse_args(sys.argv[1:]))
		args: Arguments = Arguments(**argparse_args)

		# a run can't be silent if there are no answers to fall back on
		if args.config is None and args.config_url is None:
			args.silent = False

		if args.log_dir is not None:
			logger.set_directory(args.log_dir)

		set_debug(args.debug)

		return args

	def _parse_config(self) -> dict[str, Any]:
		config: dict[str, Any] = {}
		config_data: str | None = None

		if self._args.config is not None:
			config_data = self._read_file(self._args.config)
		elif self._args.config_url is not None:
			config_data = self._fetch_from_url(self._args.config_url)

		if config_data is not None:
			try:
				config.update(json.loads(config_data))
			except json.JSONDecodeError as err:
				error(f'Configuration is not valid JSON: {err}')
				sys.exit(1)

		return self._drop_unknown_keys(self._cleanup_config(config))

	def _fetch_from_url(self, url: str) -> str:
		if urllib.parse.urlparse(url).scheme:
			try:
				return fetch(url).decode('utf-8')
			except DownloadError as err:
				error(f'Could not fetch JSON from {url}: {err.reason}')
		else:
			error('Not a valid url')

		sys.exit(1)

	def _read_file(self, path: Path) -> str:
		if not path.exists():
			error(f'Could not find file {path}')
			sys.exit(1)

		return path.read_text()

	def _cleanup_config(self, config: dict[str, Any]) -> dict[str, Any]:
		clean_args = {}
		for key, val in config.items():
			if isinstance(val, dict):
				val = self._cleanup_config(val)

			if val is not None:
				clean_args[key] = val

		return clean_args

	def _drop_unknown_keys(self, config: dict[str, Any]) -> dict[str, Any]:
		if unknown := set(config) - set(ProvisionConfig.model_fields):
			warn(f'Ignoring unknown configuration keys: {", ".join(sorted(unknown))}')

		return {k: v for k, v in config.items() if k in ProvisionConfig.model_fields}
