import shutil
import ssl
import tempfile
import zipfile
from pathlib import Path
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .exceptions import DownloadError
from .general import SysCommand
from .output import debug, info

USER_AGENT = 'devstation'
DEFAULT_TIMEOUT = 60


def fetch(url: str, timeout: int = DEFAULT_TIMEOUT) -> bytes:
	"""
	Downloads ``url`` into memory. Used for installer scripts, signing keys
	and small archives; a failure raises :class:`DownloadError`.
	"""
	debug(f'Fetching {url}')

	request = Request(url, headers={'User-Agent': USER_AGENT})
	ssl_context = ssl.create_default_context()

	try:
		with urlopen(request, timeout=timeout, context=ssl_context) as response:
			return response.read()
	except HTTPError as err:
		raise DownloadError(url, f'HTTP {err.code}') from err
	except (URLError, TimeoutError, OSError) as err:
		raise DownloadError(url, str(err)) from err


def download(url: str, dest: Path, timeout: int = DEFAULT_TIMEOUT) -> Path:
	info(f'Downloading {url}')

	dest.parent.mkdir(parents=True, exist_ok=True)
	dest.write_bytes(fetch(url, timeout=timeout))

	return dest


def install_font_archive(url: str, font_dir: Path) -> list[Path]:
	"""
	Downloads a zip of fonts and unpacks the font files into ``font_dir``,
	overwriting older copies.
	"""
	font_dir.mkdir(parents=True, exist_ok=True)
	extracted: list[Path] = []

	with tempfile.TemporaryDirectory(prefix='devstation-font-') as tmp:
		archive = download(url, Path(tmp) / Path(url).name)

		with zipfile.ZipFile(archive) as zf:
			for member in zf.infolist():
				name = Path(member.filename).name

				if member.is_dir() or not name.lower().endswith(('.ttf', '.otf')):
					continue

				target = font_dir / name
				with zf.open(member) as src, target.open('wb') as dst:
					shutil.copyfileobj(src, dst)

				extracted.append(target)

	info(f'Installed {len(extracted)} font files from {Path(url).name} into {font_dir}')
	return extracted


def run_remote_script(
	url: str,
	interpreter: list[str] | None = None,
	args: list[str] | None = None,
	environment_vars: dict[str, str] | None = None,
	dry_run: bool = False,
) -> SysCommand:
	"""
	Equivalent of ``curl -fsSL <url> | sh -s -- <args>``: the script is
	fetched first and then fed to the interpreter on stdin.
	"""
	interpreter = interpreter or ['sh']
	cmd = [*interpreter, '-s', '--', *(args or [])] if args else [*interpreter]

	if dry_run:
		return SysCommand(cmd, dry_run=True)

	script = fetch(url)

	return SysCommand(cmd, input_data=script, environment_vars=environment_vars, peek_output=True)
