"""Per-user configuration: XDG paths, the credential store, and settings resolution.

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.lolarchiver/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Credential store** -- :class:`CredentialStore` persists the single API
  key in ``config.json`` with ``0o600`` permissions, written atomically.
* **Settings resolution** -- :func:`resolve_settings` merges the
  ``--api-key`` flag, environment variables, and the stored key into the
  :class:`~lolarchiver.models.Settings` handed to the client.
"""

from __future__ import annotations

import json
import logging
import os
import platform
import tempfile
from pathlib import Path
from typing import Optional

from lolarchiver.exceptions import ConfigError
from lolarchiver.models import DEFAULT_BASE_URL, Settings, StoredConfig

logger = logging.getLogger(__name__)

_APP_NAME = "lolarchiver"
_CONFIG_FILENAME = "config.json"

ENV_API_KEY = "LOLARCHIVER_API_KEY"
ENV_BASE_URL = "LOLARCHIVER_BASE_URL"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory. It is not created here.

    On Linux/BSD: ``$XDG_CONFIG_HOME/lolarchiver/`` (default ``~/.config/lolarchiver/``).
    On macOS/Windows: ``~/.lolarchiver/``.
    """
    if _is_xdg_platform():
        return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    return _fallback_base_dir()


def get_data_dir() -> Path:
    """Return the data directory used for crash logs, creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/lolarchiver/`` (default ``~/.local/share/lolarchiver/``).
    On macOS/Windows: ``~/.lolarchiver/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_config_path() -> Path:
    """Path of the credential file inside :func:`get_config_dir`."""
    return get_config_dir() / _CONFIG_FILENAME


# --- Credential store ---


class CredentialStore:
    """Read/write the API key persisted in ``config.json``.

    Writes go to a temporary file in the same directory, which is chmod'ed
    to ``0o600`` before any content lands in it, fsynced, and renamed over
    the target. The containing directory is created with ``0o700``.

    Args:
        path: Override for the file location (defaults to
            :func:`get_config_path`).

    Example::

        store = CredentialStore()
        store.save("abc123")
        assert store.load() == "abc123"
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path if path is not None else get_config_path()

    @property
    def path(self) -> Path:
        """The filesystem path of the credential file."""
        return self._path

    def load(self) -> str:
        """Return the stored API key, or ``""`` when none has been saved.

        Raises:
            ConfigError: If the file exists but cannot be read or parsed.
        """
        config = self._read()
        return config.api_key

    def save(self, api_key: str) -> None:
        """Persist *api_key*, keeping any other keys already in the file.

        Raises:
            ConfigError: If the existing file is corrupt or the new one
                cannot be written.
        """
        config = self._read()
        config.api_key = api_key
        self._write(config)

    def clear(self) -> bool:
        """Blank the stored key. Returns ``False`` when there was nothing to clear."""
        config = self._read()
        if not config.api_key:
            return False
        config.api_key = ""
        self._write(config)
        return True

    def _read(self) -> StoredConfig:
        if not self._path.is_file():
            logger.debug("No config file at %s", self._path)
            return StoredConfig()
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to read config file {self._path}: {exc}") from exc
        try:
            return StoredConfig.model_validate(json.loads(text))
        except (json.JSONDecodeError, ValueError) as exc:
            raise ConfigError(f"failed to parse config file {self._path}: {exc}") from exc

    def _write(self, config: StoredConfig) -> None:
        text = json.dumps(config.model_dump(mode="json"), indent=2) + "\n"
        try:
            _atomic_write(self._path, text)
        except OSError as exc:
            raise ConfigError(f"failed to write config file {self._path}: {exc}") from exc
        logger.debug("Wrote config file %s", self._path)


def _atomic_write(path: Path, data: str) -> None:
    """Write *data* to *path* atomically with owner-only permissions."""
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        os.chmod(tmp_path, 0o600)
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Settings resolution ---


def resolve_settings(
    cli_api_key: Optional[str] = None,
    store: Optional[CredentialStore] = None,
) -> Settings:
    """Resolve the effective client settings.

    Precedence for the API key (high to low):
        1. ``--api-key`` CLI flag
        2. ``LOLARCHIVER_API_KEY`` environment variable
        3. The stored key in ``config.json``
        4. ``""``

    The base URL comes from ``LOLARCHIVER_BASE_URL`` when set, otherwise
    :data:`~lolarchiver.models.DEFAULT_BASE_URL`.

    Raises:
        ConfigError: If the stored config has to be read and is corrupt.
    """
    if cli_api_key:
        api_key = cli_api_key
    elif os.environ.get(ENV_API_KEY):
        api_key = os.environ[ENV_API_KEY]
    else:
        api_key = (store or CredentialStore()).load()

    base_url = os.environ.get(ENV_BASE_URL) or DEFAULT_BASE_URL
    return Settings(api_key=api_key, base_url=base_url.rstrip("/"))


def mask_api_key(api_key: str) -> str:
    """Return *api_key* with everything past the first four characters starred."""
    if not api_key:
        return ""
    visible = api_key[:4]
    return visible + "*" * (len(api_key) - len(visible))
