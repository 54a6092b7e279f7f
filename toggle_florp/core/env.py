"""Settings and .env loading for toggle-florp.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  FLORP_RANDOM_IDENTIFIERS  trigger words for a random colour, separated by
                            spaces or commas (default: r rand random)
  FLORP_SEED                integer seed for the random colour path
  FLORP_SWATCH_SIZE         swatch edge length in pixels (default: 64)
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from toggle_florp.core.resolver import DEFAULT_RANDOM_IDENTIFIERS

logger = logging.getLogger(__name__)

ENV_PREFIX = 'FLORP_'
DEFAULT_SWATCH_SIZE = 64


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone, a file in a worktree
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            logger.warning('env file not found: %s', env_file)
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)

    logger.info('loaded %s', path)
    return path


def _split_words(raw: str) -> tuple[str, ...]:
    return tuple(w.lower() for w in re.split(r'[\s,]+', raw) if w)


def _int_var(environ: Mapping[str, str], name: str) -> int | None:
    raw = environ.get(name, '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for the resolver and the CLI."""

    random_identifiers: tuple[str, ...] = DEFAULT_RANDOM_IDENTIFIERS
    seed: int | None = None
    swatch_size: int = DEFAULT_SWATCH_SIZE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from FLORP_* variables (os.environ by default)."""
        if environ is None:
            environ = os.environ

        identifiers = DEFAULT_RANDOM_IDENTIFIERS
        raw_words = environ.get(f'{ENV_PREFIX}RANDOM_IDENTIFIERS')
        if raw_words is not None and _split_words(raw_words):
            identifiers = _split_words(raw_words)

        swatch_size = _int_var(environ, f'{ENV_PREFIX}SWATCH_SIZE')
        if swatch_size is None:
            swatch_size = DEFAULT_SWATCH_SIZE
        elif swatch_size < 1:
            raise ValueError(f'{ENV_PREFIX}SWATCH_SIZE must be positive, got {swatch_size}')

        return cls(
            random_identifiers=identifiers,
            seed=_int_var(environ, f'{ENV_PREFIX}SEED'),
            swatch_size=swatch_size,
        )
