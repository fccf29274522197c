"""Engine configuration and .env loading.

EngineConfig is immutable and validated at construction; a bad value raises
ConfigurationError straight away rather than degrading later.

Load order for environment values (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables: PALETTE_BUCKET_SIZE, PALETTE_COUNT,
PALETTE_MAX_WORKERS, PALETTE_TIMEOUT (seconds).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from palette_engine.core.errors import ConfigurationError

DEFAULT_BUCKET_SIZE = 16
DEFAULT_COUNT = 10
DEFAULT_MAX_WORKERS = 4

_ENV_PREFIX = 'PALETTE_'


@dataclass(frozen=True)
class EngineConfig:
    bucket_size: int = DEFAULT_BUCKET_SIZE
    count: int = DEFAULT_COUNT
    max_workers: int = DEFAULT_MAX_WORKERS
    timeout: float | None = None

    def __post_init__(self) -> None:
        require_positive_int('bucket_size', self.bucket_size)
        require_positive_int('count', self.count)
        require_positive_int('max_workers', self.max_workers)
        require_timeout(self.timeout)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, **overrides: object) -> EngineConfig:
        """Build from PALETTE_* variables. Non-None keyword overrides win over the environment."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        for field_name, var, parse in (
            ('bucket_size', 'BUCKET_SIZE', int),
            ('count', 'COUNT', int),
            ('max_workers', 'MAX_WORKERS', int),
            ('timeout', 'TIMEOUT', float),
        ):
            raw = env.get(_ENV_PREFIX + var)
            if raw is None or raw.strip() == '':
                continue
            try:
                values[field_name] = parse(raw)
            except ValueError:
                raise ConfigurationError(f'{_ENV_PREFIX}{var}: cannot parse {raw!r}') from None

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]


def require_positive_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f'{name} must be a positive integer, got {value!r}')


def require_timeout(value: float | None) -> None:
    if value is not None and value < 0:
        raise ConfigurationError(f'timeout must be >= 0, got {value}')


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or a file (worktree)
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """KEY=value per line; quotes stripped, comments and malformed lines skipped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path
