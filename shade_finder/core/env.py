"""Environment and .env configuration for shade-finder.

Lookup order (first wins):
  1. Existing OS environment variables. These are never overwritten.
  2. The .env file given with --env-file.
  3. The nearest .env walking up from cwd, stopping at a .git boundary.

Recognised variables:
  SHADE_FINDER_PALETTE   palette used when --palette is not given (default: tailwind)
  SHADE_FINDER_JSON      1/true/yes to print JSON by default
"""

import os
from dataclasses import dataclass
from pathlib import Path

PALETTE_VAR = 'SHADE_FINDER_PALETTE'
JSON_VAR = 'SHADE_FINDER_JSON'

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Settings:
    palette: str = 'tailwind'
    json: bool = False

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> 'Settings':
        env = os.environ if environ is None else environ
        palette = env.get(PALETTE_VAR, '').strip() or cls.palette
        json_output = env.get(JSON_VAR, '').strip().lower() in _TRUTHY
        return cls(palette=palette, json=json_output)


def find_dotenv(start: Path) -> Path | None:
    """Return the first .env at or above `start`, or None once a .git is passed."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a clone and a file in a worktree
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines. Blank lines, comments and lines without '=' are skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the file that was loaded, or None.
    """
    path = Path(env_file) if env_file else find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None

    for key, value in parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path
