"""
Configuration and shared setup for the tossup generator.

Settings come from, in increasing priority:
1. Defaults below
2. tossup.yaml (or the file named by TOSSUP_CONFIG)
3. TOSSUP_* environment variables (a local .env is loaded first)

The pipeline's length thresholds are tuning constants in the tossup package,
not settings.
"""

import logging
import os
import yaml
from pathlib import Path
from dataclasses import dataclass, fields, replace
from typing import Optional
from dotenv import load_dotenv
from rich.logging import RichHandler

load_dotenv()

CONFIG_FILE = Path(os.environ.get("TOSSUP_CONFIG", "tossup.yaml"))
ENV_PREFIX = "TOSSUP_"


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings (immutable).

    Attributes:
        api_url: MediaWiki API endpoint
        user_agent: sent with every request, Wikipedia asks for contact info
        timeout: per-request timeout in seconds
        max_retries: extra attempts for transient HTTP failures
        retry_backoff: base delay in seconds, doubled per retry
        min_request_interval: minimum seconds between requests
        corpus_path: vital-articles JSON
        attempts_per_question: candidate answers tried per question slot
        max_difficulty: number of vital-article levels
        web_port: port for the web UI
        log_level: root logging level
    """
    api_url: str = "https://en.wikipedia.org/w/api.php"
    user_agent: str = "tossup-generator/0.1 (https://github.com/tossup-generator)"
    timeout: float = 10.0
    max_retries: int = 3
    retry_backoff: float = 0.5
    min_request_interval: float = 0.1
    corpus_path: Path = Path("vital-articles.json")
    attempts_per_question: int = 5
    max_difficulty: int = 5
    web_port: int = 5001
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive: {self.timeout}")
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be non-negative: {self.max_retries}")
        if self.attempts_per_question < 1:
            raise ValueError(f"attempts_per_question must be at least 1: {self.attempts_per_question}")
        if self.max_difficulty < 1:
            raise ValueError(f"max_difficulty must be at least 1: {self.max_difficulty}")


def _coerce(value, default):
    """Convert a YAML/env value to the type of the field default."""
    if isinstance(default, Path):
        return Path(value)
    if isinstance(default, bool):
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(default, (int, float)):
        return type(default)(value)
    return str(value)


def load_settings(path: Optional[Path] = None, environ: Optional[dict] = None) -> Settings:
    """Load settings from YAML and environment."""
    path = Path(path) if path else CONFIG_FILE
    environ = os.environ if environ is None else environ
    defaults = Settings()
    overrides = {}

    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping")
        overrides.update(data)

    for f in fields(Settings):
        env_key = ENV_PREFIX + f.name.upper()
        if env_key in environ:
            overrides[f.name] = environ[env_key]

    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        logging.getLogger(__name__).warning("[CONFIG] Ignoring unknown settings: %s", sorted(unknown))

    return replace(defaults, **{
        name: _coerce(value, getattr(defaults, name))
        for name, value in overrides.items()
        if name in known
    })


def setup_logging(level: str = "INFO") -> None:
    """Route all logging through rich. Entry points call this once."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # Retry chatter from urllib3 is noise at INFO
    logging.getLogger("urllib3").setLevel(logging.WARNING)
