"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """Environment-driven defaults. CLI flags override the ones they cover."""

    # ── Targets ────────────────────────────────────────────────────────────
    CONFIG_FILE:        str = os.getenv('MONITOR_CONFIG_FILE', 'servers.json')
    SAMPLE_CONFIG_FILE: str = os.getenv('MONITOR_SAMPLE_CONFIG_FILE', 'servers.json')
    DEFAULT_TIMEOUT_S:  int = _int('MONITOR_DEFAULT_TIMEOUT_S', 5)

    # ── Scheduling ─────────────────────────────────────────────────────────
    # Go-style duration string, parsed by the CLI.
    DEFAULT_INTERVAL: str = os.getenv('MONITOR_INTERVAL', '30s')

    # ── Dispatch ───────────────────────────────────────────────────────────
    # Bounded outcome buffer; 0 means unbounded.
    RESULT_BUFFER_SIZE: int = _int('MONITOR_RESULT_BUFFER_SIZE', 100)

    # ── HTTP ───────────────────────────────────────────────────────────────
    HTTP_USER_AGENT: str = os.getenv('MONITOR_HTTP_USER_AGENT', 'server-health-monitor/1.0')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
