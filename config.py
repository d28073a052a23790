import tomllib
import shutil
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv
import os

CONFIG_DIR = Path.home() / ".memorize"
CONFIG_PATH = CONFIG_DIR / "config.toml"
PROJECT_CONFIG_EXAMPLE = Path(__file__).parent / "config.toml"

DEFAULT_INITIAL_FACTOR = 2.0
DEFAULT_LOG_LEVEL = "INFO"

def load_config() -> Dict[str, Any]:
    """Load config from ~/.memorize/config.toml, copy example if missing, load .env overrides."""
    load_dotenv()  # Load .env for overrides (e.g., MEMORIZE_LOG_LEVEL env var)
    if not CONFIG_PATH.exists():
        CONFIG_DIR.mkdir(exist_ok=True)
        shutil.copy(PROJECT_CONFIG_EXAMPLE, CONFIG_PATH)
    with open(CONFIG_PATH, "rb") as f:
        config = tomllib.load(f)

    scheduler_cfg = config.get("scheduler", {})
    initial_factor = float(os.getenv(
        "MEMORIZE_INITIAL_FACTOR",
        scheduler_cfg.get("initial_factor", DEFAULT_INITIAL_FACTOR)
    ))
    if initial_factor <= 0:
        raise ValueError(f"scheduler.initial_factor must be positive, got {initial_factor}")
    config["scheduler"] = {"initial_factor": initial_factor}

    logging_cfg = config.get("logging", {})
    config["logging"] = {
        "level": os.getenv("MEMORIZE_LOG_LEVEL", logging_cfg.get("level", DEFAULT_LOG_LEVEL)).upper()
    }
    return config

def get_config_value(section: str, key: str, default: Optional[Any] = None) -> Any:
    """Get nested config value, e.g., get_config_value('scheduler', 'initial_factor')."""
    config = load_config()
    value = config.get(section, {}).get(key, default)
    return value
