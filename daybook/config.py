"""
Configuration and logging setup for daybook.
"""
import calendar
import logging
import os
from pathlib import Path

import yaml

APP_NAME = "daybook"
CONFIG_DIR = Path.home() / ".config" / APP_NAME
CONFIG_FILE = CONFIG_DIR / "config.yaml"
DATA_FILE_NAME = "diary.json"

WEEK_STARTS = {"sunday": calendar.SUNDAY, "monday": calendar.MONDAY}


def default_data_dir() -> Path:
    if os.environ.get("XDG_DATA_HOME"):
        return Path(os.path.expandvars(os.path.expanduser(os.environ["XDG_DATA_HOME"]))) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def default_data_file() -> Path:
    return default_data_dir() / DATA_FILE_NAME


DEFAULT_CONFIG = {
    "data_file": str(default_data_file()),
    "log_file": "/tmp/daybook.log",
    "display_months": 9,
    "week_start": "sunday",
}


def load_config(config_file: Path = CONFIG_FILE) -> dict:
    config = DEFAULT_CONFIG.copy()
    if config_file.exists():
        try:
            with config_file.open("r", encoding="utf-8") as f:
                user_config = yaml.safe_load(f) or {}
            if isinstance(user_config, dict):
                config.update(user_config)
            else:
                logging.error(f"Ignoring config file {config_file}: expected a mapping")
        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Error loading config file {config_file}: {e}")
    else:
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with config_file.open("w", encoding="utf-8") as f:
                yaml.dump(DEFAULT_CONFIG, f, indent=2)
            logging.info(f"Default config file created at {config_file}")
        except OSError as e:
            logging.error(f"Error creating default config file: {e}")
    return config


def first_weekday(config: dict) -> int:
    week_start = str(config.get("week_start", "sunday")).strip().lower()
    if week_start not in WEEK_STARTS:
        logging.error(f"Unknown week_start {week_start!r}, using sunday")
    return WEEK_STARTS.get(week_start, calendar.SUNDAY)


def display_months(config: dict) -> int:
    try:
        return max(1, int(config.get("display_months", DEFAULT_CONFIG["display_months"])))
    except (TypeError, ValueError):
        logging.error(f"Invalid display_months {config.get('display_months')!r}, using default")
        return DEFAULT_CONFIG["display_months"]


def setup_logging(config: dict):
    logging.basicConfig(filename=Path(config["log_file"]).expanduser(), level=logging.DEBUG,
                        format='%(asctime)s [%(levelname)s] %(message)s', force=True)
