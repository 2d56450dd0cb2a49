import json
import logging
import os

from .errors import ConfigError
from .geo import GEOCODE_URL
from .methods import DEFAULT_METHOD
from .timings import TIMINGS_URL

logger = logging.getLogger(__name__)

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".config", "athan-cli")
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.json")

API_KEY_ENV = "GOOGLE_MAPS_API_KEY"
CONFIG_PATH_ENV = "ATHAN_CONFIG"

DEFAULT_CONFIG = {
    "method": DEFAULT_METHOD,
    "google_maps_api_key": None,
    "geocode_url": GEOCODE_URL,
    "timings_url": TIMINGS_URL,
    "timeout": None,
    "time_format": "24h",
    "show_hijri": False
}


def config_path(environ=None):
    environ = os.environ if environ is None else environ
    return environ.get(CONFIG_PATH_ENV) or CONFIG_PATH


def load_config(path=None, environ=None):
    """Merge the optional JSON file over the defaults, then apply the environment.

    The file is never created or written back.
    """
    environ = os.environ if environ is None else environ
    path = path or config_path(environ)
    config = dict(DEFAULT_CONFIG)

    if os.path.exists(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise ConfigError(f"cannot read config {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"config {path} must hold a JSON object")
        config.update(data)
        check_config(config, path)
        logger.debug("Loaded config from %s", path)

    api_key = environ.get(API_KEY_ENV)
    if api_key:
        config["google_maps_api_key"] = api_key
    return config


def check_config(config, path):
    def fail(key, expected):
        raise ConfigError(f"config {path}: {key} must be {expected}, got {config[key]!r}")

    method = config["method"]
    if isinstance(method, bool) or not isinstance(method, int):
        fail("method", "an integer")
    timeout = config["timeout"]
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
        fail("timeout", "a positive number or null")
    for key in ("geocode_url", "timings_url"):
        if not isinstance(config[key], str) or not config[key]:
            fail(key, "a non-empty string")
    if config["google_maps_api_key"] is not None and not isinstance(config["google_maps_api_key"], str):
        fail("google_maps_api_key", "a string or null")
    if config["time_format"] not in ("24h", "12h"):
        fail("time_format", '"24h" or "12h"')
    if not isinstance(config["show_hijri"], bool):
        fail("show_hijri", "true or false")
