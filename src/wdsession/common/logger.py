# logger.py
import logging
import logging.config
from pathlib import Path

from wdsession.util.file_utils import ensure_dir, from_json_or_yaml

DEFAULT_LOGGING_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "logging_config.yaml"


def setup_logging(
    config_file_path=None,
    log_file_path=None,
    verbose=False,
):
    """
    Loads logging config from 'config_file_path' (YAML or JSON) and sets up logging.
    Falls back to the packaged default config when no path is given.
    Optionally override file handler's filename, and set root logger to DEBUG if 'verbose'.
    """
    config = from_json_or_yaml(config_file_path or DEFAULT_LOGGING_CONFIG)

    handlers = config.get("handlers", {})
    if log_file_path and "file_handler" in handlers:
        ensure_dir(log_file_path)
        handlers["file_handler"]["filename"] = str(log_file_path)
    elif "file_handler" in handlers:
        # No file destination requested: keep the config usable without touching disk
        handlers.pop("file_handler")
        for logger_cfg in [config.get("root", {})] + list(config.get("loggers", {}).values()):
            if "file_handler" in logger_cfg.get("handlers", []):
                logger_cfg["handlers"] = [h for h in logger_cfg["handlers"] if h != "file_handler"]

    logging.config.dictConfig(config)

    if verbose:
        for name in ("", "wdsession"):
            target = logging.getLogger(name)
            target.setLevel(logging.DEBUG)
            for handler in target.handlers:
                handler.setLevel(logging.DEBUG)

    return logging.getLogger(__name__)
