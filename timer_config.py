"""
Settings for Notification Timer, stored as JSON in the user's home folder.
"""
from __future__ import annotations
import os, json, math
from typing import Any, Optional

CONFIG_FILE = os.path.join(os.path.expanduser("~"), "notification_timer_config.json")

DEFAULT_INTERVAL_MINUTES = 15
MIN_INTERVAL_MINUTES = 1
MAX_INTERVAL_MINUTES = 24 * 60
TEST_INTERVAL_SECONDS = 10        # --test: remind every 10 seconds

PERMISSIONS = ("granted", "denied", "default")

DEFAULT_CONFIG = {
    "interval_minutes": DEFAULT_INTERVAL_MINUTES,
    "notification_permission": "default",
}


def valid_interval(minutes: Any) -> bool:
    """True for a finite number of minutes between 1 and 24 hours."""
    return (not isinstance(minutes, bool) and isinstance(minutes, (int, float))
            and math.isfinite(minutes)
            and MIN_INTERVAL_MINUTES <= minutes <= MAX_INTERVAL_MINUTES)


def load_config(path: Optional[str] = None) -> dict[str, Any]:
    """Load config from file, falling back to defaults for missing/invalid values."""
    path = path or CONFIG_FILE
    cfg = json.loads(json.dumps(DEFAULT_CONFIG))
    if os.path.exists(path):
        try:
            with open(path, encoding="utf-8") as f:
                user_cfg = json.load(f)
            if isinstance(user_cfg, dict):
                cfg.update(user_cfg)
        except (json.JSONDecodeError, IOError, OSError) as e:
            print(f"  [!] Config load error: {e}. Using defaults.")

    if not valid_interval(cfg.get("interval_minutes")):
        cfg["interval_minutes"] = DEFAULT_INTERVAL_MINUTES
    if cfg.get("notification_permission") not in PERMISSIONS:
        cfg["notification_permission"] = "default"
    return cfg


def save_config(cfg: dict[str, Any], path: Optional[str] = None) -> None:
    """Save config to file."""
    try:
        with open(path or CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(cfg, f, indent=2)
    except (IOError, OSError) as e:
        print(f"  [!] Config save error: {e}")


def interval_seconds(cfg: dict[str, Any], test: bool = False,
                     override: Optional[float] = None) -> float:
    """Reminder period for this run: --test, then --interval, then the config."""
    if test:
        return TEST_INTERVAL_SECONDS
    if override is not None:
        if valid_interval(override):
            return override * 60
        print(f"  [!] --interval must be {MIN_INTERVAL_MINUTES}-{MAX_INTERVAL_MINUTES} minutes. "
              f"Using {cfg['interval_minutes']}.")
    return cfg["interval_minutes"] * 60
