# utils/path.py
import os, sys

APP_NAME = "Theremin"
CONFIG_FILENAME = "synthesizer.json"

def config_dir() -> str:
    """
    各平台的設定目錄：
    Windows -> %APPDATA%\\Theremin
    macOS   -> ~/Library/Application Support/Theremin
    其他    -> $XDG_CONFIG_HOME/theremin（預設 ~/.config/theremin）
    """
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or os.path.join(os.path.expanduser("~"), "AppData", "Roaming")
        return os.path.join(base, APP_NAME)
    if sys.platform == "darwin":
        return os.path.join(os.path.expanduser("~"), "Library", "Application Support", APP_NAME)
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base, APP_NAME.lower())

def default_config_path() -> str:
    return os.path.join(config_dir(), CONFIG_FILENAME)
