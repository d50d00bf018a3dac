"""
Path management for Chronoscope

Handles platform-specific user directories following standard conventions:
- macOS: ~/Library/Application Support/Chronoscope/
- Linux: ~/.local/share/chronoscope/ (data), ~/.config/chronoscope/ (config)
- Windows: %APPDATA%/Chronoscope/
"""
import os
import sys
from pathlib import Path


# Application name
APP_NAME = "Chronoscope"


def get_user_data_dir() -> Path:
    """
    Get platform-specific user data directory.
    
    Returns:
        Path to user data directory where logs and other user files are stored.
    """
    system = sys.platform
    
    if system == "darwin":  # macOS
        base = Path.home() / "Library" / "Application Support"
        user_data_dir = base / APP_NAME
    elif system == "win32":  # Windows
        base = Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
        user_data_dir = base / APP_NAME
    else:  # Linux and other Unix-like
        user_data_dir = Path.home() / ".local" / "share" / APP_NAME.lower()
    
    user_data_dir.mkdir(parents=True, exist_ok=True)
    return user_data_dir


def get_user_config_dir() -> Path:
    """
    Get platform-specific user config directory.
    
    Same as the data directory on macOS/Windows, ~/.config/chronoscope/ on Linux.
    """
    if sys.platform in ("darwin", "win32"):
        return get_user_data_dir()
    
    config_dir = Path.home() / ".config" / APP_NAME.lower()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_logs_dir() -> Path:
    """Get directory for application logs (inside the user data directory)."""
    logs_dir = get_user_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_settings_path() -> Path:
    """Path to settings.json in the user config directory."""
    return get_user_config_dir() / "settings.json"
