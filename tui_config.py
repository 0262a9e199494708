#!/usr/bin/env python3
"""
🎨 TUI Styles - Configuration Module
====================================
Copyright (c) 2025 PNGN-Tec LLC

Centralized Configuration System
=================================
Configuration shared by the styling and layout engine:
- Escape sequence constants
- The 16-color terminal name table
- Render defaults (truncation tail, default border preset)
- Environment overrides and runtime reloading

Configuration Overview
======================
All values are plain dataclasses owned by a thread-safe singleton
``ConfigurationManager``. Environment variables are applied once at
start-up and again on ``reload_config()``.

Environment Variables
=====================
- TUI_TRUNCATE_TAIL:   tail appended by Style.render when truncating
- TUI_DEFAULT_BORDER:  preset name used by Style.border() with no argument
- TUI_DEBUG:           enables debug mode (DEBUG log level)
- TUI_LOG_LEVEL:       log level name used by configure_logging()

The light/dark background flag used for adaptive colors is never read from
here; it is always passed to ``Style.render`` by the caller.
"""

import threading
import logging
import os
from typing import Dict, Optional, Callable
from dataclasses import dataclass, field

# Configure logging
logger = logging.getLogger('tui.config')

# ============================================================================
# ESCAPE SEQUENCE CONSTANTS
# ============================================================================

ESC = "\x1b"
CSI = ESC + "["

# Tail appended when a line is cut to fit a width
DEFAULT_TAIL = "..."

# ============================================================================
# 16-COLOR NAME TABLE
# ============================================================================

# Canonical names mapped to their palette slot (0-7 normal, 8-15 bright)
ANSI_16_COLORS: Dict[str, int] = {
    'black': 0,
    'red': 1,
    'green': 2,
    'yellow': 3,
    'blue': 4,
    'magenta': 5,
    'cyan': 6,
    'white': 7,
    'bright-black': 8,
    'bright-red': 9,
    'bright-green': 10,
    'bright-yellow': 11,
    'bright-blue': 12,
    'bright-magenta': 13,
    'bright-cyan': 14,
    'bright-white': 15,
}

# Accepted spellings that map onto a canonical name
ANSI_COLOR_ALIASES: Dict[str, str] = {
    'gray': 'bright-black',
    'grey': 'bright-black',
    'bright-gray': 'bright-white',
    'bright-grey': 'bright-white',
}

_TRUTHY = ('true', '1', 'yes', 'on')

# Border preset names accepted by tui_border.get_border()
BORDER_NAMES = (
    "normal",
    "rounded",
    "thick",
    "double",
    "block",
    "outer-half-block",
    "inner-half-block",
    "hidden",
    "ascii",
)


# ============================================================================
# RENDER CONFIGURATION
# ============================================================================

@dataclass
class RenderConfig:
    """Rendering defaults used by the style engine"""

    truncation_tail: str = DEFAULT_TAIL
    default_border: str = "normal"

    def validate(self) -> bool:
        """Validate render configuration"""
        if any(ord(char) < 32 or char == "\x7f" for char in self.truncation_tail):
            raise ValueError("Truncation tail must be printable text on a single line")
        if self.default_border.lower().replace("_", "-") not in BORDER_NAMES:
            raise ValueError(f"Unknown default border: {self.default_border!r}")
        return True


# ============================================================================
# MAIN CONFIGURATION CLASS
# ============================================================================

@dataclass
class ToolkitConfig:
    """Complete toolkit configuration"""

    render: RenderConfig = field(default_factory=RenderConfig)

    debug_mode: bool = False
    log_level: str = "WARNING"

    def validate(self) -> bool:
        """Validate entire configuration"""
        self.render.validate()
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return True


# ============================================================================
# CONFIGURATION MANAGER (SINGLETON)
# ============================================================================

class ConfigurationManager:
    """
    Singleton configuration manager with runtime reloading.
    Thread-safe management of global configuration with change notifications.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._callbacks = []
        self._config_lock = threading.RLock()
        self._config = self._load_initial_config()

        self._initialized = True
        logger.info("Configuration manager initialized")

    @classmethod
    def _load_initial_config(cls) -> ToolkitConfig:
        """Defaults plus environment overrides, or plain defaults if those are invalid"""
        try:
            config = cls._apply_environment_overrides(ToolkitConfig())
            config.validate()
        except ValueError as e:
            logger.error(f"Ignoring invalid environment configuration: {e}")
            return ToolkitConfig()
        return config

    @staticmethod
    def _apply_environment_overrides(config: ToolkitConfig) -> ToolkitConfig:
        """Return ``config`` with environment overrides applied in place"""

        # Render settings
        if 'TUI_TRUNCATE_TAIL' in os.environ:
            config.render.truncation_tail = os.environ['TUI_TRUNCATE_TAIL']
        if 'TUI_DEFAULT_BORDER' in os.environ:
            config.render.default_border = os.environ['TUI_DEFAULT_BORDER'].lower()

        # Logging
        if 'TUI_LOG_LEVEL' in os.environ:
            config.log_level = os.environ['TUI_LOG_LEVEL'].upper()
        if 'TUI_DEBUG' in os.environ:
            config.debug_mode = os.environ['TUI_DEBUG'].lower() in _TRUTHY

        return config

    @property
    def config(self) -> ToolkitConfig:
        """Get current configuration"""
        with self._config_lock:
            return self._config

    def reload(self, new_config: Optional[ToolkitConfig] = None) -> bool:
        """
        Reload configuration and notify callbacks.

        Args:
            new_config: New configuration to apply (reloads from env if None)

        Returns:
            True if reload successful, False if the previous configuration
            was kept
        """
        with self._config_lock:
            old_config = self._config

            try:
                if new_config is None:
                    new_config = self._apply_environment_overrides(ToolkitConfig())
                new_config.validate()
            except ValueError as e:
                logger.error(f"Configuration reload failed: {e}")
                return False

            self._config = new_config
            self._notify_callbacks(old_config, new_config)

            logger.info("Configuration reloaded successfully")
            return True

    def register_callback(self, callback: Callable[[ToolkitConfig, ToolkitConfig], None]):
        """
        Register callback for configuration changes.

        Args:
            callback: Function called with (old_config, new_config)
        """
        self._callbacks.append(callback)

    def unregister_callback(self, callback: Callable):
        """Remove a registered callback"""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def _notify_callbacks(self, old_config: ToolkitConfig, new_config: ToolkitConfig):
        """Notify all registered callbacks of configuration change"""
        for callback in list(self._callbacks):
            try:
                callback(old_config, new_config)
            except Exception as e:
                logger.error(f"Callback notification failed: {e}")


# ============================================================================
# PUBLIC API FUNCTIONS
# ============================================================================

_manager = ConfigurationManager()

def get_config() -> ToolkitConfig:
    """Get current toolkit configuration"""
    return _manager.config

def reload_config(new_config: Optional[ToolkitConfig] = None) -> bool:
    """Reload toolkit configuration"""
    return _manager.reload(new_config)

def register_config_callback(callback: Callable[[ToolkitConfig, ToolkitConfig], None]):
    """Register for configuration change notifications"""
    _manager.register_callback(callback)

def unregister_config_callback(callback: Callable):
    """Unregister a configuration change callback"""
    _manager.unregister_callback(callback)

def get_render_config() -> RenderConfig:
    """Get render configuration"""
    return _manager.config.render


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for scripts using the toolkit.

    Library modules never install handlers themselves; this helper is meant
    for entry points such as example scripts.

    Args:
        level: Level name; defaults to DEBUG in debug mode, else the
            configured log level
    """
    config = get_config()
    if level is None:
        level = "DEBUG" if config.debug_mode else config.log_level
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
