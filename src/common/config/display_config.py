"""Display configuration management for fencat."""

from pathlib import Path
import tomli

import constants
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from common.base.logging_config import get_logger
from fencat.formatter import ActiveColorDisplay, RenderOptions
from fencat.renderer import DEFAULT_GLYPHS, DEFAULT_PALETTE, GLYPH_SETS, PALETTES, Palette
logger = get_logger(__name__)

class ConfigError(ValueError):
    """Raised when the display configuration is invalid."""
    pass

@dataclass
class DisplayConfig:
    """Display settings, before command line overrides."""
    palette: str = DEFAULT_PALETTE
    glyphs: str = DEFAULT_GLYPHS
    flip: bool = False
    active_color: ActiveColorDisplay = ActiveColorDisplay.KNOWN
    strict_ranks: bool = True

def _setting(table: Dict[str, Any], key: str, default: Any, expected: type) -> Any:
    """
    Read one [display] key, checking its TOML type.

    :raises ConfigError: if the value is present but of the wrong type
    """
    value = table.get(key, default)
    if not isinstance(value, expected):
        raise ConfigError(f"display.{key} must be a {expected.__name__}, got {value!r}")
    return value

class DisplayConfigManager:
    """Loads display settings and custom palettes from a TOML file."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize display config manager.

        :param config_path: Path to TOML configuration file; None for built-in defaults
        """
        self.config_path = config_path
        self.display = DisplayConfig()
        self.palettes: Dict[str, Palette] = dict(PALETTES)
        if config_path is not None:
            self._load_config()

    def _load_config(self) -> None:
        """Load and validate display configuration from TOML file."""
        try:
            logger.info(f"Loading display configuration from {self.config_path}")
            with open(self.config_path, 'rb') as f:
                config = tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            logger.error(f"Error loading display configuration: {str(e)}")
            raise ConfigError(f"Cannot read configuration {self.config_path}: {e}") from e

        palettes = config.get('palettes', {})
        if not isinstance(palettes, dict):
            raise ConfigError("[palettes] must be a table")
        for name, settings in palettes.items():
            if not isinstance(settings, dict):
                raise ConfigError(f"Palette '{name}' must be a table")
            try:
                self.palettes[name] = Palette(
                    name=name,
                    light_background=settings['light_background'],
                    dark_background=settings['dark_background'],
                    white_piece=settings['white_piece'],
                    black_piece=settings['black_piece']
                )
            except KeyError as e:
                raise ConfigError(f"Palette '{name}' is missing {e.args[0]}") from e

        display = config.get('display', {})
        if not isinstance(display, dict):
            raise ConfigError("[display] must be a table")
        active_color_value = _setting(display, 'active_color', 'known', str)
        try:
            active_color = ActiveColorDisplay(active_color_value)
        except ValueError as e:
            valid = ', '.join(option.value for option in ActiveColorDisplay)
            raise ConfigError(f"Invalid active_color; valid values are: {valid}") from e

        self.display = DisplayConfig(
            palette=_setting(display, 'palette', DEFAULT_PALETTE, str),
            glyphs=_setting(display, 'glyphs', DEFAULT_GLYPHS, str),
            flip=_setting(display, 'flip', False, bool),
            active_color=active_color,
            strict_ranks=_setting(display, 'strict_ranks', True, bool)
        )

        self._validate_config()
        logger.info(f"Display configuration loaded: palette={self.display.palette}, "
                    f"glyphs={self.display.glyphs}, {len(self.palettes)} palettes")

    def _validate_config(self) -> None:
        """Validate display configuration for consistency."""
        for palette in self.palettes.values():
            try:
                palette.validate()
            except ValueError as e:
                raise ConfigError(str(e)) from e

        if self.display.palette not in self.palettes:
            raise ConfigError(f"Palette '{self.display.palette}' not found. "
                              f"Valid palettes are: {', '.join(sorted(self.palettes))}")

        if self.display.glyphs not in GLYPH_SETS:
            raise ConfigError(f"Glyph set '{self.display.glyphs}' not found. "
                              f"Valid glyph sets are: {', '.join(GLYPH_SETS)}")

    def get_palette(self, name: Optional[str] = None) -> Palette:
        """
        Get a palette by name.

        :param name: Palette name; defaults to the configured palette
        :return: Palette
        :raises ConfigError: if no such palette exists
        """
        name = name or self.display.palette
        palette = self.palettes.get(name)
        if palette is None:
            raise ConfigError(f"Palette '{name}' not found. "
                              f"Valid palettes are: {', '.join(sorted(self.palettes))}")
        return palette

    def render_options(self, palette: Optional[str] = None, glyphs: Optional[str] = None,
                       active_color: Optional[str] = None,
                       strict: Optional[bool] = None) -> RenderOptions:
        """
        Build render options, letting explicit arguments override the file.

        :return: RenderOptions for the formatter
        :raises ConfigError: for an unknown palette, glyph set or policy
        """
        glyph_set = glyphs or self.display.glyphs
        if glyph_set not in GLYPH_SETS:
            raise ConfigError(f"Glyph set '{glyph_set}' not found. "
                              f"Valid glyph sets are: {', '.join(GLYPH_SETS)}")

        if active_color is None:
            policy = self.display.active_color
        else:
            try:
                policy = ActiveColorDisplay(active_color)
            except ValueError as e:
                raise ConfigError(f"Invalid active color policy: {active_color!r}") from e

        return RenderOptions(
            palette=self.get_palette(palette),
            glyphs=GLYPH_SETS[glyph_set],
            active_color=policy,
            strict=self.display.strict_ranks if strict is None else strict
        )

def default_config_path() -> Path:
    """Default configuration file location, resolved at call time."""
    return Path(constants.CONFIG_DIR) / constants.CONFIG_FILENAME

# Global display config manager instance
_display_config = None

def init_display_config(config_path: Optional[Union[str, Path]] = None) -> DisplayConfigManager:
    """
    Initialize global display config manager instance.

    An explicit *config_path* must exist. Without one, the default file is
    used when present and built-in defaults otherwise.

    :param config_path: Path to display configuration file
    :return: Display config manager instance
    """
    global _display_config
    if config_path is None:
        default_path = default_config_path()
        if default_path.exists():
            config_path = default_path
        else:
            logger.debug(f"No configuration at {default_path}, using built-in defaults")
    _display_config = DisplayConfigManager(config_path)
    return _display_config

def get_display_config() -> DisplayConfigManager:
    """
    Get global display config manager instance.

    :return: Display config manager instance
    """
    global _display_config
    if _display_config is None:
        _display_config = init_display_config()
    return _display_config
