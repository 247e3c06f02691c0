"""
Configuration management for Waymark.

Defaults live on `WaymarkConfig`; a user YAML file overrides them. The file is
looked up in the current directory first (``waymark_config.yaml`` /
``waymark_config.yml``) and then in the per-user config directory.
"""

from __future__ import annotations

from typing import Any, Dict, Optional
from pathlib import Path
import yaml

from waymark.core.color_mapper import ColorMapper
from waymark.core.strings import STRINGS, normalize_locale
from waymark.model import Position
from waymark.utils.utils import user_config_dir


# Smallest list limit template hosts guarantee; used when the platform can't report one.
DEFAULT_LIST_LIMIT = 6

UNITS = ("metric", "imperial")

DEFAULT_DISTANCE_STYLE = "bold #087aff"
DEFAULT_ICON_GLYPH = "●"


def _positive_int(value: Any, *, key: str) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be a positive integer (got {value!r})")
    if isinstance(value, bool) or n <= 0:
        raise ValueError(f"{key} must be a positive integer (got {value!r})")
    return n


def _position(value: Any, *, key: str) -> Position:
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be a mapping with lat/lon")
    try:
        lat = float(value["lat"])
        lon = float(value["lon"])
    except (KeyError, TypeError, ValueError):
        raise ValueError(f"{key} must have numeric lat and lon")
    if not (-90.0 <= lat <= 90.0) or not (-180.0 <= lon <= 180.0):
        raise ValueError(f"{key} is out of range: lat={lat}, lon={lon}")
    return Position(lat, lon)


class WaymarkConfig:
    """Browsing configuration with user overrides."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_file: Optional path to user config YAML file
        """
        self.fallback_list_limit = DEFAULT_LIST_LIMIT
        self.list_limit: Optional[int] = None  # platform-reported limit (simulated host)
        self.units = "metric"
        self.locale = "en"
        self.distance_style = DEFAULT_DISTANCE_STYLE
        self.icon_glyph = DEFAULT_ICON_GLYPH
        self.default_icon_color = ColorMapper.DEFAULT_COLOR
        self.here: Optional[Position] = None
        self.source: Optional[Path] = None

        if config_file and config_file.exists():
            self.load_user_config(config_file)

    def load_user_config(self, config_file: Path) -> None:
        """
        Load user configuration from YAML file.

        Format:
        fallback_list_limit: 6
        units: imperial
        locale: de
        distance_style: "bold #087aff"
        icon_style:
          glyph: "◆"
          default_color: "rgba(255,51,0,1)"
        here: {lat: 45.5, lon: -121.8}

        Raises:
            ValueError: Invalid YAML or an invalid value
        """
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error loading config file: {e}")

        if user_config is None:
            user_config = {}
        if not isinstance(user_config, dict):
            raise ValueError("Config YAML must be a mapping at the top level")

        if user_config.get("fallback_list_limit") is not None:
            self.fallback_list_limit = _positive_int(
                user_config["fallback_list_limit"], key="fallback_list_limit"
            )

        if user_config.get("list_limit") is not None:
            self.list_limit = _positive_int(user_config["list_limit"], key="list_limit")

        if user_config.get("units"):
            units = str(user_config["units"]).strip().lower()
            if units not in UNITS:
                raise ValueError(f"units must be one of: {', '.join(UNITS)} (got {units!r})")
            self.units = units

        if user_config.get("locale"):
            self.locale = normalize_locale(str(user_config["locale"]))

        if user_config.get("distance_style"):
            self.distance_style = str(user_config["distance_style"]).strip()

        icon_style = user_config.get("icon_style") or {}
        if not isinstance(icon_style, dict):
            raise ValueError("icon_style must be a mapping")
        if icon_style.get("glyph"):
            self.icon_glyph = str(icon_style["glyph"])
        if icon_style.get("default_color"):
            r, g, b = ColorMapper.parse_color(str(icon_style["default_color"]))
            self.default_icon_color = f"rgba({r},{g},{b},1)"

        if user_config.get("here") is not None:
            self.here = _position(user_config["here"], key="here")

        self.source = config_file

    def get_config_summary(self) -> Dict[str, Any]:
        return {
            "source": str(self.source) if self.source else None,
            "fallback_list_limit": self.fallback_list_limit,
            "list_limit": self.list_limit,
            "units": self.units,
            "locale": self.locale,
            "distance_style": self.distance_style,
            "icon_glyph": self.icon_glyph,
            "default_icon_color": self.default_icon_color,
            "here": f"{self.here.lat},{self.here.lon}" if self.here else None,
        }

    def export_template(self, output_path: Path) -> None:
        """Write a commented YAML template with the current values."""
        data: Dict[str, Any] = {
            "fallback_list_limit": self.fallback_list_limit,
            "units": self.units,
            "locale": self.locale,
            "distance_style": self.distance_style,
            "icon_style": {
                "glyph": self.icon_glyph,
                "default_color": self.default_icon_color,
            },
        }
        if self.list_limit is not None:
            data["list_limit"] = self.list_limit
        if self.here is not None:
            data["here"] = {"lat": self.here.lat, "lon": self.here.lon}

        header = (
            "# Waymark configuration\n"
            f"# units: {' | '.join(UNITS)}\n"
            f"# locale: {' | '.join(sorted(STRINGS))}\n"
            "# list_limit: simulate the list limit a host reports (omit to use the fallback)\n"
            "# here: fixed current location, e.g. {lat: 45.5, lon: -121.8}\n"
        )
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(header)
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def default_config_path() -> Path:
    return user_config_dir("waymark") / "config.yaml"


def find_config_file() -> Optional[Path]:
    """Return the first existing config file in lookup order, if any."""
    for candidate in (
        Path("waymark_config.yaml"),
        Path("waymark_config.yml"),
        default_config_path(),
    ):
        if candidate.exists():
            return candidate
    return None


def load_config(config_file: Optional[Path] = None) -> WaymarkConfig:
    """
    Load Waymark configuration.

    Args:
        config_file: Optional path to a YAML config file. If None, the
                     standard lookup order is used.

    Raises:
        ValueError: The named config file doesn't exist or is invalid
    """
    if config_file is not None and not config_file.exists():
        raise ValueError(f"Config file not found: {config_file}")
    if config_file is None:
        config_file = find_config_file()
    return WaymarkConfig(config_file)
