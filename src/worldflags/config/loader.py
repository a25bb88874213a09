"""Configuration file discovery and initialization."""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Package defaults directory
PACKAGE_DIR = Path(__file__).parent.parent
DEFAULTS_DIR = PACKAGE_DIR / "defaults"

LOCAL_DIR_NAME = ".worldflags"


@dataclass
class ConfigPaths:
    """Discovered configuration paths."""

    # Directories
    local_dir: Optional[Path] = None  # .worldflags/ in current directory
    user_dir: Optional[Path] = None  # ~/.config/worldflags/
    package_dir: Path = DEFAULTS_DIR  # Package defaults

    # Specific files (resolved from directories)
    env_file: Optional[Path] = None
    config_file: Optional[Path] = None
    strings_dir: Optional[Path] = None

    def __post_init__(self):
        """Resolve file paths from directories."""
        # Priority: local > user > package
        self.env_file = self._find_file(".env")
        self.config_file = self._find_file("config.yaml")
        self.strings_dir = self._find_dir("strings")

    def _candidates(self) -> list[Path]:
        return [d for d in (self.local_dir, self.user_dir, self.package_dir) if d]

    def _find_file(self, filename: str) -> Optional[Path]:
        """Find a config file in priority order."""
        for directory in self._candidates():
            candidate = directory / filename
            if candidate.is_file():
                return candidate
        return None

    def _find_dir(self, dirname: str) -> Optional[Path]:
        for directory in self._candidates():
            candidate = directory / dirname
            if candidate.is_dir():
                return candidate
        return None


def get_config_paths() -> ConfigPaths:
    """
    Discover configuration paths.

    Priority order (highest to lowest):
    1. .worldflags/ in current directory
    2. ~/.config/worldflags/
    3. Package defaults

    Returns:
        ConfigPaths with discovered locations
    """
    local_dir = Path.cwd() / LOCAL_DIR_NAME
    local_dir = local_dir if local_dir.exists() else None

    user_dir = Path.home() / ".config" / "worldflags"
    user_dir = user_dir if user_dir.exists() else None

    return ConfigPaths(
        local_dir=local_dir,
        user_dir=user_dir,
        package_dir=DEFAULTS_DIR,
    )


def init_local_config(target_dir: Optional[Path] = None) -> bool:
    """
    Initialize local configuration in the specified or current directory.

    Creates .worldflags/ with a config template and a copy of the default
    string tables, ready to be translated.

    Args:
        target_dir: Directory to initialize (default: current directory)

    Returns:
        True if successful
    """
    if target_dir is None:
        target_dir = Path.cwd()

    config_dir = target_dir / LOCAL_DIR_NAME

    if config_dir.exists():
        print(f"Configuration already exists at {config_dir}")
        print("Delete it first if you want to reinitialize.")
        return False

    print(f"Initializing worldflags configuration in {config_dir}")

    try:
        config_dir.mkdir(parents=True)

        config_content = """\
# worldflags local configuration
# Environment variables (WORLDFLAGS_*) take precedence over these values.

# Directory holding <Country>@3x.png flag images
# assets_dir: ./flags

# Locale of the string table used for display names (strings/<locale>.yaml)
# locale: en

# Catalog ordering: "name" (alphabetical) or "listing" (directory order)
# catalog_order: name

# Thumbnail scale coefficient, 0.0 to 1.0
# thumbnail_scale: 0.5

# JPEG quality used by the share export, 0.0 to 1.0
# export_quality: 0.8
"""
        (config_dir / "config.yaml").write_text(config_content, encoding="utf-8")

        env_content = """\
# WORLDFLAGS_ASSETS_DIR=./flags
# WORLDFLAGS_LOCALE=en
"""
        (config_dir / ".env").write_text(env_content, encoding="utf-8")

        shutil.copytree(DEFAULTS_DIR / "strings", config_dir / "strings")

        print("\nCreated configuration files:")
        print(f"  {config_dir}/config.yaml   - Catalog and image settings")
        print(f"  {config_dir}/.env          - Environment overrides")
        print(f"  {config_dir}/strings/      - Localized country names")

        return True

    except OSError as e:
        print(f"Error creating configuration: {e}")
        if config_dir.exists():
            shutil.rmtree(config_dir)
        return False
