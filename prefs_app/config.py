"""Application constants and resource locations."""

from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_DIR = Path(__file__).resolve().parent
RESOURCES_DIR = PACKAGE_DIR / "ui" / "resources"

# Identity; QSettings derives the native storage location from these.
APP_ID = "io.github.tduarte.Settings"
ORGANIZATION_NAME = "io.github.tduarte"
APPLICATION_NAME = "Settings"
WINDOW_TITLE = "Settings"

# Settings schema (YAML, shipped as package data)
SCHEMA_ID = APP_ID
SCHEMA_PATH = PACKAGE_DIR / "settings" / "schema.yaml"

# Set to an .ini path to store settings in a file instead of the native location
SETTINGS_PATH_ENV = "PREFS_SETTINGS_PATH"

# Below this content width the split view shows either the sidebar or the page
NARROW_BREAKPOINT_PX = 560
DEFAULT_WINDOW_SIZE = (820, 560)
SIDEBAR_WIDTH = 220
