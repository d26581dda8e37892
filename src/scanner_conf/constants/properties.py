"""Stable property keys and filenames shared by the configuration layer.

These are *not* behaviour knobs (those live in the settings files), but
names that the scanner and its users agree on and that rarely change.
"""

# Control keys (never analysed, only steer where settings are looked up)
SCANNER_HOME = "scanner.home"
SCANNER_SETTINGS = "scanner.settings"
PROJECT_HOME = "project.home"
PROJECT_SETTINGS = "project.settings"

# Project / module keys
PROPERTY_MODULES = "sonar.modules"
PROPERTY_PROJECT_BASEDIR = "sonar.projectBaseDir"
PROPERTY_PROJECT_CONFIG_FILE = "sonar.projectConfigFile"

# Injected by the facade
BOOTSTRAP_START_TIME = "sonar.scanner.bootstrapStartTime"

# File naming constants
SONAR_PROJECT_PROPERTIES_FILENAME = "sonar-project.properties"
GLOBAL_SETTINGS_RELATIVE_PATH = "conf/sonar-scanner.properties"
SETTINGS_FILE_ENCODING = "utf-8"

# Module tree expansion
MAX_MODULE_DEPTH = 100
