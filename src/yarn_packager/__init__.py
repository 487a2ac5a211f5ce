"""yarn-packager core package.

This package adapts yarn 2+ to the packager interface of the build pipeline:
production dependency listing, install/prune, script execution and lockfile
rebasing. It is callable from both the pipeline and the standalone CLI.
"""

from .config import ConfigError, PackagerOptions, Settings, load_settings
from .errors import (
    MalformedOutputError,
    PackagerError,
    ProcessExecutionError,
    ScriptExecutionError,
    UnsupportedYarnVersionError,
)
from .models import DependencyGraph, DependencyNode
from .packager import Yarn2Packager

__all__ = [
    "ConfigError",
    "DependencyGraph",
    "DependencyNode",
    "MalformedOutputError",
    "PackagerError",
    "PackagerOptions",
    "ProcessExecutionError",
    "ScriptExecutionError",
    "Settings",
    "UnsupportedYarnVersionError",
    "Yarn2Packager",
    "load_settings",
]
