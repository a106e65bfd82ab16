"""appdir - standard per-application directories for Unix-like systems and Windows.

By default, appdir's internal logging is disabled when used as a library.
Library users can enable logging by calling appdir.enable_logging().
"""

from appdir.environment import Environment, MappingEnvironment, OsEnvironment
from appdir.logging import disable_library_logging, enable_library_logging
from appdir.models import AppDir, XdgDir
from appdir.platforms import PlatformStrategy, UnixStrategy, WindowsStrategy, detect_platform
from appdir.resolver import DirectoryResolver, get_resolver, temp_dir, user_data_dir, xdg_dir

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "AppDir",
    "DirectoryResolver",
    "Environment",
    "MappingEnvironment",
    "OsEnvironment",
    "PlatformStrategy",
    "UnixStrategy",
    "WindowsStrategy",
    "XdgDir",
    "detect_platform",
    "enable_logging",
    "get_resolver",
    "temp_dir",
    "user_data_dir",
    "xdg_dir",
]
