# ==============================================================================
# Railway Workbench - Model Railway Tools for Blender
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Railway Workbench Extension
Version 0.3.0

Track-relative placement of OO gauge rolling stock in Blender.

The core package is pure Python and can be used outside Blender. The tool
layer (railway_workbench.tool) needs bpy and is only imported on register.
"""

__version__ = "0.3.0"


# Reload support for development
def _reload_modules():
    """Reload all submodules in the correct order"""
    import sys
    import importlib

    # List of submodules in dependency order
    module_names = [
        "core",
        "tool",  # Tool layer (Blender implementations of core interfaces)
    ]

    for name in module_names:
        full_name = f"{__package__}.{name}"
        if full_name in sys.modules:
            importlib.reload(sys.modules[full_name])


# Attempt reload if extension is being reloaded
if "core" in locals():
    _reload_modules()

from . import core

# Import logging utilities
from .core.logging_config import (
    setup_logging,
    get_logger,
    log_startup_banner,
    log_startup_complete,
    log_shutdown,
)


def register():
    """Register extension modules"""
    from . import tool

    # Initialize logging first
    setup_logging()
    logger = get_logger(__name__)

    log_startup_banner(__version__)

    logger.info("Loading modules...")
    core.register()
    tool.register()  # Tool layer (Blender implementations)

    log_startup_complete()


def unregister():
    """Unregister extension modules"""
    from . import tool

    logger = get_logger(__name__)
    logger.info("Railway Workbench Extension - Unregistering...")

    tool.unregister()
    core.unregister()

    log_shutdown()


if __name__ == "__main__":
    register()
