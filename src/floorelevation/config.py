"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps tolerances and parameter names in one place instead of
   scattering magic strings ("SpotElevation_1", ...) across the commands.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the bundled shared parameter file) when the tool is frozen.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_SHARED_PARAMETER_FILE (str): Absolute path to the bundled shared parameter file.
    USER_DATA_PATH (str): Folder for writable copies of bundled files in frozen builds.
    DEFAULT_TOLERANCE (float): Distance below which two samples are the same point.
"""
import sys
import os
import shutil
from pathlib import Path
from typing import Optional


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/floorelevation/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def get_writable_resource_path(path: str, user_dir: Optional[str] = None) -> str:
    """
    Get a path to a bundled resource that may be written back to.

    A frozen build unpacks its assets into a temporary folder that is removed
    on exit, so the resource is copied once into the user data folder and used
    from there. In development mode the file is used in place.
    """
    if not hasattr(sys, '_MEIPASS'):
        return path

    target_dir = user_dir or USER_DATA_PATH
    target = os.path.join(target_dir, os.path.basename(path))
    if not os.path.exists(target):
        os.makedirs(target_dir, exist_ok=True)
        shutil.copyfile(path, target)
    return target


# Geometry
DEFAULT_TOLERANCE: float = 0.001  # length units, same for dedup and loop closure
QUAD_POINT_COUNT: int = 4

# Shared parameters
SHARED_PARAMETER_FILE_NAME: str = "Shared Parameters_FloorEvelationPoints.txt"
SHARED_PARAMETER_GROUP: str = "FloorEvelation"  # group name as spelled in existing files

# Spot parameter names (1-based slot index)
SPOT_ELEVATION_TEMPLATE: str = "SpotElevation_{index}"
SPOT_NORTHING_TEMPLATE: str = "SpotCoordinate_N{index}"
SPOT_EASTING_TEMPLATE: str = "SpotCoordinate_E{index}"

# Transaction names
LOAD_PARAMETERS_TRANSACTION: str = "Load Shared Parameters"
SET_PARAMETERS_TRANSACTION: str = "Set Floor Elevation Parameters"

# Global paths
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_SHARED_PARAMETER_FILE: str = os.path.join(ASSETS_PATH, SHARED_PARAMETER_FILE_NAME)
USER_DATA_PATH: str = os.path.join(os.path.expanduser("~"), ".floorelevation")
