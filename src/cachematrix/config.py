"""
Configuration & Global Constants
================================
This module serves as the central registry for the package's global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic strings and tolerances (e.g., "scipy", 1e-8)
   scattered throughout the code.
2. Deployment: It lets the inversion backend and the log level be picked from
   the environment without touching the code.

Exports:
    INVERSION_METHODS (tuple): Names accepted by the inversion primitive.
    DEFAULT_INVERSION_METHOD (str): Backend used when none is requested.
    IDENTITY_ATOL (float): Absolute tolerance for identity checks.
    LOG_LEVEL (int): Default level for setup_logging.
"""
import logging
import os


INVERSION_METHODS: tuple[str, ...] = ("scipy", "numpy")

DEFAULT_INVERSION_METHOD: str = os.environ.get("CACHEMATRIX_INVERSION_METHOD", "scipy").lower()
if DEFAULT_INVERSION_METHOD not in INVERSION_METHODS:
    print(f"WARNING: Unknown inversion method '{DEFAULT_INVERSION_METHOD}', falling back to 'scipy'")
    DEFAULT_INVERSION_METHOD = "scipy"

IDENTITY_ATOL: float = 1e-8

LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT: str = '%H:%M:%S'
LOG_LEVEL: int = logging.getLevelName(os.environ.get("CACHEMATRIX_LOG_LEVEL", "INFO").upper())
if not isinstance(LOG_LEVEL, int):
    LOG_LEVEL = logging.INFO
