"""Shared helpers for Court Pairing."""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "COURTPAIRING_LOG_LEVEL"

_root_configured = False


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring the package logger on first use.

    The level defaults to WARNING and can be raised or lowered with the
    ``COURTPAIRING_LOG_LEVEL`` environment variable (e.g. ``DEBUG``).

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger for the module
    """
    global _root_configured

    if not _root_configured:
        package_logger = logging.getLogger("courtpairing")
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        package_logger.setLevel(getattr(logging, level_name, logging.WARNING))
        if not package_logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            package_logger.addHandler(handler)
        _root_configured = True

    return logging.getLogger(name)
