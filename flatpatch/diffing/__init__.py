# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import DiffConfig
from .generic import diff, create_additions, create_replaces, create_removes

__all__ = ["diff", "create_additions", "create_replaces", "create_removes", "DiffConfig"]
