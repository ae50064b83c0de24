"""
propmerge
=========

Merges ``.properties`` settings from classpath defaults, registered
locations, configuration search paths and a runtime-variable override file.
"""

from .config import ConfigMerger, MergerSettings, load_settings

__version__ = "1.0.0"

__all__ = ['ConfigMerger', 'MergerSettings', 'load_settings']
