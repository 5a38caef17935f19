"""
Configuration loading for fzyscore.
"""

from .loader import ConfigLoader, configuration_from_environment, load_config

__all__ = ['ConfigLoader', 'configuration_from_environment', 'load_config']
