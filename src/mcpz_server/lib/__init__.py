from .find_config_path import find_config_path

__all__ = ["find_config_path"]
