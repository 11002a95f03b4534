from .runtime import DispatchSettings, Platform, get_settings

__all__ = ["DispatchSettings", "Platform", "get_settings"]
