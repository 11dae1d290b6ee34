

class RcBrowserError(Exception):
    """Base exception for all rc_browser errors"""
    pass

class ConfigError(RcBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class DatasetLoadError(RcBrowserError):
    """
    The record dataset could not be read:
    missing file, invalid JSON, not a GeoJSON FeatureCollection
    """
    pass
