from importlib.metadata import version

try:
    __version__ = version("gresql")
except Exception:
    __version__ = "unknown"
