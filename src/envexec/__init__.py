try:
    from importlib.metadata import version

    __version__ = version("envexec")
except Exception:
    __version__ = "0.0.0"

from envexec.executor import Executor

__all__ = ["Executor", "__version__"]
