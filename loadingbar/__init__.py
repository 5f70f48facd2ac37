"""loadingbar — ANSI terminal progress bars that fill the available width"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("loadingbar")
except PackageNotFoundError:
    __version__ = "dev"

from loadingbar.bar import Bar, layout, render  # noqa: E402

__all__ = ["Bar", "layout", "render", "__version__"]
