"""perlscope - hover and symbol lookups for a Perl language server."""

from perlscope.session import NavigatorSession

__version__ = "0.1.0"

__all__ = ["NavigatorSession", "__version__"]
