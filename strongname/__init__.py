"""strongname - locate and drive the .NET strong name tool (sn.exe).

Resolves sn.exe from known Windows SDK install locations or the SDK registry
and builds resign/verify/create-key command lines for it.
"""

__version__ = "0.1.0"
__author__ = "strongname contributors"

from strongname.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
