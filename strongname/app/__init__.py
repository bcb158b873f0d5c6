"""Application layer for strongname.

The resolver and runner orchestrate tool discovery and invocation without
touching the file system, registry or processes directly.
All side effects are delegated to adapters via port interfaces.
"""

__all__ = [
    "Operation",
    "StrongNameResolver",
    "StrongNameService",
    "StrongNameToolRunner",
]

from strongname.app.resolver import StrongNameResolver
from strongname.app.runner import Operation, StrongNameToolRunner
from strongname.app.strongname_service import StrongNameService
