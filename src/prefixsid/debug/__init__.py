"""debug

Crash reporting for the command line, and the python debugger when
prefixsid.debug.pdb is set.
"""

from __future__ import annotations

from prefixsid.debug.intercept import format_panic  # noqa: F401,E261
from prefixsid.debug.intercept import trace_interceptor  # noqa: F401,E261

__all__ = ['format_panic', 'trace_interceptor']
