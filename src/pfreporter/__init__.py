"""Perf Farm Reporter.

Fetches performance farm HTML reports and serves them as JSON, CSV or
rendered pages.
"""

__version__ = "0.3.0"
