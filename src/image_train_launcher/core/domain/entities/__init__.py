"""Domain entities.

Plain records passed between the use case and the adapters. Keep filesystem/process I/O in adapters.
"""

from .base import *
