"""Audit logging for ogcdef batch runs.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: event envelope written by the logger
"""

from ogcdef.audit.helpers import generate_run_id, get_package_version
from ogcdef.audit.logger import AuditLogger
from ogcdef.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
    "get_package_version",
]
