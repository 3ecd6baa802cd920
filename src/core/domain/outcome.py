"""Outcome values for a single redirect check.

Every invocation ends in exactly one of these. Keeping them in the domain
layer lets both the service and the CLI agree on exit codes without the
service ever terminating the process.
"""

from __future__ import annotations

from enum import Enum


class CheckOutcome(str, Enum):
    """Terminal outcome of one check."""

    OK = "ok"
    MISMATCH = "mismatch"
    NETWORK_ERROR = "network_error"
    USAGE_ERROR = "usage_error"

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""

        return 0 if self is CheckOutcome.OK else 1
