"""
Loader configuration.

    from mcp_adapters.config import FailPolicy

    tools = await load_mcp_tools("math", session, FailPolicy.LENIENT)

The policy can also come from the environment:

    export MCP_ADAPTERS_FAIL_POLICY=lenient
"""

from __future__ import annotations

import os
from enum import Enum

FAIL_POLICY_ENV = "MCP_ADAPTERS_FAIL_POLICY"


class FailPolicy(str, Enum):
    """What the catalog loader does when a single tool cannot be built."""

    STRICT = "strict"    # abort the whole load
    LENIENT = "lenient"  # skip the tool, keep going

    @classmethod
    def coerce(cls, value: FailPolicy | str | bool) -> FailPolicy:
        """
        Accept a FailPolicy, its name as a string, or a boolean.

        A boolean follows the `throw_on_load_error` convention: True means
        strict, False means lenient.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.STRICT if value else cls.LENIENT
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(
            f"Unknown fail policy: {value!r}. "
            f"Expected one of {[p.value for p in cls]}"
        )


def default_fail_policy() -> FailPolicy:
    """Read the fail policy from the environment, defaulting to strict."""
    value = os.environ.get(FAIL_POLICY_ENV)
    if not value:
        return FailPolicy.STRICT
    return FailPolicy.coerce(value)
