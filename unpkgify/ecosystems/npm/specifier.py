"""Package specifier grammar for NPM references."""

from __future__ import annotations

import re
from typing import Optional, Tuple

# Letters, digits, "-", "_", "." and "/", optionally behind a scope "@".
NAME_PATTERN = r"@?[a-zA-Z0-9_.\-/]+"

# Registry URLs embed the name in a path, so "/" is only allowed once,
# between a scope and its package.
STRICT_NAME_PATTERN = r"@[a-zA-Z0-9_.\-]+/[a-zA-Z0-9_.\-]+|[a-zA-Z0-9_.\-]+"

_SPECIFIER_RE = re.compile(rf"^({NAME_PATTERN})(?:@(\S+))?$")


def resolve_version(version: Optional[str], default: str = "latest") -> str:
    """Return ``version`` stripped, or ``default`` when it is missing or empty."""
    if version is None:
        return default
    version = version.strip()
    return version or default


def split_specifier(specifier: str) -> Tuple[str, Optional[str]]:
    """Split ``name[@version]`` into its name and version parts.

    The leading ``@`` of a scoped name is part of the name, so
    ``@types/node@20.0.0`` yields ``("@types/node", "20.0.0")``.  Text that
    does not look like a specifier is returned whole as the name.
    """

    specifier = specifier.strip()
    match = _SPECIFIER_RE.match(specifier)
    if not match:
        return specifier, None
    return match.group(1), match.group(2)
