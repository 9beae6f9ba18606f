"""Shared type aliases used across is_railway."""

from collections.abc import Mapping
from typing import Any, Literal

# Environment snapshot (os.environ or any str -> str mapping)
Environ = Mapping[str, str]

# Structured log fields
LogDetails = Mapping[str, Any]

EnvironmentName = Literal["railway", "local"]
