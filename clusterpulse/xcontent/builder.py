"""
ClusterPulse Document Builder

Ordered, streaming-style writer for structured (JSON) documents.

Callers open the root object, append fields and nested objects in the
order they should appear, close everything, then read the encoded output.
Every write is validated before it touches the document, so a rejected
write leaves the builder exactly as it was before the call.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_MAX_DEPTH = 32


class DocumentBuilderError(IOError):
    """Raised when a document builder cannot accept a write."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        location = f" at '{path}'" if path else ""
        super().__init__(f"Document builder error{location}: {message}")


class DocumentBuilder:
    """
    Builds a single JSON object with a fixed field order.

    Field order is insertion order. The same sequence of writes always
    produces byte-identical output.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self._max_depth = max_depth
        self._root: Optional[Dict[str, Any]] = None
        self._stack: List[Tuple[str, Dict[str, Any]]] = []
        self._complete = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def depth(self) -> int:
        """Number of currently open objects."""
        return len(self._stack)

    @property
    def is_complete(self) -> bool:
        """True once the root object has been closed."""
        return self._complete

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def start_object(self, name: Optional[str] = None) -> "DocumentBuilder":
        """Open the root object (``name=None``) or a named nested object."""
        self._ensure_writable()

        if not self._stack:
            if self._root is not None:
                raise DocumentBuilderError("root object already written")
            if name is not None:
                raise DocumentBuilderError(f"root object cannot be named ('{name}')")
            self._root = {}
            self._stack.append(("", self._root))
            return self

        if name is None:
            raise DocumentBuilderError("nested object requires a name", self._path())
        current = self._current()
        self._check_name(name, current)
        if len(self._stack) >= self._max_depth:
            raise DocumentBuilderError(
                f"maximum nesting depth {self._max_depth} exceeded",
                self._path(name),
            )

        child: Dict[str, Any] = {}
        current[name] = child
        self._stack.append((name, child))
        return self

    def end_object(self) -> "DocumentBuilder":
        """Close the innermost open object."""
        self._ensure_writable()
        if not self._stack:
            raise DocumentBuilderError("no open object to close")

        self._stack.pop()
        if not self._stack:
            self._complete = True
        return self

    def field(self, name: str, value: Any) -> "DocumentBuilder":
        """Write ``name: value`` into the innermost open object."""
        self._ensure_writable()
        if not self._stack:
            raise DocumentBuilderError(f"field '{name}' written outside of an object")

        current = self._current()
        self._check_name(name, current)
        current[name] = self._encode_value(value, self._path(name), len(self._stack))
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the finished document."""
        self._ensure_complete()
        return json.loads(self.to_string())

    def to_string(self, pretty: bool = False) -> str:
        self._ensure_complete()
        try:
            if pretty:
                return json.dumps(self._root, ensure_ascii=False, allow_nan=False, indent=2)
            return json.dumps(
                self._root,
                ensure_ascii=False,
                allow_nan=False,
                separators=(",", ":"),
            )
        except (TypeError, ValueError) as e:
            raise DocumentBuilderError(f"document cannot be encoded: {e}") from e

    def to_bytes(self, pretty: bool = False) -> bytes:
        return self.to_string(pretty=pretty).encode("utf-8")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _current(self) -> Dict[str, Any]:
        return self._stack[-1][1]

    def _path(self, leaf: Optional[str] = None) -> str:
        names = [name for name, _ in self._stack[1:]]
        if leaf is not None:
            names.append(leaf)
        return ".".join(names)

    def _ensure_writable(self) -> None:
        if self._complete:
            raise DocumentBuilderError("document is already closed")

    def _ensure_complete(self) -> None:
        if not self._complete:
            raise DocumentBuilderError(
                f"document is not complete ({len(self._stack)} open object(s))"
            )

    def _check_name(self, name: Any, current: Dict[str, Any]) -> None:
        if not isinstance(name, str) or not name:
            raise DocumentBuilderError(
                f"field name must be a non-empty string, got {name!r}",
                self._path(),
            )
        if name in current:
            raise DocumentBuilderError("duplicate field", self._path(name))

    def _encode_value(self, value: Any, path: str, depth: int) -> Any:
        if isinstance(value, Enum):
            value = value.value

        if value is None or isinstance(value, (bool, int, str)):
            return value
        if isinstance(value, float):
            if not math.isfinite(value):
                raise DocumentBuilderError(f"non-finite number {value!r}", path)
            return value
        if isinstance(value, datetime):
            return value.isoformat()

        if depth >= self._max_depth:
            raise DocumentBuilderError(
                f"maximum nesting depth {self._max_depth} exceeded",
                path,
            )
        if isinstance(value, Mapping):
            encoded: Dict[str, Any] = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise DocumentBuilderError(f"mapping key must be a string, got {key!r}", path)
                encoded[key] = self._encode_value(item, f"{path}.{key}", depth + 1)
            return encoded
        if isinstance(value, (list, tuple)):
            return [
                self._encode_value(item, f"{path}[{i}]", depth + 1)
                for i, item in enumerate(value)
            ]

        raise DocumentBuilderError(
            f"unsupported value type {type(value).__name__}",
            path,
        )
