"""Core types and the scheme registry for text embossers."""

from __future__ import annotations

import abc
from dataclasses import asdict, dataclass
from typing import IO, Any, Callable, Mapping
from urllib.parse import urlsplit


class EmbosserError(Exception):
    """Raised when an embosser cannot be created or fails to extract text."""


@dataclass
class EmbossTextResult:
    """Text extracted from an image, with where it came from and when."""

    text: str = ""
    source: str = ""
    created: int = 0

    def __str__(self) -> str:
        return self.text

    def to_dict(self) -> dict[str, Any]:
        """Return the result as a JSON-ready dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmbossTextResult":
        """Build a result from a decoded JSON object."""
        if not isinstance(data, Mapping):
            raise EmbosserError(f"Expected a JSON object, got {type(data).__name__}")
        try:
            return cls(
                text=str(data.get("text", "") or ""),
                source=str(data.get("source", "") or ""),
                created=int(data.get("created", 0) or 0),
            )
        except (TypeError, ValueError) as err:
            raise EmbosserError(f"Invalid result data, {err}") from err


class Embosser(abc.ABC):
    """Something that extracts text from images."""

    @abc.abstractmethod
    def emboss_text(self, path: str) -> EmbossTextResult:
        """Extract text from the image stored at ``path``."""

    @abc.abstractmethod
    def emboss_text_with_reader(self, path: str, reader: IO[bytes]) -> EmbossTextResult:
        """Extract text from image data read from ``reader``."""

    @abc.abstractmethod
    def close(self) -> None:
        """Release any resources held by the embosser."""

    def __enter__(self) -> "Embosser":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


EmbosserFactory = Callable[[str], Embosser]

_registry: dict[str, EmbosserFactory] = {}
_builtins_loaded = False


def _register(scheme: str, factory: EmbosserFactory) -> None:
    if factory is None:
        raise EmbosserError("Driver is nil")
    key = scheme.lower()
    if key in _registry:
        raise EmbosserError(f"Driver {key} already registered")
    _registry[key] = factory


def _ensure_builtins() -> None:
    global _builtins_loaded
    if _builtins_loaded:
        return
    _builtins_loaded = True

    from textemboss.http_embosser import HTTPEmbosser
    from textemboss.local_embosser import LocalEmbosser
    from textemboss.null_embosser import NullEmbosser

    _register("null", NullEmbosser)
    _register("local", LocalEmbosser)
    _register("http", HTTPEmbosser)
    _register("https", HTTPEmbosser)


def register_embosser(scheme: str, factory: EmbosserFactory) -> None:
    """Make ``factory`` the constructor for URIs whose scheme is ``scheme``."""
    _ensure_builtins()
    _register(scheme, factory)


def new_embosser(uri: str) -> Embosser:
    """Create the embosser registered for the scheme of ``uri``."""
    _ensure_builtins()
    try:
        scheme = urlsplit(uri).scheme
    except ValueError as err:
        raise EmbosserError(f"Failed to parse URI, {err}") from err
    factory = _registry.get(scheme.lower())
    if factory is None:
        raise EmbosserError(f"Unknown driver: {scheme}")
    return factory(uri)


def schemes() -> list[str]:
    """Return the registered schemes, sorted, each as ``name://``."""
    _ensure_builtins()
    return sorted(f"{name.lower()}://" for name in _registry)