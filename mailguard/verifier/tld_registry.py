# mailguard/verifier/tld_registry.py
import logging
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

logger = logging.getLogger("mailguard.tld")

DEFAULT_TLD_RESOURCE = "tlds.txt"


class TldRegistry:
    """
    Immutable set of known top-level domains (lowercase ASCII, punycode for IDN TLDs).

    Built once at startup and shared read-only by every validation call.
    """

    __slots__ = ("_tlds", "_source")

    def __init__(self, tlds: Iterable[str], source: str = "<memory>"):
        frozen = frozenset(t.strip().lower() for t in tlds if t and t.strip())
        if not frozen:
            raise ValueError(f"TLD registry from {source} is empty")
        object.__setattr__(self, "_tlds", frozen)
        object.__setattr__(self, "_source", source)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def tlds(self) -> FrozenSet[str]:
        return self._tlds

    @property
    def source(self) -> str:
        return self._source

    def contains(self, suffix: Optional[str]) -> bool:
        if not suffix:
            return False
        return suffix.lower() in self._tlds

    def __contains__(self, suffix) -> bool:
        return isinstance(suffix, str) and self.contains(suffix)

    def __len__(self) -> int:
        return len(self._tlds)

    def __repr__(self) -> str:
        return f"TldRegistry(size={len(self._tlds)}, source={self.source!r})"

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str = "<lines>") -> "TldRegistry":
        """Parse IANA-style text: one TLD per line, '#' comments and blank lines ignored."""
        tlds = []
        for line in lines:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            tlds.append(line)
        return cls(tlds, source=source)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TldRegistry":
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            registry = cls.from_lines(f, source=str(path))
        logger.info("Loaded %d TLDs from %s", len(registry), path)
        return registry

    @classmethod
    def load_default(cls) -> "TldRegistry":
        """Load the TLD list bundled with the package."""
        text = resources.files("mailguard.verifier").joinpath("data").joinpath(DEFAULT_TLD_RESOURCE).read_text(encoding="utf-8")
        registry = cls.from_lines(text.splitlines(), source=f"bundled:{DEFAULT_TLD_RESOURCE}")
        logger.info("Loaded %d bundled TLDs", len(registry))
        return registry


def extract_tld(domain: Optional[str]) -> Optional[str]:
    """Return the lowercased label after the last dot, or None when there is no usable suffix."""
    if not domain or domain.isspace():
        return None
    if "." not in domain:
        return None
    tld = domain.rsplit(".", 1)[-1]
    if not tld:
        return None
    return tld.lower()
