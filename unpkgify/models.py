from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .ecosystems.npm.specifier import resolve_version, split_specifier


class RuleName(str, Enum):
    """Enumeration of recognition rules, in priority order."""
    INSTALL_COMMAND = "install_command"
    IMPORT_STATEMENT = "import_statement"
    REQUIRE_CALL = "require_call"
    REGISTRY_URL = "registry_url"
    BARE_SPECIFIER = "bare_specifier"


class OutputLabel(str, Enum):
    """Label attached to each rewritten output line."""
    RESULT = "Result"
    CDN_LINK = "CdnLink"
    BROWSE_PACKAGE = "BrowsePackage"

    @property
    def display_name(self) -> str:
        return _LABEL_TITLES[self]

    @property
    def prefix(self) -> Optional[str]:
        return _LABEL_PREFIXES.get(self)


_LABEL_TITLES = {
    OutputLabel.RESULT: "Result",
    OutputLabel.CDN_LINK: "CDN Link",
    OutputLabel.BROWSE_PACKAGE: "Browse Package",
}

_LABEL_PREFIXES = {
    OutputLabel.CDN_LINK: "CDN:",
    OutputLabel.BROWSE_PACKAGE: "Browse:",
}


@dataclass(frozen=True)
class PackageReference:
    """Reference to an npm package, optionally pinned to a version."""
    name: str
    version: Optional[str] = None

    @classmethod
    def parse(cls, specifier: str) -> "PackageReference":
        name, version = split_specifier(specifier)
        return cls(name=name, version=version)

    def resolved_version(self, default: str = "latest") -> str:
        return resolve_version(self.version, default)

    def cdn_url(self, base_url: str = "https://unpkg.com", default_version: str = "latest") -> str:
        """Build ``<base>/<name>@<version>`` for this reference."""
        return f"{base_url}/{self.name}@{self.resolved_version(default_version)}"


@dataclass(frozen=True)
class OutputLine:
    """One labelled line of conversion output."""
    label: OutputLabel
    url: str

    def display(self) -> str:
        """Render the line the way it appears in the rewritten text."""
        if self.label.prefix:
            return f"{self.label.prefix} {self.url}"
        return self.url


@dataclass(frozen=True)
class ConversionResult:
    """Ordered output lines produced by a single conversion call."""
    lines: Tuple[OutputLine, ...] = field(default_factory=tuple)
    text: str = ""

    def __iter__(self) -> Iterator[OutputLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)

    def __getitem__(self, index: int) -> OutputLine:
        return self.lines[index]

    @property
    def is_single(self) -> bool:
        return len(self.lines) == 1

    def urls(self) -> List[str]:
        return [line.url for line in self.lines]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lines": [
                {"label": line.label.value, "url": line.url}
                for line in self.lines
            ]
        }
