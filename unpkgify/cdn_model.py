from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .models import RuleName

DEFAULT_RULE_ORDER: Tuple[RuleName, ...] = tuple(RuleName)


@dataclass
class CdnSettings:
    """Configurable CDN target for converted package references."""

    base_url: str = "https://unpkg.com"
    default_version: str = "latest"          # Used when a reference carries no version
    file_path_placeholder: str = "<file-path>"  # Emitted verbatim for registry URLs
    enabled_rules: Tuple[RuleName, ...] = field(default_factory=lambda: DEFAULT_RULE_ORDER)

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    def ordered_rules(self) -> List[RuleName]:
        """Enabled rules, always in the fixed priority order."""
        enabled = set(self.enabled_rules)
        return [rule for rule in DEFAULT_RULE_ORDER if rule in enabled]

    def get_cdn_dict(self) -> Dict[str, str]:
        return {
            "base_url": self.base_url,
            "default_version": self.default_version,
            "file_path_placeholder": self.file_path_placeholder,
        }


def load_settings(data: Optional[Dict[str, Any]] = None) -> CdnSettings:
    """Create CdnSettings from a configuration dictionary.

    ``data`` is the full configuration mapping; only its ``cdn`` and
    ``rules`` sections are read.
    """
    if not data:
        return CdnSettings()

    cdn = data.get("cdn") or {}
    rules = data.get("rules") or {}
    defaults = CdnSettings()

    enabled = rules.get("enabled")
    if enabled is None:
        enabled_rules = defaults.enabled_rules
    else:
        enabled_rules = tuple(RuleName(name) for name in enabled)

    return CdnSettings(
        base_url=str(cdn.get("base_url", defaults.base_url)),
        default_version=str(cdn.get("default_version", defaults.default_version)),
        file_path_placeholder=str(cdn.get("file_path_placeholder", defaults.file_path_placeholder)),
        enabled_rules=enabled_rules,
    )
