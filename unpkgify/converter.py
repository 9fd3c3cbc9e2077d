"""Package reference to unpkg URL converter."""

import logging
import re
from typing import Dict, List, Optional, Type

from .cdn_model import CdnSettings
from .models import ConversionResult, OutputLabel, OutputLine, RuleName
from .rules import (
    BareSpecifierRule,
    ConversionRule,
    ImportStatementRule,
    InstallCommandRule,
    RegistryUrlRule,
    RequireCallRule,
)

logger = logging.getLogger(__name__)

# Pluggable rule registry
RULE_REGISTRY: Dict[RuleName, Type[ConversionRule]] = {}


def register_rule(name: RuleName, rule_cls: Type[ConversionRule]) -> None:
    """Register a rule implementation under its name."""
    RULE_REGISTRY[name] = rule_cls


# Register default rules
register_rule(RuleName.INSTALL_COMMAND, InstallCommandRule)
register_rule(RuleName.IMPORT_STATEMENT, ImportStatementRule)
register_rule(RuleName.REQUIRE_CALL, RequireCallRule)
register_rule(RuleName.REGISTRY_URL, RegistryUrlRule)
register_rule(RuleName.BARE_SPECIFIER, BareSpecifierRule)

_LABEL_PREFIX_RE = re.compile(r"^(CDN:|Browse:)\s*")
_LINE_BREAK_RE = re.compile(r"\r\n?")


class Converter:
    """Rewrites npm package references in free-form text into unpkg URLs.

    Rules run in fixed priority order, each as a global find-and-replace
    over the output of the previous one. The rewritten text is then split
    into labelled output lines.
    """

    def __init__(
        self,
        settings: Optional[CdnSettings] = None,
        rule_registry: Optional[Dict[RuleName, Type[ConversionRule]]] = None,
    ):
        self.settings = settings or CdnSettings()
        registry = RULE_REGISTRY if rule_registry is None else rule_registry
        self.rules: List[ConversionRule] = [
            registry[name](self.settings)
            for name in self.settings.ordered_rules()
            if name in registry
        ]

    def rewrite(self, text: str) -> str:
        """Apply every enabled rule to ``text`` and return the rewritten text."""
        if not text.strip():
            return ""

        result = _LINE_BREAK_RE.sub("\n", text)
        for rule in self.rules:
            result, count = rule.apply(result)
            if count:
                logger.debug(f"Rule {rule.name.value} rewrote {count} reference(s)")
        return result

    def convert(self, text: str) -> ConversionResult:
        """Convert ``text`` into an ordered sequence of labelled lines."""
        rewritten = self.rewrite(text)
        lines = tuple(
            self.label_line(line)
            for line in rewritten.split("\n")
            if line.strip()
        )
        logger.debug(f"Conversion produced {len(lines)} line(s)")
        return ConversionResult(lines=lines, text=rewritten)

    @staticmethod
    def label_line(line: str) -> OutputLine:
        """Label a rewritten line by its prefix, stripping the prefix from the url."""
        if line.startswith(OutputLabel.CDN_LINK.prefix):
            label = OutputLabel.CDN_LINK
        elif line.startswith(OutputLabel.BROWSE_PACKAGE.prefix):
            label = OutputLabel.BROWSE_PACKAGE
        else:
            return OutputLine(label=OutputLabel.RESULT, url=line)
        return OutputLine(label=label, url=_LABEL_PREFIX_RE.sub("", line))


_default_converter: Optional[Converter] = None


def convert(text: str) -> ConversionResult:
    """Convert ``text`` using the default unpkg settings."""
    global _default_converter
    if _default_converter is None:
        _default_converter = Converter()
    return _default_converter.convert(text)
