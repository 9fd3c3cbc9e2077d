"""Abstract base class for conversion rules."""

import re
from abc import ABC, abstractmethod
from typing import ClassVar, Pattern, Tuple

from ..cdn_model import CdnSettings
from ..models import PackageReference, RuleName


class ConversionRule(ABC):
    """Abstract base class for package reference recognition rules.

    Each rule owns a regular expression whose first group captures the
    package name and whose second (optional) group captures the version.
    Applying a rule replaces every match in the text with the rule's
    rendering of the captured reference.
    """

    name: ClassVar[RuleName]
    pattern: ClassVar[Pattern[str]]
    description: ClassVar[str] = ""
    sample: ClassVar[str] = ""

    def __init__(self, settings: CdnSettings):
        self.settings = settings

    @abstractmethod
    def render(self, reference: PackageReference) -> str:
        """Render the replacement text for one recognised reference.

        Args:
            reference: Package reference captured from the match

        Returns:
            Replacement text; may span several lines
        """
        pass

    def cdn_url(self, reference: PackageReference) -> str:
        return reference.cdn_url(self.settings.base_url, self.settings.default_version)

    def apply(self, text: str) -> Tuple[str, int]:
        """Replace every match of this rule in ``text``.

        Returns:
            Tuple of the rewritten text and the number of replacements
        """
        return self.pattern.subn(self._replace, text)

    def _replace(self, match: "re.Match[str]") -> str:
        reference = PackageReference(name=match.group(1).strip(), version=match.group(2))
        return self.render(reference)
