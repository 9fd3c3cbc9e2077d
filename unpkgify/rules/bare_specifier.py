"""Lines holding nothing but ``<name>[@<version>]``."""

import re

from ..ecosystems.npm.specifier import NAME_PATTERN
from ..models import PackageReference, RuleName
from .base import ConversionRule


class BareSpecifierRule(ConversionRule):
    """Matches whole lines, so any single word of prose is converted too."""

    name = RuleName.BARE_SPECIFIER
    pattern = re.compile(rf"^({NAME_PATTERN})(?:@(\S+))?$", re.MULTILINE)
    description = "<name>[@<version>] alone on a line"
    sample = "@types/node@20.0.0"

    def render(self, reference: PackageReference) -> str:
        return self.cdn_url(reference)
