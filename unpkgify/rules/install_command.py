"""``npm install <name>[@<version>]`` commands."""

import re

from ..ecosystems.npm.specifier import NAME_PATTERN
from ..models import PackageReference, RuleName
from .base import ConversionRule


class InstallCommandRule(ConversionRule):
    """Turns install commands into a ready-to-paste script tag."""

    name = RuleName.INSTALL_COMMAND
    pattern = re.compile(rf"npm install\s+({NAME_PATTERN})(?:@(\S+))?")
    description = "npm install <name>[@<version>]"
    sample = "npm install react@18.2.0"

    def render(self, reference: PackageReference) -> str:
        return f'<script src="{self.cdn_url(reference)}"></script>'
