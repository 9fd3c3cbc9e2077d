"""CommonJS ``require('<name>')`` calls."""

import re

from ..ecosystems.npm.specifier import NAME_PATTERN
from ..models import PackageReference, RuleName
from .base import ConversionRule


class RequireCallRule(ConversionRule):
    name = RuleName.REQUIRE_CALL
    pattern = re.compile(rf"""require\(['"]({NAME_PATTERN})(?:@([^'"]+))?['"]\)""")
    description = "require('<name>[@<version>]')"
    sample = 'require("lodash")'

    def render(self, reference: PackageReference) -> str:
        return self.cdn_url(reference)
