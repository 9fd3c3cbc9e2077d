"""ES module ``import ... from '<name>'`` statements."""

import re

from ..ecosystems.npm.specifier import NAME_PATTERN
from ..models import PackageReference, RuleName
from .base import ConversionRule


class ImportStatementRule(ConversionRule):
    name = RuleName.IMPORT_STATEMENT
    pattern = re.compile(rf"""import\s+.*?\s+from\s+['"]({NAME_PATTERN})(?:@([^'"]+))?['"]""")
    description = "import ... from '<name>[@<version>]'"
    sample = 'import React from "react"'

    def render(self, reference: PackageReference) -> str:
        return self.cdn_url(reference)
