"""npm registry package page URLs."""

import re

from ..ecosystems.npm.specifier import STRICT_NAME_PATTERN
from ..models import OutputLabel, PackageReference, RuleName
from .base import ConversionRule


class RegistryUrlRule(ConversionRule):
    """Converts an npmjs.com package page into a CDN link and a browse link.

    The registry page does not say which file of the package is wanted, so
    the CDN link ends in a placeholder the user fills in.
    """

    name = RuleName.REGISTRY_URL
    pattern = re.compile(
        rf"https?://(?:www\.)?npmjs\.com/package/({STRICT_NAME_PATTERN})(?:/v/([^/\s]+))?"
    )
    description = "https://www.npmjs.com/package/<name>[/v/<version>]"
    sample = "https://www.npmjs.com/package/axios"

    def render(self, reference: PackageReference) -> str:
        url = self.cdn_url(reference)
        placeholder = self.settings.file_path_placeholder
        return (
            f"{OutputLabel.CDN_LINK.prefix} {url}/{placeholder}\n"
            f"{OutputLabel.BROWSE_PACKAGE.prefix} {url}/"
        )
