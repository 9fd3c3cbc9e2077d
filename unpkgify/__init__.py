"""Convert npm package references into unpkg CDN URLs."""

from .cdn_model import CdnSettings, load_settings
from .converter import Converter, convert, register_rule
from .models import ConversionResult, OutputLabel, OutputLine, PackageReference, RuleName

__version__ = "0.1.0"

__all__ = [
    "CdnSettings",
    "ConversionResult",
    "Converter",
    "OutputLabel",
    "OutputLine",
    "PackageReference",
    "RuleName",
    "convert",
    "load_settings",
    "register_rule",
]
