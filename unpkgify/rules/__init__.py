"""Recognition rules for package references."""

from .base import ConversionRule
from .install_command import InstallCommandRule
from .import_statement import ImportStatementRule
from .require_call import RequireCallRule
from .registry_url import RegistryUrlRule
from .bare_specifier import BareSpecifierRule

__all__ = [
    "ConversionRule",
    "InstallCommandRule",
    "ImportStatementRule",
    "RequireCallRule",
    "RegistryUrlRule",
    "BareSpecifierRule",
]
