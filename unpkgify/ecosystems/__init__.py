"""Package ecosystem helpers."""
