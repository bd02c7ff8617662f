"""HTTP clients."""
from wikiprobe.clients.mediawiki import MediaWikiClient

__all__ = ["MediaWikiClient"]
