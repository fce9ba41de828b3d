#!/usr/bin/env python3
"""
Catalog API client: catalog id -> display title and category

Each file triggers its own request; nothing is cached between lookups.
"""

import json
import logging
from dataclasses import dataclass
from typing import Dict

import requests

from lib.errors import CatalogLookupError, CredentialMissingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    """Title and category returned by the catalog"""
    title: str
    category: str  # 'MOVIE', 'SHOW', ...

    @property
    def complete(self) -> bool:
        return bool(self.title and self.category)


class CatalogClient:
    """Interface to the catalog API (GET <api_url><id> with a Clientid header)"""

    def __init__(self, api_url: str, client_id: str, timeout: float = 10):
        self.api_url = api_url
        self.client_id = client_id
        self.timeout = timeout

    def lookup(self, catalog_id: str) -> CatalogEntry:
        """
        Fetch title and category for a catalog id.

        The localized title is preferred; originalTitle is used when it is empty.
        Raises CredentialMissingError without a client id and
        CatalogLookupError on network, HTTP, encoding or JSON failures.
        """
        if not self.client_id:
            raise CredentialMissingError("client id for the catalog API is not provided")

        data = self._query_api(catalog_id)

        title = data.get('title') or data.get('originalTitle') or ''
        category = data.get('type') or ''
        logger.debug(f"Catalog: {catalog_id} → '{title}' ({category})")
        return CatalogEntry(title=title, category=category)

    def _query_api(self, catalog_id: str) -> Dict:
        """Make actual API request and decode the JSON body"""
        try:
            response = requests.get(
                self.api_url + catalog_id,
                headers={'Clientid': self.client_id},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise CatalogLookupError(f"HTTP error: {e}", 'http', catalog_id) from e
        except requests.exceptions.RequestException as e:
            raise CatalogLookupError(f"Network error: {e}", 'network', catalog_id) from e

        # Honour an explicit charset from Content-Type, otherwise let requests
        # detect it (requests assumes ISO-8859-1 for text/* without a charset)
        content_type = response.headers.get('Content-Type', '') or ''
        if 'charset' in content_type.lower() and response.encoding:
            encoding = response.encoding
        else:
            encoding = response.apparent_encoding or 'utf-8'
        try:
            body = response.content.decode(encoding)
        except (LookupError, UnicodeDecodeError) as e:
            raise CatalogLookupError(f"Encoding error: {e}", 'encoding', catalog_id) from e

        try:
            data = json.loads(body)
        except ValueError as e:
            raise CatalogLookupError(f"JSON decode error: {e}", 'decode', catalog_id) from e

        if not isinstance(data, dict):
            raise CatalogLookupError(
                f"JSON decode error: expected an object, got {type(data).__name__}",
                'decode', catalog_id,
            )
        return data
