"""CORS policy for the functions endpoint: any origin, fixed method and header lists."""
from __future__ import annotations
from typing import Dict

ALLOWED_ORIGIN = '*'
ALLOWED_HEADERS = 'authorization, x-client-info, apikey, content-type'
ALLOWED_METHODS = 'GET, POST, PUT, DELETE, OPTIONS'


def cors_headers() -> Dict[str, str]:
    return {
        'Access-Control-Allow-Origin': ALLOWED_ORIGIN,
        'Access-Control-Allow-Headers': ALLOWED_HEADERS,
        'Access-Control-Allow-Methods': ALLOWED_METHODS,
    }

__all__ = ['cors_headers', 'ALLOWED_ORIGIN', 'ALLOWED_HEADERS', 'ALLOWED_METHODS']
