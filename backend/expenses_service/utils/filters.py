from __future__ import annotations
from typing import Any, Dict, Mapping
from expenses_service.errors import ValidationError


def apply_filters(query, specs: Dict[str, Dict[str, Any]], params: Mapping[str, Any]):
    """Generic filter builder.

    specs: { param_name: { 'op': callable(query, value)->query, 'coerce': callable(optional), 'validate': callable(optional) } }
    Missing or empty params are skipped; a coerce returning None or raising counts as invalid.
    """
    for name, meta in specs.items():
        val = params.get(name)
        if val is None or val == '':
            continue
        if 'coerce' in meta:
            try:
                val = meta['coerce'](val)
            except Exception:
                val = None
            if val is None:
                raise ValidationError(f'{name} invalid')
        if 'validate' in meta and not meta['validate'](val):
            raise ValidationError(f'{name} invalid')
        query = meta['op'](query, val)
    return query


__all__ = ['apply_filters']
