"""
Parameter Defaults
==================

Merge user-supplied option dictionaries into function defaults.

Every public GoesMapPy function takes an optional ``params`` dictionary.
Values given by the caller replace the defaults unless they are falsy
(``None``, ``0``, ``''``, ``False``, empty containers), in which case
the default is kept.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

from typing import Any, Dict, Optional


def update_params(update: Optional[Dict[str, Any]], preset: Dict[str, Any]) -> Dict[str, Any]:
    """
    Update default parameters with user-defined parameters.

    Parameters
    ----------
    update : dict or None
        User-defined parameters.
    preset : dict
        Default parameters. Left untouched.

    Returns
    -------
    dict
        A new dictionary holding the merged parameters. Keys present only
        in ``update`` are carried over; a falsy value for such a key
        becomes ``None``.

    Examples
    --------
    >>> update_params({'width': 3, 'color': ''}, {'width': 1, 'color': '000000'})
    {'width': 3, 'color': '000000'}
    """
    merged = dict(preset)
    if update:
        for param, value in update.items():
            merged[param] = value or preset.get(param)
    return merged
