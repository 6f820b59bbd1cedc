#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for ubb2html.

Options are frozen dataclasses; use ``create_updated`` to derive variations.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ubb2html.exceptions import InvalidOptionsError
from ubb2html.options.base import CloneFrozenMixin
from ubb2html.options.ubb import ParseOptions, normalize_tag_name


def coerce_options(options: ParseOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> ParseOptions:
    """Resolve the options argument of the public API into a ParseOptions.

    Parameters
    ----------
    options : ParseOptions, Mapping or None
        Options instance, legacy option mapping, or None for defaults
    **kwargs : Any
        Individual option overrides (legacy ``class_<tag>`` keys allowed)

    Returns
    -------
    ParseOptions
        Resolved options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is neither a ParseOptions, a mapping nor None

    """
    if options is None:
        resolved = ParseOptions()
    elif isinstance(options, ParseOptions):
        resolved = options
    elif isinstance(options, Mapping):
        resolved = ParseOptions.from_mapping(options)
    else:
        raise InvalidOptionsError(expected_type=ParseOptions, received_type=type(options))

    if kwargs:
        base = {
            "convert_newlines": resolved.convert_newlines,
            "protect_email": resolved.protect_email,
            "class_overrides": dict(resolved.class_overrides),
            "suppress_block_newlines": resolved.suppress_block_newlines,
            "max_depth": resolved.max_depth,
            "max_input_length": resolved.max_input_length,
            "max_iterations": resolved.max_iterations,
            "strict_mode": resolved.strict_mode,
            "extra": dict(resolved.extra),
        }
        resolved = ParseOptions.from_mapping({**base, **kwargs})

    return resolved


__all__ = [
    "CloneFrozenMixin",
    "ParseOptions",
    "coerce_options",
    "normalize_tag_name",
]
