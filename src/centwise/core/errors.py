#!/usr/bin/env python3
"""Exceptions raised by the money value type."""

from typing import Any


class InvalidInputError(ValueError):
    """
    Raised when an amount of an unsupported type is parsed with
    ``error_on_invalid`` enabled.

    Malformed numeric strings never raise this; they degrade to zero.
    """

    def __init__(self, value: Any):
        super().__init__(f"Invalid Input: cannot parse {type(value).__name__} {value!r} as an amount")
        self.value = value
