#
# chromaslide - Copyright (C) 2026 The chromaslide developers
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#
# pylint: disable=invalid-name
"""
Helpers shared by the value types and the preset layer.
"""
import re

from collections.abc import Sequence

import numpy as np


def camel_to_snake(name: str) -> str:
    """
    Returns a snake_case_name from a camelCaseName

    Handles the DICOM style 'UID' and 'UIDs' suffixes.
    """
    name = re.sub(r'UIDs\b', 'Uids', name)
    name = re.sub(r'UID\b', 'Uid', name)
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def is_sequence(value) -> bool:
    """
    Test if value is an array-like sequence of elements

    Strings and bytes are not considered sequences here. One-dimensional
    numpy arrays are.
    """
    if isinstance(value, np.ndarray):
        return value.ndim == 1
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence)


def element_count(value):
    """
    Get the number of elements in value

    :return: the length, or None if value has no length
    """
    try:
        return len(value)
    except TypeError:
        return None


def copy_elements(value) -> tuple:
    """
    Copy the elements of a sequence into a new tuple. numpy arrays
    are converted to Python scalars.
    """
    if isinstance(value, np.ndarray):
        return tuple(value.tolist())
    return tuple(value)


def normalize_options(options, fields) -> tuple:
    """
    Split an options record into recognized and ignored keys

    Keys may be given in camelCase or snake_case.

    :param options: mapping of option names to values
    :param fields: the snake_case field names which are recognized
    :return: tuple of (dict of recognized options, list of ignored keys)
    """
    recognized = {}
    ignored = []
    for key, value in options.items():
        name = camel_to_snake(key) if isinstance(key, str) else key
        if name in fields:
            recognized[name] = value
        else:
            ignored.append(key)
    return recognized, ignored

