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
"""
Exceptions raised while constructing channel value objects.
"""
from traitlets import TraitError


class ValidationError(TraitError):
    """
    Base class for construction-time validation failures

    :param field: snake_case name of the offending field
    :param message: human readable description
    """
    def __init__(self, field: str, message: str):
        super(ValidationError, self).__init__(message)
        self.field = field


class MissingFieldError(ValidationError):
    """
    A required field was not supplied
    """
    pass


class ShapeError(ValidationError):
    """
    A field has the wrong container type or the wrong number of elements
    """
    pass
