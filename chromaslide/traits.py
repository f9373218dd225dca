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

# pylint: disable=protected-access, invalid-name

from traitlets import Any, HasTraits, TraitType

from chromaslide.errors import ShapeError
from chromaslide.util import copy_elements, element_count, is_sequence



class WriteOnceMixin(object):
    """
    Mixin for traits which cannot be changed after an initial
    value has been set.

    Writes are tracked per instance, so a trait which was set to
    None (or to its default) is locked as well. A write which fails
    validation does not count.
    """
    write_once = True

    def set(self, obj, value):
        written = obj.__dict__.setdefault('_written_traits', set())
        if self.name in written:
            self.error(obj, value)

        super().set(obj, value)
        written.add(self.name)


class WriteOnceAny(WriteOnceMixin, Any):
    """
    Trait which accepts any value exactly once and stores it as given
    """
    pass


class FixedLengthTuple(WriteOnceMixin, TraitType):
    """
    A trait holding a copy of a fixed-length sequence as a tuple.

    Raises ShapeError (instead of the generic TraitError) when the
    value is not a sequence or has the wrong number of elements.

    :param length: required number of elements
    :param label: field name used in error messages, e.g. 'Color'
    :param count_message: message used when the element count is wrong
    :param require_sequence: if False, any sized value is accepted and
        only the element count is checked
    """
    info_text = 'a fixed-length sequence'
    default_value = None
    allow_none = True

    def __init__(self, length: int, label: str, count_message: str=None,
                 require_sequence: bool=True, **kwargs):
        super(FixedLengthTuple, self).__init__(**kwargs)
        self.length = length
        self.label = label
        self.require_sequence = require_sequence
        if count_message is None:
            count_message = '%s must contain exactly %d values.' % (label, length)
        self.count_message = count_message


    def validate(self, obj, value):
        if self.require_sequence and not is_sequence(value):
            raise ShapeError(self.name, '%s must be provided as a sequence.' % self.label)

        if element_count(value) != self.length:
            raise ShapeError(self.name, self.count_message)

        return copy_elements(value)


def get_args_dict(obj: HasTraits) -> dict:
    """
    Return a dict of the trait values of an object. Objects which
    declare a FIELDS tuple get their values in that order.

    :param obj: an instance of HasTraits
    :return: dict of arguments
    """
    fields = getattr(obj, 'FIELDS', None) or sorted(obj.trait_names())
    return {k: obj._trait_values[k] for k in fields if k in obj._trait_values}
