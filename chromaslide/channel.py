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
Channel and blending value types for a multi-channel slide viewer.

Both types validate everything in their constructor and are read-only
afterwards. A compositor pairs a BlendingInformation with a Channel by
comparing their optical path identifiers.
"""

# pylint: disable=invalid-name, too-many-arguments

from traitlets import HasTraits, Undefined

from chromaslide.errors import MissingFieldError
from chromaslide.log import Log
from chromaslide.traits import FixedLengthTuple, WriteOnceAny, get_args_dict
from chromaslide.util import normalize_options


def _repr(obj) -> str:
    args = ', '.join('%s=%r' % (k, v) for k, v in get_args_dict(obj).items())
    return '%s(%s)' % (obj.__class__.__name__, args)


class Channel(HasTraits):
    """
    A channel.

    A channel is a monochrome image acquired through a specific optical
    path, for example a fluorescence illumination wavelength paired with
    a filter set and a fluorophore-labeled antibody. Multiple channels
    may be acquired from one specimen, simultaneously or sequentially.

    The channel is identified by its optical path identifier, which is
    unique within an acquisition. The study, series and SOP instance UIDs
    locate the VL Whole Slide Microscopy Image instances holding the
    channel's pixel data.

    All four fields are required. Only a field that is not passed at all
    counts as missing; None, empty strings and empty lists are stored
    as given.
    """

    FIELDS = ('optical_path_identifier', 'study_instance_uid',
              'series_instance_uid', 'sop_instance_uids')

    _MESSAGES = {
        'optical_path_identifier': 'Optical Path Identifier is required.',
        'study_instance_uid': 'Study Instance UID is required.',
        'series_instance_uid': 'Series Instance UID is required.',
        'sop_instance_uids': 'SOP Instance UIDs are required.',
    }

    optical_path_identifier = WriteOnceAny(read_only=True)
    study_instance_uid = WriteOnceAny(read_only=True)
    series_instance_uid = WriteOnceAny(read_only=True)
    sop_instance_uids = WriteOnceAny(read_only=True)


    def __init__(self, *, optical_path_identifier=Undefined, study_instance_uid=Undefined,
                 series_instance_uid=Undefined, sop_instance_uids=Undefined):
        super(Channel, self).__init__()

        values = (optical_path_identifier, study_instance_uid,
                  series_instance_uid, sop_instance_uids)

        for name, value in zip(Channel.FIELDS, values):
            if value is Undefined:
                raise MissingFieldError(name, Channel._MESSAGES[name])

        for name, value in zip(Channel.FIELDS, values):
            self.set_trait(name, value)

        Log.get('chromaslide.channel').debug('Created %r', self)


    @classmethod
    def from_options(cls, options) -> 'Channel':
        """
        Create a Channel from an options record

        Keys may use either camelCase (opticalPathIdentifier,
        studyInstanceUID, seriesInstanceUID, sopInstanceUIDs) or
        snake_case. Unrecognized keys are ignored.

        :param options: mapping of field names to values
        :return: the new Channel
        """
        kwargs, ignored = normalize_options(options, cls.FIELDS)
        if ignored:
            Log.get('chromaslide.channel').debug('Ignoring unknown channel options: %s', ignored)
        return cls(**kwargs)


    def __repr__(self):
        return _repr(self)



class BlendingInformation(HasTraits):
    """
    Information for blending a channel with other channels during display.

    Holds the presentation parameters which determine how a channel is
    composited with other channels into a color image:

    - color: RGB triplet, values in range [0, 255]
    - opacity: in range [0, 1]
    - threshold_values: lower and upper clipping thresholds in range [0, 1]
    - limit_values: lower and upper windowing limits in range [0, 2^bits]
    - visible: whether the channel is shown

    color, threshold_values and limit_values are required and are copied
    into tuples, so later changes to the caller's lists have no effect.
    The remaining fields are stored as given without any checks.

    Instances never change; use evolve() to derive new parameters.
    """

    FIELDS = ('optical_path_identifier', 'color', 'opacity',
              'threshold_values', 'limit_values', 'visible')

    optical_path_identifier = WriteOnceAny(read_only=True)
    color = FixedLengthTuple(3, 'Color', 'An RGB color triplet must be provided.',
                             read_only=True)
    opacity = WriteOnceAny(read_only=True)
    threshold_values = FixedLengthTuple(2, 'Threshold values',
                                        'Two threshold values must be provided.',
                                        read_only=True)

    # Only the element count is checked for limit values: any sized
    # value of length two is accepted.
    limit_values = FixedLengthTuple(2, 'Limit values', 'Two limit values must be provided.',
                                    require_sequence=False, read_only=True)
    visible = WriteOnceAny(read_only=True)


    def __init__(self, *, optical_path_identifier=None, color=None, opacity=None,
                 threshold_values=None, limit_values=None, visible=None):
        super(BlendingInformation, self).__init__()

        self.set_trait('optical_path_identifier', optical_path_identifier)

        self._set_required('color', color, 'Color is required.')

        self.set_trait('opacity', opacity)

        self._set_required('threshold_values', threshold_values,
                           'Threshold values are required.')

        self._set_required('limit_values', limit_values, 'Limit values are required.')

        self.set_trait('visible', visible)

        Log.get('chromaslide.channel').debug('Created %r', self)


    def _set_required(self, name, value, message):
        if value is None or value is Undefined:
            raise MissingFieldError(name, message)
        self.set_trait(name, value)


    @classmethod
    def from_options(cls, options) -> 'BlendingInformation':
        """
        Create a BlendingInformation from an options record

        Keys may use either camelCase (opticalPathIdentifier, color,
        opacity, thresholdValues, limitValues, visible) or snake_case.
        Unrecognized keys are ignored.

        :param options: mapping of field names to values
        :return: the new BlendingInformation
        """
        kwargs, ignored = normalize_options(options, cls.FIELDS)
        if ignored:
            Log.get('chromaslide.channel').debug('Ignoring unknown blending options: %s',
                                                 ignored)
        return cls(**kwargs)


    def evolve(self, **changes) -> 'BlendingInformation':
        """
        Create a new instance with some fields replaced

        The result is validated like any newly constructed instance.
        This instance is left untouched.

        :param changes: new values, keyed by field name
        :return: the new BlendingInformation
        """
        unknown = set(changes) - set(self.FIELDS)
        if unknown:
            raise TypeError('Unknown blending fields: %s' % ', '.join(sorted(unknown)))

        kwargs = self.as_dict()
        kwargs.update(changes)
        return self.__class__(**kwargs)


    def as_dict(self) -> dict:
        """
        Get all fields as a plain dict, with sequences as lists
        """
        out = get_args_dict(self)
        for name in ('color', 'threshold_values', 'limit_values'):
            out[name] = list(out[name])
        return out


    def __repr__(self):
        return _repr(self)
