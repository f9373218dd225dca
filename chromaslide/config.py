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

# pylint: disable=protected-access
"""
Blending presets stored as YAML.

A preset file holds default BlendingInformation for a set of optical
paths. The viewer looks up a channel's preset by optical path identifier.
"""
import os
import tempfile

from datetime import datetime
from typing import Iterable

from frozendict import frozendict
from ruamel.yaml import YAML
from wrapt import synchronized

from chromaslide.channel import BlendingInformation, Channel
from chromaslide.log import Log


class BlendingPresets(object):
    """
    An immutable set of BlendingInformation, keyed by optical path
    identifier.

    Use load_yaml() to read a preset file; loaded files are cached
    until they are saved again.
    """

    __yaml_cache = {}

    def __init__(self, presets: Iterable[BlendingInformation]=()):
        mapping = {}
        for info in presets:
            key = info.optical_path_identifier
            if key in mapping:
                raise ValueError('Duplicate preset for optical path: %s' % key)
            mapping[key] = info
        self._presets = frozendict(mapping)
        self._logger = Log.get('chromaslide.config')


    @property
    def presets(self) -> frozendict:
        """
        Mapping of optical path identifier to BlendingInformation
        """
        return self._presets


    def __len__(self):
        return len(self._presets)


    def __contains__(self, optical_path_identifier):
        return optical_path_identifier in self._presets


    def __iter__(self):
        return iter(self._presets.values())


    def get(self, optical_path_identifier, default=None) -> BlendingInformation:
        """
        Get the preset for an optical path

        :param optical_path_identifier: the optical path identifier
        :param default: returned if there is no preset
        :return: the BlendingInformation or default
        """
        return self._presets.get(optical_path_identifier, default)


    def for_channel(self, channel: Channel, default=None) -> BlendingInformation:
        """
        Get the preset matching a channel's optical path identifier
        """
        return self.get(channel.optical_path_identifier, default)


    def with_preset(self, info: BlendingInformation) -> 'BlendingPresets':
        """
        Return a new preset set with info added, replacing any preset
        for the same optical path.
        """
        merged = dict(self._presets)
        merged[info.optical_path_identifier] = info
        return self.__class__(merged.values())


    @classmethod
    def from_dict(cls, data) -> 'BlendingPresets':
        """
        Build presets from parsed YAML data

        :param data: mapping with a 'presets' list of option records
        :return: the presets
        """
        if not isinstance(data, dict):
            raise ValueError('Preset data must be a mapping (was: %s)' % type(data).__name__)

        entries = data.get('presets')
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise ValueError('Presets must be provided as a list')

        for entry in entries:
            if not isinstance(entry, dict):
                raise ValueError('Preset entries must be mappings (was: %s)'
                                 % type(entry).__name__)

        return cls([BlendingInformation.from_options(entry) for entry in entries])


    def as_dict(self) -> dict:
        """
        Get a plain representation suitable for YAML serialization
        """
        return {'presets': [info.as_dict() for info in self._presets.values()]}


    @synchronized
    @classmethod
    def load_yaml(cls, filename: str) -> 'BlendingPresets':
        """
        Load presets from a YAML file.

        :param filename: The filename to open.
        :return: The presets
        """
        if filename in cls.__yaml_cache:
            return cls.__yaml_cache[filename]

        with open(filename, 'r') as yaml_file:
            data = YAML(typ='safe').load(yaml_file)

        if data is None:
            data = {}

        presets = cls.from_dict(data)
        cls.__yaml_cache[filename] = presets

        Log.get('chromaslide.config').debug('Loaded %d presets from %s',
                                            len(presets), filename)
        return presets


    def save_yaml(self, filename: str):
        """
        Serialize the presets to a file.

        The file is written to a temporary file first and then
        renamed over the target.

        :param filename: Target filename
        """
        yaml = YAML(typ='safe')
        yaml.default_flow_style = None

        with tempfile.NamedTemporaryFile('w', dir=os.path.dirname(os.path.abspath(filename)),
                                         delete=False) as temp:
            tempname = temp.name
            try:
                temp.write('#\n')
                temp.write('#  chromaslide blending presets\n')
                temp.write('#\n')
                temp.write('#  Updated on: %s\n' % datetime.now().isoformat(' '))
                temp.write('#\n')
                yaml.dump(self.as_dict(), temp)
            except Exception:
                temp.close()
                os.unlink(tempname)
                raise
        os.replace(tempname, filename)

        self.__class__._invalidate(filename)
        self._logger.info('Saved %d presets to %s', len(self), filename)


    @synchronized
    @classmethod
    def _invalidate(cls, filename: str):
        cls.__yaml_cache.pop(filename, None)
