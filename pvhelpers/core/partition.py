# Copyright 2026 pvhelpers developers.
#
# This file is part of pvhelpers.
#
# pvhelpers is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License version 3 as
# published by the Free Software Foundation.
#
# pvhelpers is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with pvhelpers.  If not, see <http://www.gnu.org/licenses/>.

"""Partition records shared between the filesystem plugins and their host"""

# Support levels for one filesystem operation.
NONE = 'none'
EXTERNAL = 'external'

OPERATIONS = (
    'read', 'read_label', 'write_label', 'read_uuid', 'write_uuid',
    'create', 'grow', 'shrink', 'move', 'copy', 'check',
)


class FS(object):
    '''What a filesystem plugin can do with its filesystem type'''

    def __init__(self, filesystem, **support):
        self.filesystem = filesystem
        for operation in OPERATIONS:
            setattr(self, operation, NONE)
        for operation, level in support.items():
            if operation not in OPERATIONS:
                raise ValueError("Unknown operation '%s'" % operation)
            setattr(self, operation, level)

    def __repr__(self):
        return '<FS {} read={}>'.format(self.filesystem, self.read)


class Partition(object):
    def __init__(self, path, sector_size=512, filesystem=None):
        self.path = path
        self.sector_size = sector_size
        self.filesystem = filesystem
        self.sectors_unused = -1
        self.messages = []

    def get_path(self):
        return self.path

    def set_unused(self, sectors):
        self.sectors_unused = sectors


class OperationDetail(object):
    '''Progress record of one operation, nesting sub-operations'''

    def __init__(self, description=''):
        self.description = description
        self.sub_details = []
