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

from pvhelpers.contrib.storage.linux import lvm
from pvhelpers.core.partition import FS, EXTERNAL, NONE
from pvhelpers.core.strutils import round_half_up

FILESYSTEM = 'lvm2 pv'


class LVM2PV(object):
    '''
    Filesystem plugin for LVM2 physical volumes.

    Only reading is supported; every modifying operation succeeds without
    touching the PV.

    :param pv_info: LVM2PVInfo to consult, the shared cache by default.
    '''

    def __init__(self, pv_info=None):
        self._pv_info = pv_info

    @property
    def pv_info(self):
        if self._pv_info is None:
            return lvm.pv_info()
        return self._pv_info

    def get_filesystem_support(self):
        fs = FS(FILESYSTEM)
        fs.read = EXTERNAL if self.pv_info.is_supported() else NONE
        return fs

    def set_used_sectors(self, partition):
        pv_info = self.pv_info
        free_bytes = pv_info.get_free_bytes(partition.get_path())
        if free_bytes >= 0:
            partition.set_unused(
                round_half_up(float(free_bytes) / partition.sector_size))

        partition.messages.extend(
            pv_info.get_error_messages(partition.get_path()))

    def read_label(self, partition):
        return

    def write_label(self, partition, operationdetail):
        return True

    def read_uuid(self, partition):
        return

    def write_uuid(self, partition, operationdetail):
        return True

    def create(self, new_partition, operationdetail):
        return True

    def resize(self, partition_new, operationdetail, fill_partition):
        return True

    def move(self, partition_new, partition_old, operationdetail):
        return True

    def copy(self, src_part_path, dest_part_path, operationdetail):
        return True

    def check_repair(self, partition, operationdetail):
        return True
