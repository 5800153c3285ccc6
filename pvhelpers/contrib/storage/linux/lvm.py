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

import threading

from collections import namedtuple

from pvhelpers.core import env
from pvhelpers.core.env import log, DEBUG, ERROR
from pvhelpers.core.host import CommandRunner, cmd_exists
from pvhelpers.core.strutils import attr_bit_set, int_from_leading_digits


##################################################
# LVM2 physical volume attributes.
##################################################

# Field positions in each line of the pvs listing.
PVATTR_PV_NAME = 0
PVATTR_PV_FREE = 1
PVATTR_VG_NAME = 2
PVATTR_VG_BITS = 3
PVATTR_LV_NAME = 4
PVATTR_LV_BITS = 5

# Character positions in vg_attr, e.g. "wz--n-" imported, "wzx-n-" exported,
# "wz-pn-" partial.
VG_BIT_EXPORTED = 2
VG_BIT_PARTIAL = 3
# Character positions in lv_attr, e.g. "-wi---" inactive, "-wi-a-" active.
LV_BIT_ACTIVE = 4

PVS_FIELDS = 'pv_name,pv_free,vg_name,vg_attr,lv_name,lv_attr'

PARTIAL_VG_MESSAGE = (
    "One or more Physical Volumes belonging to the Volume Group is missing.\n")
LOAD_FAILED_MESSAGE = (
    "An error occurred reading LVM2 configuration!\n"
    "Some or all of the details might be missing or incorrect.\n"
    "You should NOT modify any LVM2 PV partitions.\n")


class PvRow(namedtuple('PvRow', ['pv_path', 'pv_free_bytes', 'vg_name',
                                 'vg_attr_bits', 'lv_name', 'lv_attr_bits'])):
    '''One line of the pvs listing: a PV, or a PV and one of its LVs'''
    __slots__ = ()

    @classmethod
    def from_line(cls, line):
        fields = line.strip().split(',')
        fields += [''] * (len(cls._fields) - len(fields))
        return cls(*fields[:len(cls._fields)])


def parse_pvs_output(output):
    '''
    Parse the comma separated pvs listing into PvRows.

    :param output: str: stdout of the pvs command.

    :returns: list: PvRow per non-blank line, in output order.
    '''
    return [PvRow.from_line(line) for line in output.splitlines()
            if line.strip()]


class LVM2PVInfo(object):
    '''
    Cache of LVM2 physical volume attributes.

    The lvm command is run once, on the first query, and every later query
    is answered from memory until refresh() is called. Example rows:

        /dev/sda10,2147483648,,r-----,,
        /dev/sda11,2143289344,GParted-VG1,wz--n-,,
        /dev/sda12,1619001344,GParted-VG2,wz--n-,lvol0,-wi---
        /dev/sda13,830472192,GParted_VG3,wz--n-,lvol0,-wi-a-
        /dev/sda14,1828716544,GParted-VG4,wzx-n-,lvol0,-wi---

    :param refresh: bool: load the cache now rather than on first query.
    :param runner: object with a run(cmd) method returning a CommandResult.
    :param config: mapping of settings, see pvhelpers.core.env.config.
    '''

    def __init__(self, refresh=False, runner=None, config=None):
        if config is None:
            config = env.config()
        self.lvm_command = config['lvm-command']
        self.rescan = config['vgscan']
        if runner is None:
            runner = CommandRunner(timeout=config['command-timeout'])
        self.runner = runner
        self.initialized = False
        self.lvm_found = False
        # (rows, error messages), replaced whole once a load has finished.
        self._cache = ((), ())
        self._lock = threading.Lock()
        if refresh:
            self.refresh()

    def refresh(self):
        '''Probe for lvm and reload the cache'''
        with self._lock:
            self._detect_tool()
            self._cache = self._load_cache()
            self.initialized = True

    @property
    def rows(self):
        self._ensure_loaded()
        return list(self._cache[0])

    @property
    def error_messages(self):
        '''Whole cache errors from the last load'''
        return list(self._cache[1])

    def is_supported(self):
        '''Report whether the lvm command is available'''
        if not self.initialized:
            self._detect_tool()
        return self.lvm_found

    def get_vg_name(self, path):
        '''
        Name of the volume group a PV belongs to.

        :param path: str: Full path of the PV.

        :returns: str: Volume group name, empty if the PV is in no VG or
                       is not known.
        '''
        self._ensure_loaded()
        row = _find_row(self._cache[0], path)
        return row.vg_name if row else ''

    def get_free_bytes(self, path):
        '''Number of free bytes in the PV, or -1 if unknown'''
        self._ensure_loaded()
        row = _find_row(self._cache[0], path)
        if row is None or not row.pv_free_bytes:
            return -1
        free_bytes = int_from_leading_digits(row.pv_free_bytes)
        if free_bytes is None or free_bytes < 0:
            return -1
        return free_bytes

    def has_active_lvs(self, path):
        '''Report if any LVs are active in the VG stored in the PV'''
        self._ensure_loaded()
        rows = self._cache[0]
        row = _find_row(rows, path)
        if row is None or not row.vg_name:
            # PV not yet included in any VG
            return False
        for other in rows:
            if (other.vg_name == row.vg_name and
                    attr_bit_set(other.lv_attr_bits, LV_BIT_ACTIVE)):
                return True
        return False

    def is_vg_exported(self, vg_name):
        '''Report if the VG is exported'''
        self._ensure_loaded()
        for row in self._cache[0]:
            if (row.vg_name == vg_name and
                    attr_bit_set(row.vg_attr_bits, VG_BIT_EXPORTED)):
                return True
        return False

    def get_error_messages(self, path):
        '''
        Diagnostics to show against a PV.

        Errors from loading the cache are returned whichever PV is asked
        about. Otherwise the PV is checked for belonging to a partial VG.

        :param path: str: Full path of the PV.

        :returns: list: Message strings, possibly empty.
        '''
        self._ensure_loaded()
        rows, errors = self._cache
        if errors:
            return list(errors)

        row = _find_row(rows, path)
        if row and attr_bit_set(row.vg_attr_bits, VG_BIT_PARTIAL):
            return [PARTIAL_VG_MESSAGE]
        return []

    def _ensure_loaded(self):
        if self.initialized:
            return
        with self._lock:
            if not self.initialized:
                self._detect_tool()
                self._cache = self._load_cache()
                self.initialized = True

    def _detect_tool(self):
        self.lvm_found = cmd_exists(self.lvm_command)

    def _load_cache(self):
        '''Run lvm and return the new (rows, error messages) pair'''
        if not self.lvm_found:
            log('{} not found, LVM2 PV details unavailable'.format(
                self.lvm_command), level=DEBUG)
            return (), ()

        if self.rescan:
            # The OS is expected to fully enable LVM, this scan only picks
            # up changes made without the lvm commands.
            result = self.runner.run([self.lvm_command, 'vgscan'])
            if not result.success:
                log('Ignoring failed {}: {}'.format(
                    result.command, result.stderr.strip()), level=DEBUG)

        cmd = [self.lvm_command, 'pvs',
               '--config', 'log{command_names=0}',
               '--nosuffix', '--noheadings',
               '--separator', ',', '--units', 'b',
               '-o', PVS_FIELDS]
        result = self.runner.run(cmd)
        if result.success:
            rows = tuple(parse_pvs_output(result.stdout))
            log('Loaded {} LVM2 PV rows'.format(len(rows)), level=DEBUG)
            return rows, ()

        log('Failed reading LVM2 PV details with {}'.format(result.command),
            level=ERROR)
        errors = [result.command]
        if result.stdout:
            errors.append(result.stdout)
        if result.stderr:
            errors.append(result.stderr)
        errors.append(LOAD_FAILED_MESSAGE)
        return (), tuple(errors)


def _find_row(rows, path):
    # The first matching row wins; later rows only add LVs.
    for row in rows:
        if row.pv_path == path:
            return row
    return None


_pv_info = None
_pv_info_lock = threading.Lock()


def pv_info(refresh=False):
    '''
    Shared LVM2PVInfo for the current view of the system.

    :param refresh: bool: replace the shared cache with a freshly loaded one.
    '''
    global _pv_info
    with _pv_info_lock:
        if _pv_info is None or refresh:
            _pv_info = LVM2PVInfo(refresh=refresh)
        return _pv_info
