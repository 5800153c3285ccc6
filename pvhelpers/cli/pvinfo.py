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

from . import cmdline
from pvhelpers.contrib.storage.linux import lvm
from pvhelpers.core import templating


@cmdline.subcommand()
@cmdline.test_command
def supported():
    "Exit 0 when the lvm command is available"
    return lvm.pv_info().is_supported()


@cmdline.subcommand('vg-name')
def vg_name(path):
    "Volume group the physical volume belongs to"
    return lvm.pv_info().get_vg_name(path)


@cmdline.subcommand('free-bytes')
def free_bytes(path):
    "Free bytes on the physical volume, -1 if unknown"
    return lvm.pv_info().get_free_bytes(path)


@cmdline.subcommand('active-lvs')
@cmdline.test_command
def active_lvs(path):
    "Exit 0 when the physical volume's volume group has active LVs"
    return lvm.pv_info().has_active_lvs(path)


@cmdline.subcommand('vg-exported')
@cmdline.test_command
def vg_exported(vg):
    "Exit 0 when the volume group is exported"
    return lvm.pv_info().is_vg_exported(vg)


@cmdline.subcommand()
def messages(path):
    "Diagnostics for the physical volume"
    return lvm.pv_info().get_error_messages(path)


@cmdline.subcommand()
def pvs():
    "List every physical volume row"
    return [list(row) for row in lvm.pv_info().rows]


@cmdline.subcommand()
def report(path):
    "Summary of one physical volume"
    info = lvm.pv_info()
    vg = info.get_vg_name(path)
    context = {
        'path': path,
        'vg_name': vg,
        'exported': info.is_vg_exported(vg) if vg else False,
        'active_lvs': info.has_active_lvs(path),
        'free_bytes': info.get_free_bytes(path),
        'logical_volumes': [row for row in info.rows
                            if row.pv_path == path and row.lv_name],
        'messages': info.get_error_messages(path),
    }
    return templating.render('pv_report.txt', context)
