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

"""
This module loads sub-modules into the python runtime so they can be
discovered via the inspect module. In order to prevent flake8 from (rightfully)
telling us these are unused modules, throw a ' # noqa' at the end of each import
so that the warning is suppressed.
"""

from . import CommandLine  # noqa

"""
Import the sub-modules which have decorated subcommands to register with pvinfo.
"""
from . import pvinfo  # noqa
