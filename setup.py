# Copyright 2026 pvhelpers developers.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os

from setuptools import setup, find_packages


here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'VERSION')) as v:
    VERSION = v.read().strip()
with open(os.path.join(here, 'README.rst')) as r:
    README = r.read()


SETUP = {
    'name': "pvhelpers",
    'version': VERSION,
    'author': "pvhelpers developers",
    'install_requires': [
        'PyYAML',
        'Jinja2',
    ],
    'extras_require': {
        'test': [
            'mock',
            'pytest',
        ],
    },
    'packages': find_packages(exclude=('tests', 'tests.*')),
    'package_data': {
        'pvhelpers': ['templates/*.txt'],
    },
    'scripts': [
        "bin/pvinfo",
    ],
    'python_requires': '>=3.6',
    'license': "LGPL-3.0",
    'long_description': README,
    'description': 'Cached LVM2 physical volume details for partition editors',
}

if __name__ == '__main__':
    setup(**SETUP)
