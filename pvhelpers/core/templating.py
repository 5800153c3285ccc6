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

import os

from jinja2 import FileSystemLoader, Environment, exceptions

from pvhelpers.core import env

TEMPLATES_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'templates')


def render(source, context, templates_dir=None, template_loader=None):
    """
    Render a template.

    The `source` path, if not absolute, is relative to the `templates_dir`.

    If omitted, `templates_dir` defaults to the templates shipped with
    pvhelpers.
    """
    if template_loader:
        template_env = Environment(loader=template_loader,
                                   keep_trailing_newline=True)
    else:
        if templates_dir is None:
            templates_dir = TEMPLATES_DIR
        template_env = Environment(loader=FileSystemLoader(templates_dir),
                                   keep_trailing_newline=True)
    try:
        template = template_env.get_template(source)
    except exceptions.TemplateNotFound as e:
        env.log('Could not load template %s from %s.' %
                (source, templates_dir),
                level=env.ERROR)
        raise e
    return template.render(context)
