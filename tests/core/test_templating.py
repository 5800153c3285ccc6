import os
import unittest

import jinja2
import mock

from pvhelpers.core import templating


TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), 'templates')


class TestTemplating(unittest.TestCase):
    def test_render(self):
        context = {'path': '/dev/sda10', 'free': 2147483648}
        content = templating.render('test.conf', context,
                                    templates_dir=TEMPLATES_DIR)
        self.assertEqual(content, 'device: /dev/sda10\nfree: 2147483648\n')

    def test_render_from_string(self):
        loader = jinja2.DictLoader({'t': 'VG {{ vg }}'})
        self.assertEqual(templating.render('t', {'vg': 'vg0'},
                                           template_loader=loader),
                         'VG vg0')

    @mock.patch.object(templating.env, 'log')
    def test_render_missing_template(self, log):
        with self.assertRaises(jinja2.exceptions.TemplateNotFound):
            templating.render('missing.conf', {},
                              templates_dir=TEMPLATES_DIR)
        log.assert_called_once_with(
            'Could not load template missing.conf from %s.' % TEMPLATES_DIR,
            level=templating.env.ERROR)

    def test_render_packaged_pv_report(self):
        context = {
            'path': '/dev/sda10',
            'vg_name': '',
            'exported': False,
            'active_lvs': False,
            'free_bytes': 2147483648,
            'logical_volumes': [],
            'messages': [],
        }
        self.assertEqual(templating.render('pv_report.txt', context),
                         'Physical volume: /dev/sda10\n'
                         'Volume group:    (none)\n'
                         'Free bytes:      2147483648\n')
