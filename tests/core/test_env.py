import io
import logging
import os
import tempfile
from unittest import TestCase

import yaml
from mock import patch

from pvhelpers.core import env


class LogTest(TestCase):
    @patch('logging.Logger.log')
    def test_logs_messages_with_default_level(self, mock_log):
        env.log('foo')
        mock_log.assert_called_with(logging.INFO, 'foo')

    @patch('logging.Logger.log')
    def test_logs_messages_object(self, mock_log):
        env.log(object)
        mock_log.assert_called_with(logging.INFO, repr(object))

    @patch('logging.Logger.log')
    def test_logs_messages_with_alternative_levels(self, mock_log):
        alternative_levels = {
            env.CRITICAL: logging.CRITICAL,
            env.ERROR: logging.ERROR,
            env.WARNING: logging.WARNING,
            env.DEBUG: logging.DEBUG,
        }

        for level, value in alternative_levels.items():
            env.log('foo', level=level)
            mock_log.assert_called_with(value, 'foo')

    def test_setup_logging(self):
        stream = io.StringIO()
        logger = logging.getLogger(env.LOGGER_NAME)
        saved_handlers, saved_level = logger.handlers[:], logger.level
        logger.handlers = []
        try:
            env.setup_logging('debug', stream=stream)
            env.log('hello', level=env.DEBUG)
            self.assertEqual(logger.level, logging.DEBUG)
            self.assertIn('DEBUG hello', stream.getvalue())
        finally:
            logger.handlers = saved_handlers
            logger.setLevel(saved_level)

    def test_setup_logging_unknown_level(self):
        self.assertRaises(ValueError, env.setup_logging, 'chatty')


class SerializableTest(TestCase):
    def test_gets_attribute_from_inner_object_as_dict(self):
        wrapped = env.Serializable({'foo': 'bar'})
        self.assertEqual(wrapped.foo, 'bar')
        self.assertEqual(wrapped['foo'], 'bar')

    def test_raises_error_from_inner_object_as_dict(self):
        wrapped = env.Serializable({'foo': 'bar'})
        self.assertRaises(AttributeError, getattr, wrapped, 'baz')


class ConfigTest(TestCase):
    def setUp(self):
        super(ConfigTest, self).setUp()
        patcher = patch.dict(os.environ, {}, clear=False)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop(env.CONFIG_ENV, None)
        default_path = patch.object(env, 'DEFAULT_CONFIG_PATH',
                                    '/nonexistent/pvhelpers.yaml')
        default_path.start()
        self.addCleanup(default_path.stop)

    def write_config(self, text):
        fd, path = tempfile.mkstemp(suffix='.yaml')
        with os.fdopen(fd, 'w') as f:
            f.write(text)
        self.addCleanup(os.unlink, path)
        return path

    def test_defaults(self):
        config = env.config()
        self.assertEqual(config['lvm-command'], 'lvm')
        self.assertIsNone(config['command-timeout'])
        self.assertTrue(config['vgscan'])
        self.assertEqual(config['log-level'], env.INFO)

    def test_scope(self):
        self.assertEqual(env.config('lvm-command'), 'lvm')
        self.assertIsNone(env.config('no-such-key'))

    def test_file_from_environment(self):
        path = self.write_config(
            "lvm-command: /sbin/lvm\ncommand-timeout: 30\n"
            "vgscan: 'off'\nlog-level: debug\n")
        os.environ[env.CONFIG_ENV] = path
        config = env.config()
        self.assertEqual(config['lvm-command'], '/sbin/lvm')
        self.assertEqual(config['command-timeout'], 30.0)
        self.assertFalse(config['vgscan'])
        self.assertEqual(config['log-level'], env.DEBUG)

    def test_explicit_path_wins(self):
        os.environ[env.CONFIG_ENV] = '/nonexistent/config.yaml'
        path = self.write_config("lvm-command: lvm2\n")
        self.assertEqual(env.config('lvm-command', path=path), 'lvm2')

    def test_default_path_used_when_present(self):
        path = self.write_config("lvm-command: lvm2\n")
        with patch.object(env, 'DEFAULT_CONFIG_PATH', path):
            self.assertEqual(env.config_path(), path)
            self.assertEqual(env.config('lvm-command'), 'lvm2')

    def test_no_config_file(self):
        self.assertIsNone(env.config_path())

    def test_empty_file_gives_defaults(self):
        path = self.write_config("")
        self.assertEqual(env.config('lvm-command', path=path), 'lvm')

    @patch.object(env, 'log')
    def test_missing_file_is_logged_and_raised(self, log):
        self.assertRaises(OSError, env.config,
                          path='/nonexistent/config.yaml')
        self.assertEqual(log.call_args[1], {'level': env.ERROR})

    @patch.object(env, 'log')
    def test_non_mapping_rejected(self, log):
        path = self.write_config("- just\n- a list\n")
        self.assertRaises(ValueError, env.config, path=path)

    @patch.object(env, 'log')
    def test_malformed_yaml_rejected(self, log):
        path = self.write_config("lvm-command: [unclosed\n")
        self.assertRaises(yaml.YAMLError, env.config, path=path)
        self.assertTrue(log.called)

    @patch.object(env, 'log')
    def test_bad_timeout_rejected(self, log):
        path = self.write_config("command-timeout: -3\n")
        self.assertRaises(ValueError, env.config, path=path)

    @patch.object(env, 'log')
    def test_bad_vgscan_rejected(self, log):
        path = self.write_config("vgscan: maybe\n")
        self.assertRaises(ValueError, env.config, path=path)
