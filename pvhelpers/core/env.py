"Logging and configuration for the pvhelpers environment"
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
import logging
import yaml

from collections import UserDict

from pvhelpers.core.strutils import bool_from_string

CRITICAL = "CRITICAL"
ERROR = "ERROR"
WARNING = "WARNING"
INFO = "INFO"
DEBUG = "DEBUG"
MARKER = object()

LOGGER_NAME = 'pvhelpers'
CONFIG_ENV = 'PVHELPERS_CONFIG'
DEFAULT_CONFIG_PATH = '/etc/pvhelpers/config.yaml'

DEFAULTS = {
    'lvm-command': 'lvm',
    'command-timeout': None,
    'vgscan': True,
    'log-level': INFO,
}

_LEVELS = {
    CRITICAL: logging.CRITICAL,
    ERROR: logging.ERROR,
    WARNING: logging.WARNING,
    INFO: logging.INFO,
    DEBUG: logging.DEBUG,
}


def log(message, level=None):
    "Write a message to the pvhelpers log"
    if not isinstance(message, str):
        message = repr(message)
    logger = logging.getLogger(LOGGER_NAME)
    logger.log(_LEVELS.get(level or INFO, logging.INFO), message)


def setup_logging(level=None, stream=None):
    """Attach a stream handler to the pvhelpers logger.

    Called once by command line entry points; library callers are expected
    to configure logging themselves.
    """
    level = (level or INFO).upper()
    if level not in _LEVELS:
        raise ValueError("Unknown log level '%s'" % level)
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
        logger.addHandler(handler)
    logger.setLevel(_LEVELS[level])
    return logger


class Serializable(UserDict):
    "Wrapper giving attribute access to a mapping"

    def __init__(self, obj):
        # wrap the object
        UserDict.__init__(self)
        self.data = obj

    def __getattr__(self, attr):
        # See if this object has attribute.
        if attr == "data":
            return self.__dict__[attr]
        # Check for attribute in wrapped object.
        got = getattr(self.data, attr, MARKER)
        if got is not MARKER:
            return got
        # Proxy to the wrapped object via dict interface.
        try:
            return self.data[attr]
        except KeyError:
            raise AttributeError(attr)


def config_path():
    "Location of the configuration file, or None when there is none"
    path = os.environ.get(CONFIG_ENV)
    if path:
        return path
    if os.path.exists(DEFAULT_CONFIG_PATH):
        return DEFAULT_CONFIG_PATH
    return None


def _validate(config_data):
    timeout = config_data['command-timeout']
    if timeout is not None:
        timeout = float(timeout)
        if timeout <= 0:
            raise ValueError("command-timeout must be positive, got %s"
                             % timeout)
        config_data['command-timeout'] = timeout
    if isinstance(config_data['vgscan'], str):
        config_data['vgscan'] = bool_from_string(config_data['vgscan'])
    if not config_data['lvm-command']:
        raise ValueError("lvm-command must not be empty")
    config_data['log-level'] = str(config_data['log-level']).upper()
    return config_data


def config(scope=None, path=None):
    """pvhelpers configuration

    Values come from a YAML mapping found at ``path``, the file named by
    ``$PVHELPERS_CONFIG`` or ``/etc/pvhelpers/config.yaml``, layered over
    ``DEFAULTS``. With ``scope`` the single value is returned.
    """
    config_data = dict(DEFAULTS)
    path = path or config_path()
    if path is not None:
        try:
            with open(path) as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError("%s does not hold a mapping" % path)
            config_data.update(loaded)
            _validate(config_data)
        except (ValueError, OSError, yaml.YAMLError) as err:
            log(str(err), level=ERROR)
            raise
    if scope is not None:
        return config_data.get(scope)
    return Serializable(config_data)
