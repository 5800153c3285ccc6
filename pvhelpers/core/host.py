"""Tools for running external commands on the host"""
# Copyright 2026 pvhelpers developers.
#
# Authors:
#  pvhelpers developers

import shlex
import shutil
import subprocess

from collections import namedtuple

from pvhelpers.core.env import log, DEBUG, ERROR

# Shell convention for "command not found".
NOT_FOUND_STATUS = 127
TIMEOUT_STATUS = -1


class CommandResult(namedtuple('CommandResult',
                               ['command', 'stdout', 'stderr', 'returncode'])):
    '''Outcome of one external command'''
    __slots__ = ()

    @property
    def success(self):
        return self.returncode == 0


def command_string(cmd):
    '''Render an argv list as a shell-style command line'''
    return ' '.join(shlex.quote(arg) for arg in cmd)


def cmd_exists(cmd):
    '''Return True if the named program can be found on PATH'''
    return shutil.which(cmd) is not None


def execute_command(cmd, timeout=None):
    '''Run cmd and capture its output.

    Failures to launch the program and timeouts are reported through the
    returned CommandResult rather than raised.
    '''
    cmd_line = command_string(cmd)
    log('Running: {}'.format(cmd_line), level=DEBUG)
    try:
        proc = subprocess.run(cmd, stdout=subprocess.PIPE,
                              stderr=subprocess.PIPE,
                              universal_newlines=True, encoding='UTF-8',
                              errors='replace',
                              timeout=timeout)
    except OSError as e:
        log('Error running {}\n{}'.format(cmd_line, e), level=ERROR)
        return CommandResult(cmd_line, '', str(e), NOT_FOUND_STATUS)
    except subprocess.TimeoutExpired as e:
        log('Timed out after {}s running {}'.format(timeout, cmd_line),
            level=ERROR)
        stdout = e.stdout or ''
        if isinstance(stdout, bytes):
            stdout = stdout.decode('UTF-8', 'replace')
        return CommandResult(
            cmd_line, stdout,
            'Command timed out after {} seconds'.format(timeout),
            TIMEOUT_STATUS)
    return CommandResult(cmd_line, proc.stdout, proc.stderr, proc.returncode)


class CommandRunner(object):
    '''Runs external commands on behalf of the LVM caches.

    Anything offering the same run() method can stand in for it.
    '''

    def __init__(self, timeout=None):
        self.timeout = timeout

    def run(self, cmd):
        return execute_command(cmd, timeout=self.timeout)
