''' General helper functions for tests '''
from pvhelpers.core.host import CommandResult, command_string


class FakeCommandRunner(object):
    '''
    A fake command runner. Lets tests script the result of each program
    and inspect what was run, eg:

        runner = FakeCommandRunner({
            'pvs': ('/dev/sda10,2147483648,,r-----,,\n', '', 0),
        })
        info = LVM2PVInfo(runner=runner, config=CONFIG)

    Results are keyed on the first word after the program name ('vgscan',
    'pvs', ...) and given as (stdout, stderr, returncode). Unknown commands
    succeed with no output.
    '''
    def __init__(self, results=None):
        self.results = results or {}
        self.commands = []

    def run(self, cmd):
        self.commands.append(list(cmd))
        key = cmd[1] if len(cmd) > 1 else cmd[0]
        stdout, stderr, returncode = self.results.get(key, ('', '', 0))
        return CommandResult(command_string(cmd), stdout, stderr, returncode)

    def called(self, subcommand):
        return [cmd for cmd in self.commands
                if len(cmd) > 1 and cmd[1] == subcommand]
