"""Build driver generating the static emir.js and per tag HTML files.

All data is defined in the master document, hence the generator is asked
for tags and events instead of defining them here again.
"""
import os
import sys
import glob
import shlex
import logging
import subprocess
from collections import namedtuple

import click

from .constant import FILE_EXT, FILE_PREFIX, MASTER_FILE, SCRIPT_FILE


log = logging.getLogger(__name__)

GENERATOR = [sys.executable, '-m', 'emir']

GENERATOR_MODULES = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                 '*.py')


class BuildError(click.ClickException):

    def __init__(self, message, exit_code=1):
        super(BuildError, self).__init__(message)
        self.exit_code = exit_code


Rule = namedtuple('Rule', 'target args phony')


class Builder(object):

    def __init__(self, master, prefix=FILE_PREFIX, directory=os.curdir,
                 dry_run=False):
        self.master = master
        self.prefix = prefix
        self.directory = directory
        self.dry_run = dry_run
        self._lists = {}
        self._env = dict(os.environ, PYTHONIOENCODING='utf-8')

    @property
    def closetags(self):
        return '{}closetags{}'.format(self.prefix, FILE_EXT)

    def tag_file(self, tag):
        return '{}{}{}'.format(self.prefix, tag, FILE_EXT)

    def _command(self, *args):
        return GENERATOR + ['--master', self.master] + list(args)

    def query(self, option):
        """Runs the generator in a query mode, returns sorted unique names"""
        if option not in self._lists:
            cmd = self._command(option)
            p = subprocess.Popen(cmd, stdout=subprocess.PIPE, env=self._env)
            content, _ = p.communicate()
            if p.returncode != 0:
                raise BuildError('generator {} failed'.format(option),
                                 p.returncode)
            names = content.decode('utf-8').splitlines()
            self._lists[option] = sorted(set(n for n in names if n))
        return self._lists[option]

    def file_tags(self):
        return self.query('--list-file-tags')

    def tags(self):
        return self.query('--list-tags')

    def events(self):
        return self.query('--list-events')

    def files(self):
        return ([self.tag_file(t) for t in self.file_tags()] +
                [SCRIPT_FILE, self.closetags])

    def rule(self, target):
        if target == SCRIPT_FILE:
            return Rule(target, ['--js'], True)
        if target == self.closetags:
            return Rule(target, ['--close', '--'] + self.tags(), True)
        if (target.startswith(self.prefix) and target.endswith(FILE_EXT) and
                len(target) > len(self.prefix) + len(FILE_EXT)):
            tag = target[len(self.prefix):-len(FILE_EXT)]
            return Rule(target, ['--', tag], False)
        raise click.UsageError('No rule to make target {!r}.'.format(target))

    def dependencies(self):
        return [self.master] + sorted(glob.glob(GENERATOR_MODULES))

    def is_uptodate(self, path):
        try:
            modified_time = os.path.getmtime(path)
        except OSError:
            return False
        return all(os.path.getmtime(dep) <= modified_time
                   for dep in self.dependencies() if os.path.exists(dep))

    def make(self, target):
        rule = self.rule(target)
        path = os.path.join(self.directory, rule.target)
        if not rule.phony and self.is_uptodate(path):
            log.info("'%s' is up to date.", rule.target)
            return False
        cmd = self._command(*rule.args)
        if self.dry_run:
            line = ' '.join(shlex.quote(a) for a in cmd)
            click.echo('{} > {}'.format(line, shlex.quote(path)))
            return False
        log.info('generating %s', path)
        with open(path, 'wb') as f:
            returncode = subprocess.call(cmd, stdout=f, env=self._env)
        if returncode != 0:
            os.remove(path)
            raise BuildError('generating {} failed'.format(path), returncode)
        return True

    def make_all(self):
        return [f for f in self.files() if self.make(f)]

    def help(self):
        files = ' '.join(self.files())
        return '\n'.join([
            '# target description',
            '#-------+------------------------------------------------------',
            ' help    WYSIWYG',
            ' all     generate all files:',
            '         {}'.format(files),
            ' {} generate {}'.format(SCRIPT_FILE, SCRIPT_FILE),
            ' {}:'.format(self.closetags),
            '         generate {}'.format(self.closetags),
            ' list    list all known tags and events',
        ])

    def listing(self):
        return '\n'.join([
            '# EMiR-FILE-TAGS: {}'.format(' '.join(self.file_tags())),
            '# EMiR.files:     {}'.format(' '.join(self.files())),
            '# EMiR-TAGS:      {}'.format(' '.join(self.tags())),
            '# EMiR-EVENTS:    {}'.format(' '.join(self.events())),
        ])


@click.command()
@click.argument('targets', nargs=-1)
@click.option('--master', default='./' + MASTER_FILE, show_default=True,
              metavar='PATH', help='Master document.')
@click.option('--prefix', default=FILE_PREFIX, show_default=True,
              help='Prefix of generated per tag files.')
@click.option('-C', '--directory', default=os.curdir,
              type=click.Path(exists=True, file_okay=False),
              help='Directory for generated files.')
@click.option('-n', '--dry-run', is_flag=True,
              help='Print commands, do not generate files.')
def build(targets, master, prefix, directory, dry_run):
    """Generates static emir.js and static HTML files.

    TARGETS are any of: help (default), doc, all, list, emir.js,
    PREFIXclosetags.html or PREFIXTAG.html for any TAG.
    """
    logging.basicConfig(level=logging.INFO, format='%(message)s')

    builder = Builder(master, prefix, directory, dry_run)
    for target in targets or ['help']:
        if target in ('help', 'doc'):
            click.echo(builder.help())
        elif target == 'all':
            builder.make_all()
        elif target == 'list':
            click.echo(builder.listing())
        else:
            builder.make(target)


if __name__ == '__main__':
    build.main(prog_name='python -m emir.build')
