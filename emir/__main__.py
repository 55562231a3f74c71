"""Command line interface of the tag content generator.

The usage text printed by -h/--help is the click help built from the
docstring of the `cli` command, the process exits with status 2 after it.
"""
import logging

import click

from .extract import extract
from .loaders import FileSystemLoader, MasterNotFound
from .constant import FILE_TAGS, MASTER_FILE
from .generator import generate, closing_tags


log = logging.getLogger('emir')


class TraceFormatter(logging.Formatter):
    # "--" is not allowed inside HTML comments, replaced by 2 minus signs
    def format(self, record):
        text = super(TraceFormatter, self).format(record)
        return text.replace('--', '−−')


class HtmlCommentHandler(logging.Handler):
    """Writes records as HTML comments into generated content"""

    def emit(self, record):
        try:
            click.echo('<!-- {} -->'.format(self.format(record)))
        except Exception:
            self.handleError(record)


def setup_tracing(dbx):
    del log.handlers[:]
    if dbx == 'tty':
        handler = logging.StreamHandler(click.get_text_stream('stderr'))
        handler.setFormatter(TraceFormatter('#[emir]: %(message)s'))
    elif dbx == 'html':
        handler = HtmlCommentHandler()
        handler.setFormatter(TraceFormatter('%(message)s'))
    else:
        log.setLevel(logging.WARNING)
        log.propagate = True
        return
    log.addHandler(handler)
    log.setLevel(logging.DEBUG)
    # traces go to the selected handler only
    log.propagate = False


def print_help(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help())
    ctx.exit(2)


def load(master):
    loader, name = FileSystemLoader.for_file(master)
    try:
        return loader.load(name)
    except (MasterNotFound, IOError):
        raise click.ClickException('cannot read »{}«.'.format(master))


def echo_lines(names):
    for name in names:
        click.echo(name)


@click.command(add_help_option=False)
@click.argument('tags', nargs=-1)
@click.option('--master', default='./' + MASTER_FILE, show_default=True,
              metavar='PATH', help='Master document.')
@click.option('--js', is_flag=True,
              help='Only print JavaScript part from the master document.')
@click.option('--close', is_flag=True,
              help='Only print tags which have a closing tag.')
@click.option('--list-tags', is_flag=True, help='List all known tags.')
@click.option('--list-events', is_flag=True, help='List all known events.')
@click.option('--list-file-tags', is_flag=True,
              help='List tags which need their own file.')
@click.option('--dbx-tty', '--debug-tty', '--dbx', '--debug', 'dbx_tty',
              is_flag=True,
              help="Print debug information on console's STDERR.")
@click.option('--dbx-html', '--debug-html', 'dbx_html', is_flag=True,
              help='Print debug information as HTML comment in generated '
                   'data.')
@click.option('-h', '--help', is_flag=True, expose_value=False,
              is_eager=True, callback=print_help, help='This text.')
def cli(tags, master, js, close, list_tags, list_events, list_file_tags,
        dbx_tty, dbx_html):
    """Tag content generator for EMiR - Event Mappings in Reality.

    Generates a complete HTML content and prints it on STDOUT. The
    generated content contains all known event attributes for the
    specified TAGS. The generated content (when saved to a file) is
    destined to be used as link in the master document for the
    corresponding tag.

    Beside some constant text the generated HTML looks like:

    \b
        <head> ...
             <TAG id="TAG" name="TAG"
               EVENT0="return $e$(this,'EVENT0');"
               EVENT1="return $e$(this,'EVENT1');"
             >-test me-</TAG>
        <body>
        <div><fieldset><span> <TAG> </span>
             <label id="l-TAG-EVENT0">
                  <input id="TAG-EVENT0" type="checkbox"> EVENT0</label>
             ...
        </fieldset></div>

    Tags valid inside <head> only are printed there, their checkboxes are
    printed in <body>. All other tags are printed with their checkboxes in
    the fieldset inside <body>. Frame tags (any prefix of "frameset")
    replace <body> with a frameset.

    Any string can be used as TAG, it then will be treated as tag name and
    printed like any valid tag name. Tag names starting with "-" follow
    "--" on the command line.

    The HTML tags and all known event attributes are not defined herein but
    are extracted from the master document. Following markers are
    expected there: emir__HEAD__, emir__TITLE__, emir__META__,
    emir__EVENTS__, emir__TAGS__, emir__CHECK__, emir__FIELDSET__,
    emir__BODY__ and emir__JS__.

    Use the build driver to see which files are generated:

    \b
        python -m emir.build
        python -m emir.build all
    """
    setup_tracing('html' if dbx_html else 'tty' if dbx_tty else None)

    if list_file_tags:
        echo_lines(sorted(FILE_TAGS))
        return

    source = load(master)
    log.debug('master document %s', source.file_path)
    extracted = extract(source.content)

    if js:
        click.echo(extracted.script, nl=False)
        return
    if list_tags:
        echo_lines(extracted.tags)
        return
    if list_events:
        echo_lines(extracted.events)
        return

    if close:
        tags = closing_tags(tags)
    click.echo(generate(extracted, list(tags)), nl=False)


if __name__ == '__main__':
    cli.main(prog_name='python -m emir')
