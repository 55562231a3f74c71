import re
import logging

from .render import attribute_tag, fieldset, frameset
from .constant import DEFAULT_CATEGORIES, SCRIPT_FILE, TITLE_TEXT


log = logging.getLogger(__name__)

# generated files do not use inline JavaScript, emir_file=true must be
# defined in its own script tag
SCRIPT_STUB = '<script type="text/javascript">var emir_file=true;</script>'

INITIAL_COMMENT = re.compile(r'^<!--.*-->$', re.M)
SCRIPT_TAG = re.compile(r'^(\s*<script .*)>', re.M)
HEAD_MARKER = re.compile(r'^\s*<head>.*emir__HEAD__\s*-->', re.M)
TITLE_MARKER = re.compile(r'^\s*<title>.*emir__TITLE__\s*-->', re.M)
META_MARKER = re.compile(r'^\s*<meta.*emir__META__\s*-->', re.M)
BODY_MARKER = re.compile(
    r'^\s*<body.*{ //. emir__META__.*} //. emir__BODY__ -->', re.M)
CHECK_MARKER = re.compile(r'^\s*<!--.*emir__CHECK__\s*-->', re.M)
FIELDSET_MARKER = re.compile(r'^\s*<!--.*emir__FIELDSET__\s*-->', re.M)


def splice(pattern, html, code):
    """Replaces first match of pattern, code is inserted literally"""
    return pattern.sub(lambda _: code, html, count=1)


def is_frameset(tag):
    # loose match: frame, frameset and any other prefix of it, the empty
    # tag name included
    return 'frameset'.startswith(tag)


def closing_tags(tags, categories=DEFAULT_CATEGORIES):
    """Filters tags having an explicit closing tag, for a single page"""
    return [t for t in tags
            if t not in categories.empty and not is_frameset(t)]


def prepare(markup):
    markup = splice(INITIAL_COMMENT, markup, '')
    return SCRIPT_TAG.sub(
        lambda m: '\t{}{} src="{}" >'.format(SCRIPT_STUB, m.group(1),
                                              SCRIPT_FILE),
        markup, count=1)


def generate(extracted, tags, categories=DEFAULT_CATEGORIES):
    """Returns the master document's markup with generated code for tags

    All positions are marked with emir__*__ comments in the markup, these
    comments are simply replaced with the generated code.
    """
    events = extracted.events
    html = prepare(extracted.markup)

    log.debug('<frame*> tag')
    for tag in tags:
        if is_frameset(tag):
            # frameset replaces <body>, no other content is possible
            code = frameset(tag, events, categories=categories)
            return splice(BODY_MARKER, html, code)

    check = []

    log.debug('<head> tag')
    if 'head' in tags:
        code = attribute_tag('head', events, closing=False,
                             categories=categories)
        html = splice(HEAD_MARKER, html, code)
        check.append('head')

    log.debug('tags inside <head>')
    meta = []
    for tag in tags:
        if tag == 'head' or tag not in categories.meta:
            continue
        code = attribute_tag(tag, events, categories=categories)
        if tag == 'title':
            code = str(code).replace('</title>', TITLE_TEXT + '</title>', 1)
            html = splice(TITLE_MARKER, html, '')
        meta.append(code)
        # checkboxes in <head> are neither visible nor accessible, they
        # must be generated again inside <body>
        check.append(tag)
    if meta:
        html = splice(META_MARKER, html, ''.join(meta))

    log.debug('checkboxes -- for tags inside <head>')
    code = ''.join(fieldset(t, events, live=False, categories=categories)
                   for t in check)
    if code:
        html = splice(CHECK_MARKER, html, code)

    log.debug('tags inside <body>')
    code = ''.join(fieldset(t, events, categories=categories)
                   for t in tags if t not in categories.meta)
    if code:
        html = splice(FIELDSET_MARKER, html, code)

    return html
