"""HTML fragments for a tag and the known events.

Every function returns :class:`markupsafe.Markup`, fragments are built from
plain strings and are only concatenated afterwards. Tag names are used as
given, any string is a valid tag name here.
"""
from markupsafe import Markup

from .constant import DEFAULT_CATEGORIES, HANDLER, TEST_ME


DUMMY_FRAME = ('<frame id="dummy" src="data:text/html,<html><body>'
               '<h3>just a dummy frame</h3></body></html>" />')

CHECK_FRAME = ('<frame id="check" src="data:text/html;charset=UTF-8,'
               '<html><body>{}</body></html>" />')

NOFRAMES = '<noframes>Browser does not support frames.</noframes>'


def event_attribute(event):
    return Markup('{0}="return {1}(this,\'{0}\');"'.format(event, HANDLER))


def event_attributes(events):
    return Markup(''.join('\n\t\t{}'.format(event_attribute(e))
                          for e in events))


def attribute_tag(tag, events, id=None, text='', closing=True,
                  categories=DEFAULT_CATEGORIES):
    """Returns the tag with one attribute per event::

        <tag id="tag" name="tag"
            onClick="return $e$(this,'onClick');"
            ...
        >text
        </tag>

    Empty tags are written as ``<tag ... />`` without text and closing tag.
    """
    id = tag if id is None else id
    empty = tag in categories.empty
    parts = ['\t<{0} id="{1}" name="{1}"'.format(tag, id)]
    if tag in categories.width:
        parts.append(' width="15" height="15" ')
    parts.append(event_attributes(events))
    if empty:
        parts.append(' />')
    else:
        parts.append('>{}'.format(text))
        if closing:
            parts.append('\n\t</{}>'.format(tag))
    parts.append('\n')
    return Markup(''.join(parts))


def checkbox(tag, event):
    # the checkbox is disabled, so that manual clicking does not change
    # its value, the label is shown by emir.js when the event fires
    id = '{}-{}'.format(tag, event)
    return Markup(
        '\t<label id="l-{0}" style="display:none" >| '
        '<input type="checkbox" disabled="1" id="{0}" name="{0}" />'
        '{1}</label>\n'.format(id, event)
    )


def checkbox_block(tag, events):
    return Markup(''.join(' {}'.format(checkbox(tag, e)) for e in events))


def fieldset(tag, events, live=True, categories=DEFAULT_CATEGORIES):
    parts = ['    <div><fieldset><span>&#xff1c;{}&#xff1e;</span>\n'
             .format(tag.upper())]
    if live:
        parts.append(attribute_tag(tag, events, text=TEST_ME,
                                   categories=categories))
    parts.append(checkbox_block(tag, events))
    parts.append('    </fieldset></div>\n\n')
    return Markup(''.join(parts))


def frameset(tag, events, categories=DEFAULT_CATEGORIES):
    """Returns a complete frameset replacing the document's body.

    Frame and frameset tags do not allow other usual HTML tags, hence the
    checkboxes live in a frame of their own, as inline HTML in its src=
    attribute. HTML entities in a data: URI are substituted before the
    HTML is rendered and cannot escape quotes, therefore ' becomes / and
    then " becomes ' in the inline HTML.

    The result looks like::

        <frameset rows="50,50,*" id="frameset"
            -- event attributes -- >-test me-
            <frame id="check" src="data:text/html;charset=UTF-8,..." />
            <frame id="dummy" src="data:text/html,..." />
        </frameset>

    for ``frame`` the event attributes are on a nested frame instead::

        <frameset rows="50,50,*" id="frameset" >
            <frame id="frame-f" name="frame-f" -- event attributes -- />
            ...
    """
    checkboxes = str(fieldset(tag, events, live=False,
                              categories=categories))
    checkboxes = checkboxes.replace('\n', '')
    checkboxes = checkboxes.replace("'", '/')
    checkboxes = checkboxes.replace('"', "'")
    if tag.lower() == 'frame':
        inner = ' >\n{}'.format(attribute_tag(tag, events, id=tag + '-f',
                                               categories=categories))
    else:
        inner = '{} >{}\n'.format(event_attributes(events), TEST_ME)
    return Markup(''.join([
        '<frameset rows="50,50,*" id="frameset"',
        inner,
        '\t', CHECK_FRAME.format(checkboxes), '\n',
        '\t', DUMMY_FRAME, '\n',
        '</frameset>\n', NOFRAMES, '\n</html>\n',
    ]))
