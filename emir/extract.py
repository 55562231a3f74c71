"""Extraction of events, tags and regions from the master document.

The master document is scanned line by line. Every line is classified into
one of the :class:`Marker` kinds and drives a small state machine::

    skip --EVENTS_BEGIN--> events --REGION_END--> skip
    skip --TAGS_BEGIN----> tags   --REGION_END--> skip

Expected shape of the data in the master document::

    var events = {
        'all': { //# emir__EVENTS__
            'onClick': null,
            ...
        }, // all //# emir__EVENTS__
    };
    var tags = {
        'HTML 4': { //# emir__TAGS__
            'div': {...},
            ...
        }, // HTML 4 //# emir__TAGS__
    };

Lines between two ``emir__JS__`` lines form the script region, all other
lines the markup region.
"""
import re
from sys import intern
from collections import namedtuple


class Marker(object):
    SCRIPT_TOGGLE = intern('script_toggle')
    COMMENT = intern('comment')
    EVENTS_BEGIN = intern('events_begin')
    TAGS_BEGIN = intern('tags_begin')
    REGION_END = intern('region_end')
    DATA = intern('data')


class Mode(object):
    SKIP = intern('skip')
    EVENTS = intern('events')
    TAGS = intern('tags')


# order matters, first match wins
MARKER_PATTERNS = (
    (Marker.SCRIPT_TOGGLE, re.compile(r'^\s*.*emir__JS__')),
    (Marker.COMMENT, re.compile(r'^\s*#')),
    (Marker.COMMENT, re.compile(r'^\s*//')),
    (Marker.COMMENT, re.compile(r'^\s*/\*')),
    (Marker.COMMENT, re.compile(r'^\s*\*/\s*$')),
    (Marker.EVENTS_BEGIN, re.compile(r"^\s*'all'.*emir__EVENTS__")),
    (Marker.TAGS_BEGIN, re.compile(r"^\s*'HTML .'.*emir__TAGS__")),
    (Marker.REGION_END, re.compile(r'^\s*}.*emir__')),
)

TRANSITIONS = {
    Marker.EVENTS_BEGIN: Mode.EVENTS,
    Marker.TAGS_BEGIN: Mode.TAGS,
    Marker.REGION_END: Mode.SKIP,
}

_QUOTED = re.compile(r"'([^']*)'")

# only the definition in the registry has the value null, all other
# occurrences of an event name are associations of an event with a tag
_EVENT_DEFINITION = re.compile(r"^\s*'.*?null")


Extracted = namedtuple('Extracted', 'events tags script markup')


def classify(line):
    for kind, pattern in MARKER_PATTERNS:
        if pattern.match(line):
            return kind
    return Marker.DATA


def candidate(line):
    """Returns the text between the first pair of single quotes or None"""
    match = _QUOTED.search(line)
    return match.group(1) if match is not None else None


def uniq(names):
    seen, result = set(), []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result


def lines(text):
    """Splits at newlines only, keeping them"""
    parts = text.split('\n')
    for part in parts[:-1]:
        yield part + '\n'
    if parts[-1]:
        yield parts[-1]


def extract(text):
    script, markup = [], []
    events, tags = [], []
    in_script = False
    mode = Mode.SKIP
    for line in lines(text):
        kind = classify(line)
        if kind is Marker.SCRIPT_TOGGLE:
            in_script = not in_script
            continue
        (script if in_script else markup).append(line)

        if kind is Marker.COMMENT:
            continue
        if kind in TRANSITIONS:
            mode = TRANSITIONS[kind]
            continue
        if mode is Mode.SKIP:
            continue

        name = candidate(line)
        if name is None:
            continue
        if mode is Mode.EVENTS:
            if not _EVENT_DEFINITION.match(line) or name in events:
                continue
            events.append(name)
        else:
            tags.append(name)

    return Extracted(uniq(events), uniq(tags), ''.join(script),
                     ''.join(markup))
