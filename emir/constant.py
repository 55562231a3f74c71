from collections import namedtuple


VERSION = '1.14'

MASTER_FILE = 'emir.html'
SCRIPT_FILE = 'emir.js'
FILE_PREFIX = 'emir-'
FILE_EXT = '.html'

# name of the JavaScript call-back used in every event attribute
HANDLER = '$e$'

TITLE_TEXT = 'EMiR - Event Mappings in Reality (emir {})'.format(VERSION)

TEST_ME = '-test me-'

# tags which get their own generated file
FILE_TAGS = frozenset((
    'applet', 'base', 'body', 'form', 'frame', 'frameset', 'head', 'html',
    'iframe', 'link', 'meta', 'noembed', 'noframes', 'noscript', 'style',
    'title',
))

# tags valid inside <head> only
META_TAGS = frozenset((
    'base', 'head', 'isindex', 'link', 'meta', 'style', 'title',
))

# tags without closing form, written as <tag ... />
EMPTY_TAGS = frozenset((
    'area', 'base', 'basefont', 'br', 'col', 'embed', 'frame', 'hr', 'img',
    'input', 'isindex', 'keygen', 'link', 'meta', 'param', 'source',
    'spacer', 'track', 'wbr',
))

# tags which are invisible without explicit size
WIDTH_TAGS = frozenset((
    'applet', 'embed', 'iframe',
))


Categories = namedtuple('Categories', 'file meta empty width')

DEFAULT_CATEGORIES = Categories(FILE_TAGS, META_TAGS, EMPTY_TAGS, WIDTH_TAGS)
