from textwrap import dedent

import pytest

from emir.extract import extract, classify, candidate, uniq, lines
from emir.extract import Marker

from .base import read_master


def check_extract(src):
    return extract(dedent(src).lstrip())


@pytest.mark.parametrize('line, kind', [
    ('//# emir__JS__\n', Marker.SCRIPT_TOGGLE),
    ('    <script> <!-- emir__JS__ -->\n', Marker.SCRIPT_TOGGLE),
    ("  # 'a': null,\n", Marker.COMMENT),
    ("  // 'a': null,\n", Marker.COMMENT),
    ("  /* 'a': null,\n", Marker.COMMENT),
    ('   */ \n', Marker.COMMENT),
    ("    'all': { //# emir__EVENTS__\n", Marker.EVENTS_BEGIN),
    ("    'HTML 4': { //# emir__TAGS__\n", Marker.TAGS_BEGIN),
    ("    'HTML 5': { //# emir__TAGS__\n", Marker.TAGS_BEGIN),
    ('    }, // all //# emir__EVENTS__\n', Marker.REGION_END),
    ('    }, // HTML 4 //# emir__TAGS__\n', Marker.REGION_END),
    ("    'HTML 10': { //# emir__TAGS__\n", Marker.DATA),
    ("    'div': { },\n", Marker.DATA),
    ('    */ not only the end\n', Marker.DATA),
    ('};\n', Marker.DATA),
])
def test_classify(line, kind):
    assert classify(line) is kind


def test_candidate():
    assert candidate("    'onClick':  null,\n") == 'onClick'
    assert candidate("  foo 'bar' 'baz'\n") == 'bar'
    assert candidate("    '': null\n") == ''
    assert candidate('    { },\n') is None
    assert candidate("    'unclosed\n") is None


def test_uniq():
    assert uniq(['b', 'a', 'b', 'c', 'a']) == ['b', 'a', 'c']
    assert uniq([]) == []


def test_lines():
    assert list(lines('a\r\nb\x0cc\nd')) == ['a\r\n', 'b\x0cc\n', 'd']
    assert list(lines('a\n')) == ['a\n']
    assert list(lines('')) == []


def test_master():
    extracted = extract(read_master())
    assert extracted.events == ['onClick', 'onBlur']
    assert extracted.tags == ['div', 'frame', 'title', 'video']
    assert extracted.script.startswith('var emir_file = false;\n')
    assert extracted.script.endswith('};\n')
    assert 'emir__JS__' not in extracted.script
    assert 'emir__JS__' not in extracted.markup
    assert extracted.markup.startswith('<!-- @(#) emir.html 1.42 -->\n')
    assert 'var events' not in extracted.markup


def test_idempotent():
    text = read_master()
    assert extract(text) == extract(text)


def test_regions_cover_document():
    text = read_master()
    before, script, after = text.split('//# emir__JS__\n')
    extracted = extract(text)
    assert extracted.script == script
    assert extracted.markup == before + after


def test_script_only():
    extracted = extract('//# emir__JS__\nX\n//# emir__JS__\nY\n')
    assert extracted.script == 'X\n'
    assert extracted.markup == 'Y\n'


def test_events_need_null():
    extracted = check_extract("""
        'all': { //# emir__EVENTS__
            'onClick': null,
            'onBlur': 'blur',
            'onFocus': { 'null': 1 },
            x 'onKeyUp': null,
            'onClick': null,
        }, // all //# emir__EVENTS__
    """)
    assert extracted.events == ['onClick', 'onFocus']


def test_tags_unfiltered():
    extracted = check_extract("""
        'HTML 4': { //# emir__TAGS__
            'div': { },
            'p': 'whatever',
            x 'span'

            'div': null,
        }, // HTML 4 //# emir__TAGS__
    """)
    assert extracted.tags == ['div', 'p', 'span']


def test_skip_outside_regions():
    extracted = check_extract("""
        'div': { },
        'onClick': null,
        'HTML 4': { //# emir__TAGS__
            'a': { },
        }, //# emir__TAGS__
        'b': { },
        'all': { //# emir__EVENTS__
            'onBlur': null,
        }, //# emir__EVENTS__
        'onFocus': null,
    """)
    assert extracted.events == ['onBlur']
    assert extracted.tags == ['a']


def test_comments_do_not_switch_mode():
    extracted = check_extract("""
        'HTML 4': { //# emir__TAGS__
            // }, //# emir__TAGS__
            'a': { },
            /* 'b': { },
             */
        }, //# emir__TAGS__
    """)
    assert extracted.tags == ['a']


def test_regions_inside_script():
    extracted = check_extract("""
        <html>
        //# emir__JS__
        var tags = {
            'HTML 5': { //# emir__TAGS__
                'video': { },
            }, //# emir__TAGS__
        };
        //# emir__JS__
        </html>
    """)
    assert extracted.tags == ['video']
    assert extracted.markup == '<html>\n</html>\n'


def test_empty():
    assert extract('') == ([], [], '', '')
