import io
import difflib
import os.path
import unittest

from lxml.html import fromstring


DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')

MASTER_PATH = os.path.join(DATA_DIR, 'emir.html')

EVENTS = ['onClick', 'onBlur']


def read_master():
    with io.open(MASTER_PATH, encoding='utf-8', newline='') as f:
        return f.read()


def parse_html(fragment):
    return fromstring(str(fragment).strip())


class TestCase(unittest.TestCase):

    def assertText(self, first, second):
        first, second = str(first), str(second)
        if first != second:
            msg = ('Generated text is not equal:\n\n{}'
                   .format('\n'.join(difflib.ndiff(first.splitlines(),
                                                   second.splitlines()))))
            raise self.failureException(msg)
