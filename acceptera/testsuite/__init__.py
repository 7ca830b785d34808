"""
    acceptera.testsuite
    ~~~~~~~~~~~~~~~~~~~

    :copyright:
        (c) 2016 Ben Mather
    :license:
        BSD, see LICENSE for more details.

"""
import unittest

from acceptera.testsuite import (
    test_exceptions, test_media_type, test_accept,
)


loader = unittest.TestLoader()
suite = unittest.TestSuite((
    loader.loadTestsFromModule(test_exceptions),
    loader.loadTestsFromModule(test_media_type),
    loader.loadTestsFromModule(test_accept),
))
