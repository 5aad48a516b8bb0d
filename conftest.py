"""
# Collection of textfragment test modules by pytest.

# Test subjects take a &textfragment.test.library.Test instance as their only
# parameter; the `test` fixture provides one and resolves its fate after the
# subject returns.
"""
import pytest

from textfragment.test import library as libtest

@pytest.fixture(name='test')
def harness_test(request):
	test = libtest.Test(request.node.nodeid, request.function)
	with test.exits:
		yield test
