from . import library

def test_Contention(test):
	test/(test/1 == 1) == True
	test/library.Absurdity ^ (lambda: test/1 == 2)
	test/library.Absurdity ^ (lambda: test//1 == 1)
	test/library.Absurdity ^ (lambda: 3 in test/[1, 2])
	test/library.Absurdity ^ (lambda: test/[] % [])

def test_Contention_trap(test):
	with test/KeyError as exc:
		{}['missing']
	test/exc().args == ('missing',)

	# Not raising and raising the wrong type are both failures.
	test/library.Absurdity ^ (lambda: test/KeyError ^ (lambda: None))
	test/library.Absurdity ^ (lambda: test/KeyError ^ (lambda: int('x')))

def test_Test_seal(test):
	def passing(t):
		t/1 == 1
	def failing(t):
		t/1 == 2

	t = library.Test('passing', passing)
	t.seal()
	test/t.fate.__class__ == library.Return
	test/t.fate.impact == 1

	t = library.Test('failing', failing)
	t.seal()
	test/t.fate.__class__ == library.Fail
	test/t.fate.impact == -1
	test/t.fate.__cause__.__class__ == library.Absurdity

def test_Test_interface(test):
	# Only the contention operators and &seal are provided.
	for name in ('isinstance', 'skip', 'fail', 'Skip'):
		test/hasattr(library.Test, name) == False

if __name__ == '__main__':
	import sys
	library.execute(sys.modules[__name__])
