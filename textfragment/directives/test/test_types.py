import pickle

from .. import types

TextDirective = types.TextDirective
GenericDirective = types.GenericDirective

def test_TextDirective_serialization(test):
	expectations = [
		(TextDirective('start'), 'text=start'),
		(TextDirective('start', 'end'), 'text=start,end'),
		(TextDirective('start', 'end', 'prefix'), 'text=prefix-,start,end'),
		(TextDirective('start', 'end', 'prefix', 'suffix'), 'text=prefix-,start,end,-suffix'),
		(TextDirective('start', prefix='prefix', suffix='suffix'), 'text=prefix-,start,-suffix'),
		(TextDirective('start', suffix='suffix'), 'text=start,-suffix'),
		(TextDirective('start', prefix='prefix'), 'text=prefix-,start'),
	]
	for d, s in expectations:
		test/str(d) == s
		test/d.name() == 'text'
		test/d.value() == s[len('text='):]

def test_TextDirective_encoding(test):
	d = TextDirective('linked URL', end="-'s format")
	test/d.value() == "linked%20URL,%2D's%20format"
	test/d.start == 'linked URL'
	test/d.end == "-'s format"
	test/d.prefix == None
	test/d.suffix == None

	d = TextDirective('attributes', end='attribute', prefix='Deprecated')
	test/str(d) == 'text=Deprecated-,attributes,attribute'

	d = TextDirective('a,b', suffix='c&d')
	test/d.value() == 'a%2Cb,-c%26d'

def test_TextDirective_validation(test):
	test/types.InvalidDirective ^ (lambda: TextDirective(''))
	test/types.InvalidDirective ^ (lambda: TextDirective('start', end=''))
	test/types.InvalidDirective ^ (lambda: TextDirective('start', prefix=''))
	test/types.InvalidDirective ^ (lambda: TextDirective('start', suffix=''))
	test/types.Error ^ (lambda: TextDirective(''))
	test/ValueError ^ (lambda: TextDirective(''))

def test_TextDirective_transformations(test):
	d = TextDirective('start', 'end', 'prefix', 'suffix')

	test/d.with_start('start') % d
	test/d.with_end('end') % d
	test/d.with_prefix('prefix') % d
	test/d.with_suffix('suffix') % d

	test/d.with_start('other') == TextDirective('other', 'end', 'prefix', 'suffix')
	test/d.with_end(None) == TextDirective('start', None, 'prefix', 'suffix')
	test/d.with_prefix(None) == TextDirective('start', 'end', None, 'suffix')
	test/d.with_suffix('after') == TextDirective('start', 'end', 'prefix', 'after')

	# Original is unchanged.
	test/str(d) == 'text=prefix-,start,end,-suffix'
	test/types.InvalidDirective ^ (lambda: d.with_start(''))

def test_TextDirective_from_string(test):
	d = TextDirective.from_string("text=linked%20URL,%2D's%20format")
	test/d == TextDirective('linked URL', "-'s format")

	d = TextDirective.from_value('prefix-,start,-suffix')
	test/d == TextDirective('start', prefix='prefix', suffix='suffix')

	test/types.MalformedDirective ^ (lambda: TextDirective.from_string('other=start'))
	test/types.MalformedDirective ^ (lambda: TextDirective.from_string('text'))

def test_GenericDirective(test):
	d = GenericDirective('mydirection=maitreGims')
	test/d.name() == 'mydirection'
	test/d.value() == 'maitreGims'
	test/str(d) == 'mydirection=maitreGims'

	d = GenericDirective('key=a=b')
	test/d.name() == 'key'
	test/d.value() == 'a=b'

	# Verbatim; no normalization.
	d = GenericDirective('key=linked URL%2d')
	test/str(d) == 'key=linked URL%2d'

	d = GenericDirective.from_string('empty=')
	test/d.value() == ''

def test_GenericDirective_validation(test):
	test/types.InvalidDirective ^ (lambda: GenericDirective('unknownDirective'))
	test/types.InvalidDirective ^ (lambda: GenericDirective('=value'))
	test/types.InvalidDirective ^ (lambda: GenericDirective('text=start'))
	test/types.InvalidDirective ^ (lambda: GenericDirective('a=b&c=d'))

def test_Directive_equality(test):
	test/TextDirective('start') == TextDirective('start')
	test/TextDirective('start') != TextDirective('start', 'end')
	test/hash(TextDirective('start')) == hash(TextDirective('start'))
	test/GenericDirective('a=b') == GenericDirective('a=b')
	test/GenericDirective('a=b') != GenericDirective('a=c')

	s = {TextDirective('start'), TextDirective('start'), GenericDirective('a=b')}
	test/len(s) == 2

	# Inequality follows the serialized form as well.
	a = TextDirective('-')
	b = TextDirective('%2D')
	test/tuple(a) != tuple(b)
	test/(a == b) == True
	test/(a != b) == False

	# The fields alone do not make a directive.
	test/(TextDirective('a') == ('a', None, None, None)) == False
	test/(('a', None, None, None) == TextDirective('a')) == False
	test/(TextDirective('a') != ('a', None, None, None)) == True
	test/(GenericDirective('a=b') == ('a', 'b')) == False
	test/(TextDirective('a') == 'text=a') == False

def test_Directive_equals(test):
	d = TextDirective('linked URL')
	test/d.equals('text=linked%20URL') == True
	test/d.equals(TextDirective('linked URL')) == True
	test/d.equals('text=linked') == False
	test/d.equals('text=') == False
	test/d.equals('invalid') == False
	test/d.equals(object()) == False
	test/d.equals(None) == False

	d = GenericDirective('unknown=directive')
	test/d.equals('unknown=directive') == True
	test/d.equals('text=directive') == False
	test/d.equals('invalid&text=foo') == False

def test_Directive_pickle(test):
	for d in [TextDirective('start', 'end', 'prefix', 'suffix'), GenericDirective('a=b')]:
		r = pickle.loads(pickle.dumps(d))
		test/r == d
		test/r.__class__ == d.__class__

def test_Directive_repr(test):
	test/repr(TextDirective('start')) == "TextDirective('start', end=None, prefix=None, suffix=None)"
	test/repr(GenericDirective('a=b')) == "GenericDirective.from_string('a=b')"

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])
