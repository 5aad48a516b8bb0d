"""
# Fragment directive collections.

# &FragmentDirectives is an immutable sequence of &Directive instances.
# Operations that would modify the sequence return new instances; the
# positions of the original instance are used by &remove and &replace, so
# indexes collected from one instance remain valid for that instance.

#!/pl/python
	from textfragment.directives import library
	fd = library.parse("#:~:text=linked%20URL,%2D's%20format&key=value")
	fd.first().start == "linked URL"
	fd.last().value() == "value"

# [ Entry Points ]
# - &parse
# - &attempt
# - &from_uri
"""
import logging
import typing

from . import codec
from . import grammar
from .types import Directive, TextDirective, GenericDirective
from .types import Error, InvalidDirective, MalformedDirective

log = logging.getLogger(__name__)

Item = typing.Union[Directive, str]

def resolve(item:Item, isinstance=isinstance) -> Directive:
	"""
	# Identify the &Directive described by &item.
	# Strings are parsed as single directives.
	"""
	if isinstance(item, Directive):
		return item
	if isinstance(item, str):
		return grammar.parse_token(item)
	raise InvalidDirective("cannot construct a directive from %r" %(type(item).__name__,))

class FragmentDirectives(object):
	"""
	# Ordered, immutable collection of fragment directives.

	# Membership, &contains, and &index_of compare directives by their
	# serialized form rather than by identity.

	# [ Properties ]
	# /directives/
		# The tuple of &Directive instances in fragment order.
	"""
	__slots__ = ('directives',)

	def __init__(self, *items:Item):
		self.directives = tuple(map(resolve, items))

	@classmethod
	def from_directives(Class, directives:typing.Iterable[Directive]):
		# No resolution; the iterator is trusted to produce &Directive instances.
		new = Class.__new__(Class)
		new.directives = tuple(directives)
		return new

	@classmethod
	def from_string(Class, raw:str):
		"""
		# Parse a fragment directive. The fragment delimiter, (characters)`#`,
		# and the &grammar.marker are optional.

		# &None produces an empty instance.

		# Raises &MalformedDirective when any of the directives cannot be parsed
		# and &InvalidDirective when &raw is not a string.
		"""
		if raw is None:
			return Class()
		if not isinstance(raw, str):
			raise InvalidDirective("cannot parse a fragment directive from %r" %(type(raw).__name__,))

		if raw.startswith('#'):
			raw = raw[1:]
		return Class.from_directives(grammar.parse_fragment_body(raw))

	@classmethod
	def try_from_string(Class, raw:str):
		"""
		# &from_string returning &None instead of raising when &raw cannot be parsed.
		"""
		try:
			return Class.from_string(raw)
		except Error as err:
			log.debug("rejected fragment directive %r: %s", raw, err)
			return None

	@classmethod
	def from_uri(Class, uri:str):
		"""
		# Construct an instance from the fragment directive of a complete URI.

		# An empty collection is returned when the URI has no fragment or the fragment
		# has no directive.
		"""
		index = uri.find('#')
		if index == -1:
			return Class()

		_, body = grammar.split_fragment(uri[index+1:])
		if body is None:
			return Class()
		return Class.from_directives(grammar.parse_fragment_body(body))

	def __repr__(self):
		return "%s.from_string(%r)" %(self.__class__.__name__, str(self))

	def __str__(self):
		if not self.directives:
			return ''
		return grammar.marker + self.value()

	def __reduce__(self):
		return (self.__class__, self.directives)

	# Sequence Interfaces

	def __len__(self):
		return len(self.directives)

	def __iter__(self):
		return iter(self.directives)

	def __getitem__(self, index):
		if isinstance(index, slice):
			return self.from_directives(self.directives[index])
		return self.directives[index]

	def __contains__(self, item):
		return self.contains(item)

	def __eq__(self, operand):
		if isinstance(operand, FragmentDirectives):
			return self.directives == operand.directives
		return NotImplemented

	def __hash__(self):
		return hash(self.directives)

	def __add__(self, operand):
		if not isinstance(operand, FragmentDirectives):
			return NotImplemented
		return self.append(operand)

	# Queries

	def count(self) -> int:
		"""
		# The number of directives in the collection.
		"""
		return len(self.directives)

	def is_empty(self) -> bool:
		return not self.directives

	def nth(self, index:int) -> typing.Optional[Directive]:
		"""
		# The directive at the zero-based &index or &None if there is no such position.
		"""
		if 0 <= index < len(self.directives):
			return self.directives[index]
		return None

	def first(self) -> typing.Optional[Directive]:
		return self.nth(0)

	def last(self) -> typing.Optional[Directive]:
		return self.nth(len(self.directives) - 1)

	def has(self, *indices:int) -> bool:
		"""
		# Whether all the given &indices identify a directive.
		# &False if no indices are given.
		"""
		n = len(self.directives)
		for i in indices:
			if not (0 <= i < n):
				return False
		return bool(indices)

	def index_of(self, item:Item) -> typing.Optional[int]:
		"""
		# The position of the first directive equal to &item.

		# Strings are parsed before the comparison and &None is returned
		# when &item is not present or does not parse.
		"""
		try:
			d = resolve(item)
		except Error:
			return None

		s = str(d)
		for i, x in enumerate(self.directives):
			if str(x) == s:
				return i
		return None

	def contains(self, item:Item) -> bool:
		return self.index_of(item) is not None

	# Derivations

	def filter(self, predicate:typing.Callable[[Directive], bool]):
		"""
		# Construct a new instance holding the directives selected by &predicate.
		"""
		return self.from_directives(x for x in self.directives if predicate(x))

	def remove(self, *indices:int):
		"""
		# Construct a new instance without the directives at the given &indices.
		# Indexes that do not identify a directive are ignored.
		"""
		if not indices:
			return self

		excluded = set(indices)
		return self.from_directives(
			x for i, x in enumerate(self.directives)
			if i not in excluded
		)

	def _extend(self, items):
		for item in items:
			if isinstance(item, FragmentDirectives):
				yield from item.directives
			else:
				yield resolve(item)

	def append(self, *items):
		"""
		# Construct a new instance with &items added to the end.
		# &items may be &Directive instances, directive strings, or &FragmentDirectives.
		"""
		added = tuple(self._extend(items))
		if not added:
			return self
		return self.from_directives(self.directives + added)

	def prepend(self, *items):
		"""
		# Construct a new instance with &items added to the beginning.
		"""
		added = tuple(self._extend(items))
		if not added:
			return self
		return self.from_directives(added + self.directives)

	def replace(self, index:int, item:Item):
		"""
		# Construct a new instance with the directive at &index substituted with &item.

		# Unlike the other positional operations, an &index that does not identify
		# a directive raises &IndexError.
		"""
		if not self.has(index):
			raise IndexError("no directive at position %d" %(index,))

		d = resolve(item)
		if d.__class__ is self.directives[index].__class__ and d == self.directives[index]:
			return self

		l = list(self.directives)
		l[index] = d
		return self.from_directives(l)

	def slice(self, offset:int, length:int=None):
		"""
		# Construct a new instance from &length directives starting at &offset.
		# When &length is &None, all the directives following &offset are included.
		"""
		if length is None:
			return self.from_directives(self.directives[offset:])
		return self.from_directives(self.directives[offset:offset+length])

	def when(self, condition, on_success, on_failure=None):
		"""
		# Apply &on_success to &self when &condition holds, otherwise &on_failure.

		# &condition is either a boolean or a callable given &self. The result of
		# the applied callable is returned; &self is returned when it is &None or
		# when &condition does not hold and &on_failure was not given.
		"""
		if callable(condition):
			condition = condition(self)

		if condition:
			r = on_success(self)
		elif on_failure is not None:
			r = on_failure(self)
		else:
			return self

		return self if r is None else r

	# Serialization

	def value(self) -> str:
		"""
		# The `&` separated directives without the fragment directive marker.
		"""
		return grammar.separator.join(map(str, self.directives))

	def get_uri_component(self) -> str:
		"""
		# The fragment directive as it appears in a URI, including the fragment
		# delimiter and marker. Empty collections produce an empty string.
		"""
		if not self.directives:
			return ''
		return '#' + grammar.marker + self.value()

	def decoded(self) -> typing.Optional[str]:
		"""
		# The fragment directive, including the marker, with percent escapes
		# substituted. &None when the collection is empty.
		"""
		if not self.directives:
			return None
		return codec.decode_field(str(self))

	def equals(self, operand) -> bool:
		"""
		# Whether &operand, a &FragmentDirectives instance or a fragment directive string,
		# serializes identically to &self.

		# Strings that cannot be parsed and objects of any other type are never equal.
		"""
		if isinstance(operand, str):
			operand = self.try_from_string(operand)
			if operand is None:
				return False
		elif not isinstance(operand, FragmentDirectives):
			return False

		return operand.value() == self.value()

def parse(raw:str) -> FragmentDirectives:
	"""
	# Parse a fragment directive; &FragmentDirectives.from_string.
	"""
	return FragmentDirectives.from_string(raw)

def attempt(raw:str) -> typing.Optional[FragmentDirectives]:
	"""
	# Parse a fragment directive returning &None on failure; &FragmentDirectives.try_from_string.
	"""
	return FragmentDirectives.try_from_string(raw)

def from_uri(uri:str) -> FragmentDirectives:
	return FragmentDirectives.from_uri(uri)
