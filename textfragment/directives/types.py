"""
# Directive value types.

# Directives are immutable tuples. Equality and hashing are defined by the
# serialized form, `name=value`, so that independently constructed directives
# describing the same text compare equal.

# [ Types ]
# /&TextDirective/
	# The (id)`text` directive identifying a passage with a start,
	# and an optional end, prefix, and suffix.
# /&GenericDirective/
	# Any other directive; kept verbatim.
"""
import typing

from . import codec

class Error(ValueError):
	"""
	# Base class for directive errors.
	"""

class InvalidDirective(Error):
	"""
	# The arguments given to a directive constructor do not describe a valid directive.
	"""

class MalformedDirective(Error):
	"""
	# A directive or fragment string could not be parsed.

	# [ Properties ]
	# /source/
		# The text that was being parsed.
	"""

	def __init__(self, source:str, reason:str):
		super().__init__(source, reason)
		self.source = source
		self.reason = reason

	def __str__(self):
		return "%s: %r" %(self.reason, self.source)

class Directive(tuple):
	"""
	# Base class of the directive variants.
	"""
	__slots__ = ()

	def name(self) -> str:
		raise NotImplementedError("name")

	def value(self) -> str:
		raise NotImplementedError("value")

	def __str__(self):
		return self.name() + '=' + self.value()

	def __repr__(self):
		return "%s.from_string(%r)" %(self.__class__.__name__, str(self))

	def __eq__(self, operand, isinstance=isinstance):
		if isinstance(operand, Directive):
			return str(self) == str(operand)
		if isinstance(operand, tuple):
			# Plain tuples never match.
			return False
		return NotImplemented

	def __ne__(self, operand):
		r = self.__eq__(operand)
		if r is NotImplemented:
			return r
		return not r

	def __hash__(self):
		return hash(str(self))

	def __getnewargs__(self):
		return tuple(self)

	def equals(self, operand) -> bool:
		"""
		# Whether &operand, a &Directive or a directive string, has the same
		# serialized form as &self.

		# Strings are parsed before being compared; strings that do not parse
		# and objects of any other type are never equal.
		"""
		if isinstance(operand, str):
			from .grammar import parse_token
			try:
				operand = parse_token(operand)
			except Error:
				return False
		elif not isinstance(operand, Directive):
			return False

		return str(operand) == str(self)

class TextDirective(Directive):
	"""
	# Text directive identifying a passage by its &start and, optionally, its &end,
	# and the text immediately surrounding it, &prefix and &suffix.

	# Fields are stored decoded; &value encodes them.
	"""
	__slots__ = ()

	def __new__(Class, start:str, end:str=None, prefix:str=None, suffix:str=None):
		if not start:
			raise InvalidDirective("text directive start cannot be empty")
		for field in (end, prefix, suffix):
			if field is not None and not field:
				raise InvalidDirective("text directive fields cannot be empty strings")

		return super().__new__(Class, (start, end, prefix, suffix))

	@classmethod
	def from_value(Class, body:str):
		"""
		# Parse the value of a text directive; the portion following (characters)`text=`.
		"""
		from .grammar import parse_text
		return parse_text(body)

	@classmethod
	def from_string(Class, token:str):
		"""
		# Parse a complete text directive string, `text=...`.
		"""
		key, eq, body = token.partition('=')
		if key != 'text' or not eq:
			raise MalformedDirective(token, "not a text directive")
		return Class.from_value(body)

	@property
	def start(self) -> str:
		return self[0]

	@property
	def end(self) -> typing.Optional[str]:
		return self[1]

	@property
	def prefix(self) -> typing.Optional[str]:
		return self[2]

	@property
	def suffix(self) -> typing.Optional[str]:
		return self[3]

	def name(self) -> str:
		return 'text'

	def value(self, encode=codec.encode_field) -> str:
		start, end, prefix, suffix = self
		parts = []

		if prefix is not None:
			parts.append(encode(prefix) + '-')
		parts.append(encode(start))
		if end is not None:
			parts.append(encode(end))
		if suffix is not None:
			parts.append('-' + encode(suffix))

		return ','.join(parts)

	def __repr__(self):
		return "%s(%r, end=%r, prefix=%r, suffix=%r)" %(
			self.__class__.__name__, self.start, self.end, self.prefix, self.suffix
		)

	# Transformations. The receiver is returned when nothing would change.

	def with_start(self, text:str):
		if text == self.start:
			return self
		return self.__class__(text, self.end, self.prefix, self.suffix)

	def with_end(self, text:typing.Optional[str]):
		if text == self.end:
			return self
		return self.__class__(self.start, text, self.prefix, self.suffix)

	def with_prefix(self, text:typing.Optional[str]):
		if text == self.prefix:
			return self
		return self.__class__(self.start, self.end, text, self.suffix)

	def with_suffix(self, text:typing.Optional[str]):
		if text == self.suffix:
			return self
		return self.__class__(self.start, self.end, self.prefix, text)

class GenericDirective(Directive):
	"""
	# A directive that is not interpreted. The `key=value` string is kept exactly.
	"""
	__slots__ = ()

	def __new__(Class, string:str):
		key, eq, value = string.partition('=')
		if not eq:
			raise InvalidDirective("directive has no value separator: " + repr(string))
		if not key:
			raise InvalidDirective("directive has an empty name: " + repr(string))
		if '&' in string:
			raise InvalidDirective("directive contains a separator: " + repr(string))
		if key == 'text':
			raise InvalidDirective("'text' directives must be built with TextDirective")

		return super().__new__(Class, (key, value))

	@classmethod
	def from_string(Class, string:str):
		return Class(string)

	def name(self) -> str:
		return self[0]

	def value(self) -> str:
		return self[1]

	def __getnewargs__(self):
		return (str(self),)
