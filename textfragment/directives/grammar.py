"""
# Parse directive strings.

# A fragment directive is the portion of a URI fragment following the
# (characters)`:~:` marker. It is a series of `&` separated directives
# that are either text directives or generic `key=value` pairs:

#!/text
	text=[prefix-,]start[,end][,-suffix]&key=value

# Literal separators inside text directive fields are always percent encoded,
# so splitting on the raw separator characters is unambiguous.

# [ Entry Points ]
# - &parse_fragment_body
# - &parse_token
# - &split_fragment
"""
import typing

from . import codec
from .types import Directive, TextDirective, GenericDirective
from .types import InvalidDirective, MalformedDirective

marker = ':~:'
separator = '&'
text_key = 'text'

def split_fragment(fragment:str) -> typing.Tuple[str, typing.Optional[str]]:
	"""
	# Separate the plain fragment from the directive body at the first &marker.

	# Returns a pair whose second item is &None when no marker is present.
	"""
	index = fragment.find(marker)
	if index == -1:
		return (fragment, None)
	return (fragment[:index], fragment[index+len(marker):])

def split_body(raw:str, marker_required:bool=False) -> typing.List[str]:
	"""
	# Split a fragment directive into its directive tokens.

	# A leading &marker is discarded. When &marker_required is &True,
	# its absence causes &MalformedDirective to be raised.
	"""
	if raw.startswith(marker):
		body = raw[len(marker):]
	elif marker_required:
		raise MalformedDirective(raw, "fragment directive marker is not present")
	else:
		body = raw

	if not body:
		return []
	return body.split(separator)

def parse_text(body:str, decode=codec.decode_field) -> TextDirective:
	"""
	# Construct a &TextDirective from the value of a (id)`text` directive.
	"""
	fields = body.split(',')
	prefix = end = suffix = None

	# Both markers are identified before removal so that (characters)`a-,-b`
	# is not read as a prefix followed by a start.
	multiple = len(fields) > 1
	has_prefix = multiple and fields[0].endswith('-')
	has_suffix = multiple and fields[-1].startswith('-')

	if has_suffix:
		suffix = fields.pop()[1:]
	if has_prefix:
		prefix = fields.pop(0)[:-1]

	if not fields:
		raise MalformedDirective(body, "text directive has no start")
	if len(fields) > 2:
		raise MalformedDirective(body, "text directive has too many fields")

	start = fields[0]
	if len(fields) == 2:
		end = fields[1]

	try:
		return TextDirective(
			decode(start),
			end = decode(end) if end is not None else None,
			prefix = decode(prefix) if prefix is not None else None,
			suffix = decode(suffix) if suffix is not None else None,
		)
	except InvalidDirective as err:
		raise MalformedDirective(body, str(err)) from err

def parse_token(token:str) -> Directive:
	"""
	# Construct the &Directive described by a single directive string.
	"""
	key, eq, body = token.partition('=')
	if not eq:
		raise MalformedDirective(token, "directive has no value")

	if key == text_key:
		return parse_text(body)

	try:
		return GenericDirective(token)
	except InvalidDirective as err:
		raise MalformedDirective(token, str(err)) from err

def parse_fragment_body(raw:str, marker_required:bool=False) -> typing.List[Directive]:
	"""
	# Parse all the directives in &raw in the order that they appear.

	# An empty body produces an empty list.
	"""
	return [parse_token(x) for x in split_body(raw, marker_required=marker_required)]

if __name__ == '__main__':
	import sys
	for x in parse_fragment_body(sys.argv[1]):
		print(repr(x))
