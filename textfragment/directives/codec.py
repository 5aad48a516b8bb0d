"""
# Percent encoding for the fields of text directives.

# The directive grammar uses (characters)`,`, (characters)`-`, and (characters)`&`
# as separators, so literal occurrences inside a field must be escaped in order
# to survive a subsequent parse. Percent escapes already present in a field are
# considered to belong to the surrounding URI encoding and are not escaped again.

# [ Entry Points ]
# - &encode_field
# - &decode_field
"""
import re

pct_encode = '%%%0.2X'.__mod__

# RFC 3986 fragment characters excluding the ones used by the directive grammar.
alpha = 'abcdefghijklmnopqrstuvwxyz'
unreserved = alpha + alpha.upper() + '0123456789' + '._~'
fragment_chars = unreserved + "!$'()*+;=:@/?"
separator_chars = ',-&'
del alpha

# Runs of escapes, excluding escaped percent signs.
percent_escapes_re = re.compile('(%(?!25)[0-9a-fA-F]{2,2})+')
escape_field_re = re.compile('(%%[0-9a-fA-F]{2,2})|([^%s])' %(re.escape(fragment_chars),))

def re_pct_encode(m):
	if m.group(1) is not None:
		# Already escaped.
		return m.group(1)
	return ''.join(map(pct_encode, m.group(2).encode('utf-8', 'surrogateescape')))

def re_pct_decode(m):
	octets = bytes.fromhex(m.group(0).replace('%', ''))
	return octets.decode('utf-8', 'surrogateescape')

def encode_field(text:str, _re=escape_field_re, _re_pct_encode=re_pct_encode) -> str:
	"""
	# Escape the &text of a text directive field for use inside a fragment.

	# Spaces, the grammar's separators, and any character outside of the
	# fragment set are replaced with the percent escapes of their UTF-8 octets.
	"""
	return _re.sub(_re_pct_encode, text)

def decode_field(text:str, _re=percent_escapes_re, _re_pct_decode=re_pct_decode) -> str:
	"""
	# Substitute the percent escapes in &text with the characters they represent.

	# Malformed escapes and (characters)`%25` are left as they are so that
	# &encode_field restores the original escapes.
	"""
	return _re.sub(_re_pct_decode, text)
