"""
# textfragment is a Python project for working with the directives carried by
# URI fragments. It structures fragment directive strings read from a URI and
# serializes directives that are to be placed in one; it does not search
# documents for the text that a directive identifies.

# [ Fragment Directives ]
# -----------------------

# Parsing and serialization is provided by &.directives.library.FragmentDirectives.
# The directive types, &.directives.types.TextDirective and
# &.directives.types.GenericDirective, can be used directly to build fragments.
"""
__factor_type__ = 'context'
