"""
# Scroll to text fragment directives.

# The (characters)`:~:` portion of a URI fragment holds directives that are
# not part of the fragment identifier. The (id)`text` directive describes a
# passage of a document that should be highlighted.
"""
__factor_type__ = 'project'
