# We use native strings for all the re patterns. Header names and values are
# handled as str throughout; only the wire helpers deal in bytes.

# https://svn.tools.ietf.org/svn/wg/httpbis/specs/rfc7230.html#whitespace
#  OWS            = *( SP / HTAB )
#                 ; optional whitespace
OWS = r"[ \t]*"

# https://svn.tools.ietf.org/svn/wg/httpbis/specs/rfc7230.html#rule.token.separators
#   token          = 1*tchar
#
#   tchar          = "!" / "#" / "$" / "%" / "&" / "'" / "*"
#                  / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~"
#                  / DIGIT / ALPHA
#                  ; any VCHAR, except delimiters
token = r"[-!#$%&'*+.^_`|~0-9a-zA-Z]+"

# https://svn.tools.ietf.org/svn/wg/httpbis/specs/rfc7230.html#header.fields
#  field-name     = token
field_name = token

# The standard says:
#
#  field-value    = *( field-content / obs-fold )
#  field-content  = field-vchar [ 1*( SP / HTAB ) field-vchar ]
#  field-vchar    = VCHAR / obs-text
#
#   VCHAR          =  %x21-7E
#   obs-text       = %x80-FF
#
# The standard definition of field-content disallows a single visible
# character surrounded by whitespace, e.g. "foo a bar". See:
#
#   https://www.rfc-editor.org/errata_search.php?rfc=7230&eid=4189
#
# so field_content is fixed up to allow it. obs-fold is never accepted from
# callers.
vchar_or_obs_text = r"[\x21-\x7e\x80-\xff]"
field_vchar = vchar_or_obs_text
field_content = r"{field_vchar}+(?:[ \t]+{field_vchar}+)*".format(**globals())
field_value = r"({field_content})?".format(**globals())

# A value as handed to append()/set(), before any trimming.
padded_field_value = r"{OWS}{field_value}{OWS}".format(**globals())
