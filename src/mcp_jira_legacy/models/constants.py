"""
Constants for the MCP Jira legacy models.

These are the defaults every normalized field falls back to when the
server payload omits it or carries an unusable value.
"""

# Common defaults
EMPTY_STRING = ""
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"
NONE_VALUE = "None"

# XML tree conventions used by the search feed parser
XML_ATTRIBUTE_PREFIX = "@_"
XML_TEXT_KEY = "#text"

# Wrapper key used by value-wrapped REST fields
VALUE_KEY = "value"

# Jira defaults
JIRA_DEFAULT_MAX_RESULTS = 50
