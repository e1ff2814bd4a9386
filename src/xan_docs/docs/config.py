"""xan documentation resource names.

Every documentation blob lives in a single resources directory (see
`xan_docs.config.DocsConfig.resources_root`). The structured references are
JSON; the cheatsheets and preludes are Markdown-like free text.
"""

# Structured references
OPERATORS_FILE = "operators.json"
FUNCTIONS_FILE = "functions.json"
AGGS_FILE = "aggs.json"
SCRAPING_FILE = "scraping.json"

# Free-form text
CHEATSHEET_FILE = "cheatsheet.md"
SCRAPING_CHEATSHEET_FILE = "scraping.md"
FUNCTIONS_PRELUDE_FILE = "functions_prelude.txt"
AGGS_PRELUDE_FILE = "aggs_prelude.txt"

# Prose in terminal output is wrapped to this many columns
WRAP_WIDTH = 81

# Indentation used for entries and fenced code in terminal output
INDENT = "    "
