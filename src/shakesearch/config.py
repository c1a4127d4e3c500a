import os

# Characters of context kept on each side of a match
CONTEXT_WIDTH: int = 50

# Highlight markers wrapped around the matched text in a snippet
MARK_OPEN: str = "<mark>"
MARK_CLOSE: str = "</mark>"

# Corpus source (single text file, read once at startup)
CORPUS_PATH: str = os.environ.get("SHAKESEARCH_CORPUS", "completeworks.txt")

# utf-8-sig drops a leading BOM; undecodable bytes become U+FFFD (one char each)
ENCODING: str = "utf-8-sig"
ENCODING_ERRORS: str = "replace"

# /* ~~~ web transport defaults ~~~ */
DEFAULT_HOST: str = "127.0.0.1"
# the PORT environment variable overrides this in frontend.web.main
DEFAULT_PORT: int = 3001

# Progress logging (set SHAKESEARCH_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("SHAKESEARCH_VERBOSE") == "1"
