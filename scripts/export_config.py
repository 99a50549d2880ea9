X64DBG_EXPORT_VERSION = "0.1.0"

# Only user-placed notes are exported; analysis bookmarks would flood the database.
DEFAULT_BOOKMARK_CATEGORY = "Note"

# Headless CLI defaults.
DEFAULT_OUT_DIR = "out"
DEFAULT_OUTPUT_SUFFIX = ".json"

ERROR_FILE_SUFFIX = ".export_error.txt"
PROFILE_FILE_SUFFIX = ".profile.json"
