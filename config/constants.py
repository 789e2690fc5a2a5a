"""
Centralized constants for pandoc-quotes.
All fixed names and defaults extracted from the codebase.
"""

# ===========================================
# PROGRAM
# ===========================================
PROGRAM_NAME = 'pandoc-quotes'
VERSION = '0.2.0'

# ===========================================
# DOCUMENT METADATA FIELDS
# ===========================================
META_QUOT_MARKS = 'quot-marks'        # explicit four glyphs (string or list)
META_QUOT_LANG = 'quot-lang'          # language used only for quotation marks
META_LANG = 'lang'                    # document language
LANG_ATTRIBUTE = 'lang'               # Span/Div key-value attribute
GLYPH_COUNT = 4                       # primary left/right, secondary left/right

# ===========================================
# OVERRIDE FILES
# ===========================================
QUOT_MARKS_FILENAME = 'quot-marks.yaml'
PANDOC_DATA_DIR_NAME = 'pandoc'       # under $XDG_DATA_HOME / ~/.local/share
PANDOC_LEGACY_DATA_DIR = '.pandoc'    # under $HOME

# ===========================================
# PANDOC
# ===========================================
PANDOC_EXECUTABLE = 'pandoc'
PANDOC_TIMEOUT_SECONDS = 120
PANDOC_DEFAULT_FROM = 'markdown'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'WARNING'
LOG_FORMAT = PROGRAM_NAME + ': %(levelname)s: %(message)s'
LOG_FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = ''                         # empty: no file logging
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
