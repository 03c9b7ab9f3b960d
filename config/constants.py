"""
Centralized constants for notebridge.
All tuning numbers used by the analyzer and converters live here.
"""

# ===========================================
# DOCUMENT ANALYSIS
# ===========================================
WORDS_PER_PAGE = 250                  # words per estimated page
ARTICLE_MIN_HEADINGS = 3              # "article" needs at least this many headings
ARTICLE_MIN_PARAGRAPHS = 5            # ... and this many paragraphs
NOTES_MAX_HEADINGS = 2                # "notes" allows at most this many headings
NOTES_MAX_PARAGRAPHS = 3              # ... and this many paragraphs

# ===========================================
# SPREADSHEET ANALYSIS
# ===========================================
PIE_CHART_MAX_POINTS = 6              # more data points than this -> bar chart
BAR_CHART_MIN_ROWS = 5                # first table with more rows than this -> bar chart
MAX_LABEL_LENGTH = 50                 # numeric labels must be shorter than this

# ===========================================
# PRESENTATION ANALYSIS
# ===========================================
MAX_SLIDE_BULLETS = 6                 # bullets kept per generated slide
FALLBACK_SENTENCE_COUNT = 4           # sentences used when a section has no bullets
MIN_SENTENCE_LENGTH = 10              # sentence length bounds, both exclusive
MAX_SENTENCE_LENGTH = 120             # (exclusive)
MINUTES_PER_SLIDE = 1.5               # speaking time estimate
SPEAKER_NOTE_SENTENCES = 2            # sentences kept in generated notes

# ===========================================
# QUESTION DETECTION
# ===========================================
OPTION_WINDOW = 15                    # lines scanned after a question
MAX_BULLET_OPTIONS = 10               # plain bullets collected as options
MAX_OPTION_LENGTH = 80                # longer bullets are not options
MIN_QUESTION_LENGTH = 5               # "?" lines must be longer than this
MAX_MULTIPLE_CHOICE_OPTIONS = 5       # more options than this -> dropdown
DEFAULT_QUESTION_POINTS = 1           # quiz points when none detected

# ===========================================
# FORM SUMMARIES
# ===========================================
SUMMARY_SAMPLE_ANSWERS = 5            # unique free-text answers listed verbatim

# ===========================================
# KEYWORD LOCALES
# ===========================================
DEFAULT_KEYWORD_LOCALES = ["en", "ko"]

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/notebridge.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
