"""All magic numbers and configuration constants."""

CHAT_MODEL = "gpt-3.5-turbo"                 # generative text model
TTS_MODEL = "tts-1-hd"                       # high quality speech model
TTS_FORMAT = "mp3"                           # requested audio encoding
AUDIO_MEDIA_TYPE = "audio/mpeg"              # media type of the assembled asset
MAX_TTS_CHARS = 4096                         # speech service input limit per request
WORDS_PER_MINUTE = 150                       # target word count heuristic
TOKENS_PER_MINUTE = 200                      # transcript token budget per minute
MAX_SCRIPT_TOKENS = 4000                     # transcript token ceiling
TITLE_MAX_TOKENS = 100
DESCRIPTION_MAX_TOKENS = 150
SCRIPT_TEMPERATURE = 0.8                     # higher creativity for natural conversation
AUX_TEMPERATURE = 0.7                        # title and description requests
REQUEST_TIMEOUT = 60.0                       # seconds per HTTP request
TTS_RETRY_COUNT = 3                          # max attempts per audio chunk
TTS_RETRY_BASE_DELAY = 1.0                   # seconds, base delay for exponential backoff
DEFAULT_VOICE = "alloy"
DEFAULT_SPEED = 1.0
DEFAULT_STYLE = "Joe Rogan Style"
DEFAULT_DURATION = "15"                      # minutes
MAX_SPEAKERS = 4
PREVIEW_DURATION_MS = 60000                  # 60s preview sample
OUTPUT_DIR = "output"
VERSION = "0.1.0"
