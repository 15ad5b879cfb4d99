from asciishade.charsets import DIGITS

# Shell defaults
DEFAULT_CHARSET = DIGITS
DEFAULT_RESOLUTION = 2
MIN_CHARSET_SIZE = 2
PROMPT = ">>> "
EXIT_COMMAND = "exit"

# Glyph masks are square, GLYPH_RESOLUTION pixels on a side
GLYPH_RESOLUTION = 16
GLYPH_THRESHOLD = 128

# HTML renderer
HTML_OUTPUT_PATH = "out.html"
HTML_FONT = "Courier New"

# Relative luminance weights (Rec. 709)
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722
RGB_MAX = 255.0
