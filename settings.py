APP_NAME = "Curses"

INITIAL_ITEMS = ["Item 1", "Item 2", "Item 3", "Item 4", "Item 5"]

# counter is an unsigned byte; gauge shows 0-100%
COUNTER_MAX = 255
GAUGE_MAX = 100

# layout (rows / cells)
MARGIN = 1
HEADER_HEIGHT = 3
FOOTER_HEIGHT = 3
BODY_MIN_HEIGHT = 5
INFO_HEIGHT = 5

HEADER_TITLE = "Header"
LIST_TITLE = "List (↑/↓ to navigate, 'a' to add, 'd' to delete)"
INFO_TITLE = "Info"
PROGRESS_TITLE = "Progress"

KEY_ESC = 27

# Make ESC snappy
ESCDELAY_MS = "25"
