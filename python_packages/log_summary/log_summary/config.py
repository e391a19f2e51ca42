"""Static configuration for log summary reports"""

TOP_PHRASE_LIMIT = 3
DEFAULT_ENCODING = "utf-8"

EVENT_COUNTS_HEADER = "---- Event_Type Occurances ----"
MESSAGE_PHRASES_HEADER = "---- Most Frequent Message Phrase For {event_type} Events ----"

TITLE = "magenta"
EVENT_TYPE = "cyan"
COUNT = "white"
MESSAGE = "yellow"

# Named styles used by the reporters
REPORT_THEME = {
    "title": TITLE,
    "event_type": EVENT_TYPE,
    "count": COUNT,
    "message": MESSAGE,
}
