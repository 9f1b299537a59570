"""Centralized constants for eventlink.

Hosts, calendar-file literals and the reference tables the form offers
(timezones, reminders, week days) all live here so the core modules stay
free of hardcoded strings.
"""

# Header image shown when an event carries none of its own
DEFAULT_IMAGE_URL = "https://i.postimg.cc/WzvQY4mR/Add-To-My-Calendar.png"

# Embedded (data:) images longer than this are dropped from share tokens
MAX_EMBEDDED_IMAGE_LENGTH = 1000
EMBEDDED_IMAGE_PREFIX = "data:"

# Share link
SHARE_QUERY_PARAM = "data"
SHORTEN_MIN_LENGTH = 150

# Characters left unescaped by a browser's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"

# ICS calendar constants
ICS_PRODID = "-//Universal Event Link Generator//EN"
ICS_VERSION = "2.0"
ICS_CALSCALE = "GREGORIAN"
ICS_METHOD = "PUBLISH"
ICS_STATUS = "CONFIRMED"
ICS_UID_DOMAIN = "universal-link-gen.com"
ICS_UID_SUFFIX_LENGTH = 7
ICS_REMINDER_DESCRIPTION = "Reminder"
ICS_MIME_TYPE = "text/calendar;charset=utf-8"
ICS_EXTENSION = ".ics"

# Provider deep links
GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
YAHOO_CALENDAR_URL = "https://calendar.yahoo.com/"
OUTLOOK_CALENDAR_URL = "https://outlook.live.com/calendar/0/deeplink/compose"
GOOGLE_RECUR_PREFIX = "RRULE:"

# Defaults for a blank event
DEFAULT_EVENT_TITLE = "event"
DEFAULT_TIMEZONE = "UTC"
DEFAULT_REMINDER_MINUTES = 30
DEFAULT_START_TIME = "09:00"
DEFAULT_DURATION_MINUTES = 60

TIMEZONES = (
    ("UTC", "UTC (Universal Coordinated Time)"),
    ("America/New_York", "Eastern Time (US & Canada)"),
    ("America/Chicago", "Central Time (US & Canada)"),
    ("America/Denver", "Mountain Time (US & Canada)"),
    ("America/Los_Angeles", "Pacific Time (US & Canada)"),
    ("Europe/London", "London, Edinburgh"),
    ("Europe/Paris", "Paris, Berlin, Rome"),
    ("Asia/Dubai", "Dubai, Abu Dhabi"),
    ("Asia/Singapore", "Singapore"),
    ("Asia/Tokyo", "Tokyo, Osaka"),
    ("Australia/Sydney", "Sydney, Melbourne"),
)

REMINDERS = (
    (15, "15 minutes before"),
    (30, "30 minutes before"),
    (60, "1 hour before"),
    (1440, "24 hours before"),
)

# (code, short label) in the order the form shows them
WEEK_DAYS = (
    ("MO", "M"),
    ("TU", "T"),
    ("WE", "W"),
    ("TH", "T"),
    ("FR", "F"),
    ("SA", "S"),
    ("SU", "S"),
)

# Locale-independent names for display formatting
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
