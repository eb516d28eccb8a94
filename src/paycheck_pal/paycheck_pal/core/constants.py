"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60
MINUTES_PER_DAY = 24 * 60

HALF_HOUR_STEP = 0.5

DEFAULT_WAGE_PER_HOUR = 0.0
DEFAULT_PAY_WINDOW_START_MINUTES = 9 * 60
DEFAULT_PAY_WINDOW_END_MINUTES = 18 * 60

DEFAULT_RECORDS_FILENAME = "work_records.json"
DEFAULT_SETTINGS_FILENAME = "pay_settings.json"
STORAGE_FORMAT_VERSION = 1

SUMMARY_MONTH_OFFSET_LIMIT = 12
