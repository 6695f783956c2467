"""Constants and defaults."""

DEFAULT_PORT = 3000

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

SUNDAY_LABEL = "Sunday"
