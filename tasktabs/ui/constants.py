"""UI constants for TaskTabs application."""

# Notification settings
MAX_TITLE_LENGTH_IN_NOTIFICATION = 30
NOTIFICATION_TIMEOUT_SHORT = 2
NOTIFICATION_TIMEOUT_MEDIUM = 3
NOTIFICATION_TIMEOUT_LONG = 5

# Screen stack size when no modal is open
SCREEN_STACK_SIZE_MAIN_APP = 1

# Bucket names used by the clear confirmation flow
BUCKET_ACTIVE = "active"
BUCKET_TRASH = "trash"
