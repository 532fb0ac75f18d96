"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import AttendanceStatus

DEFAULT_RECENT_REVIEWS = 3
DEFAULT_STORE_LATENCY_MS = 0

# Window the summary prompt looks at.
SUMMARY_ATTENDANCE_LIMIT = 5
SUMMARY_REVIEW_LIMIT = 3

FULL_NAME_MIN_LENGTH = 3
ADDRESS_MIN_LENGTH = 5

AVATAR_URLS = (
    "https://images.unsplash.com/photo-1544005313-94ddf0286df2?w=256&h=256&fit=crop",
    "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?w=256&h=256&fit=crop",
    "https://images.unsplash.com/photo-1438761681033-6461ffad8d80?w=256&h=256&fit=crop",
    "https://images.unsplash.com/photo-1506794778202-cad84cf45f1d?w=256&h=256&fit=crop",
    "https://images.unsplash.com/photo-1534528741775-53994a69daeb?w=256&h=256&fit=crop",
)

# Each generation contract accepts a narrower status vocabulary than the store keeps.
SUMMARY_STATUS_MAP = {
    AttendanceStatus.PRESENT: "present",
    AttendanceStatus.LATE: "present",
    AttendanceStatus.ABSENT: "absent",
    AttendanceStatus.LEAVE: "leave",
}

INSIGHT_STATUS_MAP = {
    AttendanceStatus.PRESENT: "present",
    AttendanceStatus.LATE: "late",
    AttendanceStatus.ABSENT: "absent",
    AttendanceStatus.LEAVE: "absent",
}
