from __future__ import annotations

from typing import Any

# Small, network-free feed covering each category for dry runs.
SAMPLE_ITEMS: tuple[dict[str, Any], ...] = (
    {
        "text": "Just completed a 5.04 km run - Easy loop around the lake with Sam! "
        "https://t.co/abc123 #Runkeeper",
        "created_at": "2018-09-29T14:02:11Z",
    },
    {
        "text": "Just completed a 3.10 mi walk with @Runkeeper. Check it out! "
        "https://t.co/def456 #Runkeeper",
        "created_at": "2018-09-30T09:15:00Z",
    },
    {
        "text": "Just completed a 12.40 mi bike ride with @Runkeeper. Check it out! "
        "https://t.co/ghi789 #Runkeeper",
        "created_at": "2018-10-02T18:40:00Z",
    },
    {
        "text": "Just posted a 6.21 mi run - Marathon training week 3 https://t.co/jkl012 #Runkeeper",
        "created_at": "2018-10-03T07:30:00Z",
    },
    {
        "text": "Watch my run right now with @Runkeeper Live https://t.co/mno345 #RKLive",
        "created_at": "2018-10-04T06:00:00Z",
    },
    {
        "text": "Achieved a new personal record with #Runkeeper: Fastest 5K! https://t.co/pqr678",
        "created_at": "2018-10-05T08:12:00Z",
    },
    {
        "text": "Just set a goal on #Runkeeper to run 100 mi by Dec 31! https://t.co/stu901",
        "created_at": "2018-10-06T10:00:00Z",
    },
    {
        "text": "Rest day. Legs say thank you.",
        "created_at": "2018-10-07T21:00:00Z",
    },
)
