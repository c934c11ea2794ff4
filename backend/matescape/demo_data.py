"""Bundled tournament records used when no TOURNAMENTS_FILE is configured."""

DEMO_TOURNAMENTS = [
    {
        "id": 1,
        "name": "Rapid 10|0 & 30|0",
        "startDate": "2025-06-20",
        "endDate": "2025-06-24",
        "type": "rapid",
        "status": "ongoing",
        "players": "07",
        "winners": {"gold": "TBD", "silver": "TBD", "bronze": "TBD"},
        "excelLink": "https://docs.google.com/spreadsheets/d/16Kk1npleEeacmeK6VBTgHqcJDBwGJApglwTN5XLLjdQ/edit?gid=0#gid=0",
    },
    {
        "id": 2,
        "name": "Blitz 5|0",
        "startDate": "2025-06-25",
        "endDate": "2025-06-30",
        "type": "blitz",
        "status": "upcoming",
        "players": "32",
        "winners": {"gold": "TBD", "silver": "TBD", "bronze": "TBD"},
        "excelLink": "#",
    },
    {
        "id": 3,
        "name": "Bullet 1|0 Arena",
        "date": "2025-07-05",
        "type": "bullet",
        "status": "upcoming",
        "players": "TBA",
        "excelLink": "#",
    },
    {
        "id": 4,
        "name": "Classical 90|30 Open",
        "startDate": "2025-05-10",
        "endDate": "2025-05-18",
        "type": "classical",
        "status": "completed",
        "players": 16,
        "winners": {"gold": "A. Rahman", "silver": "M. Costa", "bronze": "J. Novak"},
        "excelLink": "#",
    },
]
