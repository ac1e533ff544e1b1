"""Bundled sample work log for development and demos."""

from __future__ import annotations

import logging
from typing import List

from sqlmodel import Session

from daily_logger.repositories import day_repository, user_repository
from daily_logger.schemas import ActivityInput, DayTimes, SignUpRequest, WorkSchedulePeriod
from daily_logger.services import reconcile_service, user_service
from daily_logger.services.date_format_service import normalize_date

logger = logging.getLogger(__name__)

DEMO_USER_EMAIL = "demo@example.com"

# 日本語: 元の入力形式(日付 dd.mm.yyyy、時刻 hh.mm)のまま保持 / English: Kept in the raw entry format (dd.mm.yyyy dates, hh.mm times)
DEMO_WORK_LOG = [
    {
        "date": "06.06.2025",
        "time_in": "06.30",
        "time_out": "14.30",
        "activities": [
            {
                "content": "Reported to station, orientation and team instructions",
                "time_start": "07.00",
                "time_end": "14.30",
            },
        ],
    },
    {
        "date": "09.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Reported to studio control room", "time_start": "07.00"},
            {"content": "Got initial exposure to control room software like Black magic ATEM and Vmix"},
        ],
    },
    {
        "date": "10.06.2025",
        "time_in": "07.30",
        "time_out": "14.30",
        "activities": [{"content": "Assisted in setting up editing software on a new computer"}],
    },
    {
        "date": "11.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {
                "content": "Learnt how to use insta playout to set up program lineups",
                "time_start": "07.00",
                "time_end": "10:30",
            },
            {"content": "Assisted in switching between programs"},
        ],
    },
    {
        "date": "12.06.2025",
        "time_in": "07.30",
        "time_out": "14.30",
        "activities": [
            {"content": "Interacted with the editing software Adobe Premiere Pro and Adobe Photoshop"},
            {"content": "Assisted editors to create a news banner"},
        ],
    },
    {
        "date": "13.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Assisted in setting up DaVinci Resolve on computers", "time_start": "07.00", "time_end": "10:30"},
            {"content": "Assisted in switching between programs"},
        ],
    },
    {
        "date": "16.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Diagnosed ethernet connection issues in the editing room"},
            {"content": "Checked internet connection to various computers"},
        ],
    },
    {
        "date": "17.06.2025",
        "time_in": "07.30",
        "time_out": "14.30",
        "activities": [
            {"content": "Rewired ethernet connections to the common switcher"},
            {"content": "Did cable management to reduce the ethernet cable"},
        ],
    },
    {
        "date": "18.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Assisted in upgrading computers in the editorial room"},
            {"content": "Assisted with RAM and GPU updates to slower computers in the editorial room"},
        ],
    },
    {
        "date": "19.06.2025",
        "time_in": "07.30",
        "time_out": "14.30",
        "activities": [
            {"content": "Found and replaced faulty hard disks in unused computers to have them back operational"},
            {"content": "Learnt how to handle inner components of computers"},
        ],
    },
    {
        "date": "20.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Tested upgraded computers and set them up for use by the editing teams"},
            {"content": "Assisted with RAM and GPU updates to slower computers in the editorial room"},
        ],
    },
    {
        "date": "23.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Swapped problematic monitors in the editing room"},
            {"content": "Replaced problematic VGA cables"},
        ],
    },
    {
        "date": "24.06.2025",
        "time_in": "07.30",
        "time_out": "14.30",
        "activities": [
            {"content": "Installed and configured software on upgraded machines"},
            {"content": "Worked on ad hoc IT support tasks"},
            {"content": "Fixed minor ethernet issues"},
        ],
    },
    {
        "date": "25.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Performed ad hoc IT support tasks"},
            {"content": "Observed program and show editing in the editors' room"},
        ],
    },
    {
        "date": "26.06.2025",
        "time_in": "07.30",
        "time_out": "14.30",
        "activities": [{"content": "Began assessing an unsupported graphics issue on one of the restored computers"}],
    },
    {
        "date": "27.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {
                "content": "Installed a supported OS on the computer as its drivers did not support "
                "its older hardware on newer operating systems",
            },
            {"content": "Observed program and show editing in the editors' room"},
        ],
    },
    {
        "date": "28.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [{"content": "Set up editing software on the fixed computer for use"}],
    },
    {
        "date": "30.06.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "The radio's streaming PC bootup kept failing, began assessment"},
            {
                "content": "Attempted a safe boot and used the terminal to get it to start before a show; "
                "the bootup files were corrupt",
            },
        ],
    },
    {
        "date": "01.07.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Identified the problem as corrupt Windows bootup files, probably caused by a loose hard disk"},
            {"content": "Backed up key program recordings for the disk C wipe"},
        ],
        "special_activities": [
            {"content": "Visited the TV room to learn about light placements and how to set up cameras"},
        ],
    },
    {
        "date": "02.07.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Performed a fresh OS install"},
            {"content": "Restored backed up files to restore operations"},
        ],
    },
    {
        "date": "03.07.2025",
        "time_in": "14.30",
        "time_out": "18.30",
        "activities": [
            {"content": "Resolved software installation issues on the radio PC after the fix"},
            {"content": "Performed ad hoc IT support tasks: troubleshot slow computer issues"},
        ],
        "special_activities": [
            {"content": "Joined editing teams to observe how adverts were being created"},
        ],
    },
]


def seed_demo_log(db: Session) -> List[str]:
    # 日本語: 既存の日はスキップして残りを投入 / English: Skip dates that already exist, reconcile the rest
    messages = []
    for entry in DEMO_WORK_LOG:
        date = normalize_date(entry["date"])
        if date is None:
            messages.append(f"Skipped unreadable date {entry['date']}")
            continue
        if day_repository.day_exists(db, date) is not None:
            messages.append(f"Skipped {date.isoformat()} (already recorded)")
            continue

        saved = reconcile_service.reconcile_day(
            db,
            date,
            DayTimes(time_in=entry.get("time_in"), time_out=entry.get("time_out")),
            [ActivityInput(**item) for item in entry.get("activities", [])],
            [ActivityInput(**item) for item in entry.get("special_activities", [])],
        )
        if saved:
            messages.append(f"Seeded {date.isoformat()}")
        else:
            messages.append(f"Failed to seed {date.isoformat()}")
    logger.info("Demo log seeding finished: %s entries processed", len(DEMO_WORK_LOG))
    return messages


def seed_demo_user(db: Session) -> int | None:
    """Create the demo account if it is missing and return its id."""
    existing = user_repository.user_exists(db, DEMO_USER_EMAIL)
    if existing is not None:
        return existing
    response = user_service.sign_up_user(
        db,
        SignUpRequest(
            name="Demo User",
            email=DEMO_USER_EMAIL,
            password="demo-password",
            roles=["IT Support Intern"],
            work_schedule=[
                WorkSchedulePeriod(start="Monday", end="Friday", expected_time_in="07:30", expected_time_out="14:30"),
            ],
        ),
    )
    return response.id
