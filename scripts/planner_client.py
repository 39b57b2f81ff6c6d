#!/usr/bin/env python3
"""
Planner API Client for Scholarix.

Sends courses, wellness logs and deadlines from a JSON file to the
planner API and prints the GPA, streak and reminder plan.

The JSON file may contain any of the keys "courses", "wellness_logs"
and "deadlines", each holding a list of records in the API's format.

Usage:
    python scripts/planner_client.py --file student.json
    python scripts/planner_client.py --file student.json --only gpa
    python scripts/planner_client.py --file student.json --schedule
"""

import os
import sys
import json
import argparse
from typing import Any, Dict, List, Optional

import httpx
from dotenv import load_dotenv


# Load environment variables
load_dotenv()

DEFAULT_API_URL = os.getenv("PLANNER_API_URL", "http://localhost:8083")

SECTIONS = ["gpa", "streak", "reminders"]


class PlannerClient:
    """Thin synchronous client for the planner API."""

    def __init__(self, base_url: str = DEFAULT_API_URL, client: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.Client(base_url=self.base_url, timeout=httpx.Timeout(10.0))

    def _post(self, path: str, payload: Any) -> Any:
        response = self.client.post(path, json=payload)
        response.raise_for_status()
        return response.json()

    def gpa(self, courses: List[Dict]) -> Dict:
        return self._post("/api/academics/gpa", courses)

    def streak(self, logs: List[Dict], as_of: Optional[str] = None) -> Dict:
        payload: Dict[str, Any] = {"logs": logs}
        if as_of:
            payload["asOf"] = as_of
        return self._post("/api/wellness/streak", payload)

    def plan(self, deadline: Dict, now: Optional[str] = None) -> List[Dict]:
        payload: Dict[str, Any] = {"deadline": deadline}
        if now:
            payload["now"] = now
        return self._post("/api/deadlines/reminders/plan", payload)

    def save_deadline(self, deadline: Dict) -> Dict:
        response = self.client.put(f"/api/deadlines/{deadline['id']}", json=deadline)
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        self.client.close()


def print_gpa(result: Dict) -> None:
    print("🎓 GPA")
    print("=" * 60)
    print(f"  Unweighted: {result['unweighted']}")
    print(f"  Weighted:   {result['weighted']}")
    print(f"  Graded courses: {result['gradedCourses']}/{result['totalCourses']}")
    print()


def print_streak(result: Dict) -> None:
    days = result["streak"]
    print("🔥 WELLNESS STREAK")
    print("=" * 60)
    print(f"  {days} day{'s' if days != 1 else ''} as of {result['asOf']}")
    print()


def print_reminders(title: str, reminders: List[Dict]) -> None:
    print(f"⏰ {title}")
    print("-" * 60)
    if not reminders:
        print("  No upcoming reminders.")
    for reminder in reminders:
        print(f"  {reminder['fireAt']:<28} {reminder['title']}")
        print(f"  {'':<28} {reminder['body']}")
    print()


def run(client: PlannerClient, data: Dict, only: Optional[str], schedule: bool, now: Optional[str]) -> None:
    if only in (None, "gpa") and "courses" in data:
        print_gpa(client.gpa(data["courses"]))

    if only in (None, "streak") and "wellness_logs" in data:
        print_streak(client.streak(data["wellness_logs"], as_of=now))

    if only in (None, "reminders"):
        for deadline in data.get("deadlines", []):
            if schedule:
                result = client.save_deadline(deadline)
                reminders = result["reminders"]
            else:
                reminders = client.plan(deadline, now=now)
            print_reminders(deadline.get("title", deadline.get("id", "?")), reminders)


def main():
    parser = argparse.ArgumentParser(
        description="Scholarix Planner API client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --file student.json
  %(prog)s --file student.json --only streak --now 2025-03-10T09:00:00
  %(prog)s --file student.json --schedule
        """,
    )
    parser.add_argument(
        "--file",
        required=True,
        help="JSON file with courses, wellness_logs and deadlines",
    )
    parser.add_argument(
        "--only",
        choices=SECTIONS,
        help="Only compute one section",
    )
    parser.add_argument(
        "--now",
        help="Evaluate as of this ISO timestamp instead of the server clock",
    )
    parser.add_argument(
        "--schedule",
        action="store_true",
        help="Save deadlines and schedule their reminders instead of previewing",
    )
    parser.add_argument(
        "--api-url",
        default=DEFAULT_API_URL,
        help=f"Planner API base URL (default: {DEFAULT_API_URL})",
    )

    args = parser.parse_args()

    try:
        with open(args.file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ Could not read {args.file}: {e}")
        sys.exit(1)

    client = PlannerClient(args.api_url)
    try:
        run(client, data, args.only, args.schedule, args.now)
    except httpx.HTTPError as e:
        print(f"❌ Planner API error: {e}")
        sys.exit(1)
    finally:
        client.close()


if __name__ == "__main__":
    main()
