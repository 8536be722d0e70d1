"""
File: cli.py
Purpose: pd-incidents command line: get/list/resolve/acknowledge/snooze incidents and print JSON.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional
import httpx

from .client import Client
from .config import Settings, settings as default_settings
from .errors import PagerDutyError
from .logging_setup import configure_logging
from .schemas import (
    IncidentAcknowledgeBody,
    IncidentResolveBody,
    IncidentSnoozeBody,
    IncidentsOptions,
)

log = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Argument parser; requester defaults come from PAGERDUTY_REQUESTER_ID."""
    p = argparse.ArgumentParser(prog="pd-incidents", description="Inspect and update PagerDuty incidents.")
    p.add_argument("--log-level", default=settings.LOG_LEVEL)
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("get", help="show one incident")
    g.add_argument("incident_id")

    ls = sub.add_parser("list", help="list incidents")
    ls.add_argument("--status", default=None, help="e.g. triggered,acknowledged")
    ls.add_argument("--sort-by", dest="sort_by", default=None, help="e.g. created_on:desc")
    ls.add_argument("--since", default=None)
    ls.add_argument("--until", default=None)

    for name in ("resolve", "acknowledge", "snooze"):
        sp = sub.add_parser(name, help=f"{name} an incident")
        sp.add_argument("incident_id")
        sp.add_argument("--requester-id", dest="requester_id", default=settings.PAGERDUTY_REQUESTER_ID)
        if name == "snooze":
            sp.add_argument("--duration", type=int, required=True, help="seconds")
    return p


def run(args: argparse.Namespace, client: Client):
    """Dispatch one subcommand; returns a JSON-ready payload."""
    incidents = client.incidents
    if args.command == "get":
        return incidents.get(args.incident_id).to_payload()
    if args.command == "list":
        opts = IncidentsOptions(status=args.status, sort_by=args.sort_by, since=args.since, until=args.until)
        return [i.to_payload() for i in incidents.list(opts)]
    if args.command == "resolve":
        return incidents.resolve(args.incident_id, IncidentResolveBody(requester_id=args.requester_id)).to_payload()
    if args.command == "acknowledge":
        body = IncidentAcknowledgeBody(requester_id=args.requester_id)
        return incidents.acknowledge(args.incident_id, body).to_payload()
    if args.command == "snooze":
        body = IncidentSnoozeBody(requester_id=args.requester_id, duration=args.duration)
        return incidents.snooze(args.incident_id, body).to_payload()
    raise ValueError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None, client: Optional[Client] = None, settings: Optional[Settings] = None) -> int:
    settings = settings or default_settings
    args = build_parser(settings).parse_args(argv)
    try:
        configure_logging(args.log_level, settings.SERVICE_NAME)
        owned = client is None
        if owned:
            client = Client.from_settings(settings)
        try:
            payload = run(args, client)
        finally:
            if owned:
                client.close()
    except (PagerDutyError, httpx.HTTPError, ValueError) as e:
        log.error("pd-incidents failed", extra={"command": args.command, "error": str(e)})
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
