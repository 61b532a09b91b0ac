#!/usr/bin/env python3
"""
Bulk domain availability checker against a running Domain Check API.

Setup:
    pip install -e ".[cli]"

Usage:
    python scripts/check_domains.py --server http://localhost:8000 --zones example
    python scripts/check_domains.py --server https://check.registry.example acme widget
"""

import argparse
import asyncio
import sys
from typing import Dict, List, Optional
from urllib.parse import urlparse

import aiohttp

# ── Defaults ─────────────────────────────────────────────────────────────────

DEFAULT_SERVER = "http://localhost:8000"
DEFAULT_ROOTS = ["example", "test", "registry"]
DEFAULT_ZONES = ["example"]

CONCURRENCY = 8   # max parallel requests

# The local dev server skips OAuth2 and trusts this login cookie instead
DEV_SERVER_COOKIE = "dev_appserver_login=test@example.com:true:1858047912411"
LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}

# ANSI colours
GREEN  = "\033[92m"
RED    = "\033[91m"
YELLOW = "\033[93m"
GREY   = "\033[90m"
BOLD   = "\033[1m"
RESET  = "\033[0m"


# ── Helpers ──────────────────────────────────────────────────────────────────

def build_domains(roots: List[str], zones: List[str]) -> List[str]:
    """Every root under every zone, in input order, without duplicates."""
    seen = set()
    domains = []
    for root in roots:
        for zone in zones:
            domain = f"{root.strip().lower()}.{zone.strip().lower().lstrip('.')}"
            if domain not in seen:
                seen.add(domain)
                domains.append(domain)
    return domains


def request_headers(server: str) -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if urlparse(server).hostname in LOCAL_HOSTS:
        headers["Cookie"] = DEV_SERVER_COOKIE
    return headers


def to_result(domain: str, data: dict) -> dict:
    """Flatten a /check envelope into a result row for this domain."""
    if data.get("status") != "success":
        return {"domain": domain, "available": None, "tier": None,
                "reason": None, "error": data.get("reason", "Unknown error")}
    if data.get("available"):
        return {"domain": domain, "available": True, "tier": data.get("tier"),
                "reason": None, "error": None}
    return {"domain": domain, "available": False, "tier": None,
            "reason": data.get("reason"), "error": None}


def group_results(results: List[dict]) -> Dict[str, List[dict]]:
    return {
        "available": [r for r in results if r["available"] is True],
        "taken":     [r for r in results if r["available"] is False and not r["error"]],
        "errors":    [r for r in results if r["error"]],
    }


# ── Core ─────────────────────────────────────────────────────────────────────

async def check_domain(
    session: aiohttp.ClientSession,
    server: str,
    domain: str,
    semaphore: asyncio.Semaphore,
) -> dict:
    async with semaphore:
        try:
            async with session.get(
                f"{server.rstrip('/')}/check",
                params={"domain": domain},
                timeout=aiohttp.ClientTimeout(total=12),
            ) as resp:
                data = await resp.json(content_type=None)
                return to_result(domain, data)

        except asyncio.TimeoutError:
            return {"domain": domain, "available": None, "tier": None,
                    "reason": None, "error": "Timeout"}
        except Exception as exc:
            return {"domain": domain, "available": None, "tier": None,
                    "reason": None, "error": str(exc)}


async def run(server: str, roots: List[str], zones: List[str]) -> Dict[str, List[dict]]:
    domains = build_domains(roots, zones)

    print(f"\n{BOLD}Checking {len(domains)} domains across "
          f"{len(roots)} names × {len(zones)} zones ...{RESET}\n")

    semaphore = asyncio.Semaphore(CONCURRENCY)
    connector = aiohttp.TCPConnector(limit=CONCURRENCY)

    async with aiohttp.ClientSession(connector=connector, headers=request_headers(server)) as session:
        tasks   = [check_domain(session, server, d, semaphore) for d in domains]
        results = await asyncio.gather(*tasks)

    groups = group_results(list(results))
    print_report(groups)
    return groups


def print_report(groups: Dict[str, List[dict]]) -> None:
    available, taken, errors = groups["available"], groups["taken"], groups["errors"]

    # ── Print available ───────────────────────────────────────────────────────
    if available:
        print(f"{BOLD}{'── AVAILABLE ':─<55}{RESET}")
        # Standard tier first, then premium tiers alphabetically
        available.sort(key=lambda r: (r["tier"] != "standard", r["tier"] or "", r["domain"]))
        for r in available:
            tier = r["tier"] or "standard"
            badge = f" {YELLOW}[{tier.upper()}]{RESET}" if tier != "standard" else ""
            print(f"  {GREEN}✓{RESET}  {r['domain']:<28}{badge}")
    else:
        print(f"  {RED}No domains available.{RESET}")

    # ── Print taken ───────────────────────────────────────────────────────────
    if taken:
        print(f"\n{BOLD}{'── TAKEN ':─<55}{RESET}")
        for r in taken:
            print(f"  {RED}✗{RESET}  {GREY}{r['domain']:<28} {r['reason'] or ''}{RESET}")

    # ── Print errors ──────────────────────────────────────────────────────────
    if errors:
        print(f"\n{BOLD}{'── ERRORS ':─<55}{RESET}")
        for r in errors:
            print(f"  ?  {r['domain']:<28} {YELLOW}{r['error']}{RESET}")

    # ── Summary ───────────────────────────────────────────────────────────────
    print(f"\n{BOLD}Summary:{RESET} "
          f"{GREEN}{len(available)} available{RESET}  "
          f"{RED}{len(taken)} taken{RESET}  "
          f"{YELLOW}{len(errors)} errors{RESET}\n")


# ── Entry point ───────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Bulk-check domains against the Domain Check API")
    parser.add_argument("roots", nargs="*", default=DEFAULT_ROOTS, help="Name roots to check")
    parser.add_argument("--server", default=DEFAULT_SERVER, help="Base URL of the check API")
    parser.add_argument("--zones", nargs="+", default=DEFAULT_ZONES, help="Zones to check each root under")
    args = parser.parse_args(argv)

    groups = asyncio.run(run(args.server, args.roots, args.zones))
    return 1 if groups["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())
