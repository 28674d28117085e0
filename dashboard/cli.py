#!/usr/bin/env python3
"""
Terminal viewer for Traffic Analyzer.

Usage:
    traffic-dashboard example.com
    traffic-dashboard --api-url http://localhost:8000 example.com openai.com
    traffic-dashboard            # interactive: one domain per line, blank line quits
"""

import logging
import sys
from typing import Iterable, List, Optional, TextIO

from dotenv import load_dotenv

from dashboard.client import ProxyClient
from dashboard.controller import DashboardController
from dashboard.render import render
from dashboard.transforms import build_view


def run_lookups(
    controller: DashboardController, domains: Iterable[str], out: TextIO
) -> int:
    """Look up each domain and print a frame; returns the number of failed lookups."""
    failures = 0
    for domain in domains:
        controller.set_domain(domain)
        if not controller.submit_lookup():
            continue
        if controller.error:
            failures += 1
        print(render(build_view(controller.state, controller.domain)), file=out)
        print(file=out)
    return failures


def _prompt(inp: TextIO, out: TextIO) -> Iterable[str]:
    while True:
        out.write("Enter domain (e.g. example.com): ")
        out.flush()
        line = inp.readline()
        if not line or not line.strip():
            return
        yield line


def main(argv: Optional[List[str]] = None, inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
    """Main entry point for the terminal dashboard."""
    import argparse

    load_dotenv()
    from config import settings

    parser = argparse.ArgumentParser(
        description="Check estimated web traffic for a domain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  traffic-dashboard example.com
  traffic-dashboard --api-url http://localhost:8000 example.com
        """,
    )
    parser.add_argument("domains", nargs="*", help="Domains to analyze (interactive if omitted)")
    parser.add_argument(
        "--api-url",
        default=settings.DASHBOARD_API_URL,
        help="Base URL of the Traffic Analyzer proxy",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    client = ProxyClient(args.api_url)
    controller = DashboardController(client)
    try:
        domains = args.domains or _prompt(inp, out)
        failures = run_lookups(controller, domains, out)
    finally:
        client.close()

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
