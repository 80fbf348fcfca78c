"""
Command-line client for the dashboard API.

Run (with the server listening):
  python -m cityboard.cli Paris
  python -m cityboard.cli "New York" --base-url http://localhost:3000
"""
import argparse
import asyncio
import sys
from typing import List, Optional

from cityboard.config import settings
from cityboard.services.orchestrator import SearchContext, SearchOrchestrator, SearchState
from cityboard.services.render import render_currency, render_news, render_weather
from cityboard.utils.log_format import configure_logging


def render_context(context: SearchContext) -> str:
    """Render a finished search as plain text, one section per panel."""
    if context.error and context.weather is None:
        return f"Error: {context.error}"

    lines: List[str] = ["== Weather =="]
    lines.extend(render_weather(context.weather))
    if context.map_url:
        lines.append(f"  Map: {context.map_url}")
    lines.append("")
    lines.append("== News ==")
    lines.extend(render_news(context.news))
    lines.append("")
    lines.append("== Currency ==")
    lines.extend(render_currency(context.currency, context.base_currency or "", context.target_currency))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show weather, news and exchange rate for a city.")
    parser.add_argument("city", help="City name")
    parser.add_argument("--base-url", default=f"http://localhost:{settings.port}", help="Dashboard API root")
    parser.add_argument("--timeout", type=float, default=settings.request_timeout, help="Request timeout in seconds")
    args = parser.parse_args(argv)

    configure_logging("WARNING")
    orchestrator = SearchOrchestrator(base_url=args.base_url, timeout=args.timeout)
    context = asyncio.run(orchestrator.search(args.city))
    print(render_context(context))

    if context.state == SearchState.SUCCESS:
        return 0
    if context.state == SearchState.PARTIAL_FAILURE:
        return 2
    return 1


if __name__ == "__main__":
    sys.exit(main())
