"""Command-line utility for scoring a query and its cited sources, or serving the API."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
from typing import Dict, List

import httpx

from app.deps import get_config
from app.services.analyze_service import analyze
from app.utils.fusion import risk_tier
from core.providers.loader import load_providers


async def run_analysis(query: str, urls: List[str]) -> Dict:
    """Score ``query`` and ``urls`` with providers built from the current configuration."""
    config = get_config()
    async with httpx.AsyncClient(timeout=config.timeout_seconds) as client:
        providers = load_providers(config, client)
        return await analyze(query, [{"url": url} for url in urls], providers)


def run_analysis_sync(query: str, urls: List[str]) -> Dict:
    return asyncio.run(run_analysis(query, urls))


def cmd_analyze(args: argparse.Namespace) -> None:
    """Run the full analysis and print either JSON or a readable report."""
    result = run_analysis_sync(args.query, args.sources or [])
    if not args.pretty:
        print(json.dumps(result, indent=2))
        return

    print(f"Overall Score: {result['overallScore']} ({risk_tier(result['overallScore']).value} risk)")
    print(f"Summary: {result['summary']}")
    print("\nMetrics:")
    for name, metric in result["metrics"].items():
        print(f"  {name}: {metric['score']} - {metric['details']}")
    shared = result["metrics"]["networkAnalysis"].get("sharedIpDomains") or []
    if shared:
        print("\nShared-IP domains:")
        for domain in shared:
            print(f"  - {domain}")


def cmd_serve(args: argparse.Namespace) -> None:
    from app.uvicorn_runner import main as serve  # local import keeps uvicorn optional for analyze

    serve(host=args.host, port=args.port)


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(prog="citeguard")
    sub = parser.add_subparsers(dest="command")

    analyze_p = sub.add_parser("analyze")
    analyze_p.add_argument("--query", required=True)
    analyze_p.add_argument("--source", dest="sources", action="append", help="Cited source URL (repeatable)")
    analyze_p.add_argument("--pretty", action="store_true", help="Print a readable report instead of JSON")
    analyze_p.set_defaults(func=cmd_analyze)

    serve_p = sub.add_parser("serve")
    serve_p.add_argument("--host")
    serve_p.add_argument("--port", type=int)
    serve_p.set_defaults(func=cmd_serve)

    return parser


def main(argv: List[str] | None = None) -> None:
    """CLI entry point invoked via `citeguard ...` or `python -m cli.citeguard_cli ...`."""
    logging.basicConfig(level=os.getenv("CITEGUARD_LOG_LEVEL", "WARNING").upper())
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    args.func(args)


if __name__ == "__main__":
    main()
