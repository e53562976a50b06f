"""CLI for the truemarkets_agg API.

Usage:
  truemarkets-cli health
  truemarkets-cli list --limit 5 --sort-order asc
  truemarkets-cli detail 0x1234567890123456789012345678901234567890
  truemarkets-cli supports base-mainnet
"""
import argparse
import json
import sys

import httpx


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def _envelope_exit_code(data: dict) -> int:
    """Envelopes report failure in `error`, not in the HTTP status."""
    if data.get("error"):
        print(f"Error: {data['error']}", file=sys.stderr)
        return 1
    return 0


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    r = client.get("/")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_list(client: httpx.Client, args: argparse.Namespace) -> int:
    params = {"limit": args.limit, "offset": args.offset, "sort_order": args.sort_order}
    r = client.get("/markets", params=params)
    r.raise_for_status()
    data = r.json()
    print(f"{len(data.get('markets', []))} of {data.get('totalMarkets', 0)} active markets")
    print_json(data)
    return _envelope_exit_code(data)


def cmd_detail(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(f"/markets/{args.market_address}")
    r.raise_for_status()
    data = r.json()
    print_json(data)
    return _envelope_exit_code(data)


def cmd_supports(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(
        f"/markets/networks/{args.network_id}",
        params={"protocol_family": args.protocol_family},
    )
    r.raise_for_status()
    print_json(r.json())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query the truemarkets_agg API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:8001",
        help="API base URL (default: http://localhost:8001)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    subparsers.add_parser("health", help="GET / health check")

    p = subparsers.add_parser("list", help="GET /markets")
    p.add_argument("--limit", type=int, default=10, help="Max markets (default: 10)")
    p.add_argument("--offset", type=int, default=0, help="Markets to skip (default: 0)")
    p.add_argument("--sort-order", choices=["asc", "desc"], default="desc", help="Order (default: desc)")

    p = subparsers.add_parser("detail", help="GET /markets/{market_address}")
    p.add_argument("market_address", help="TruthMarket contract address")

    p = subparsers.add_parser("supports", help="GET /markets/networks/{network_id}")
    p.add_argument("network_id", help="Network ID (e.g. base-mainnet)")
    p.add_argument("--protocol-family", default="evm", help="Protocol family (default: evm)")

    return parser


HANDLERS = {
    "health": cmd_health,
    "list": cmd_list,
    "detail": cmd_detail,
    "supports": cmd_supports,
}


def main(argv: list[str] | None = None, client: httpx.Client | None = None) -> int:
    args = build_parser().parse_args(argv)
    handler = HANDLERS[args.command]

    try:
        if client is not None:
            return handler(client, args)
        with httpx.Client(base_url=args.base_url.rstrip("/"), timeout=args.timeout) as http:
            return handler(http, args)
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            print(e.response.text, file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
