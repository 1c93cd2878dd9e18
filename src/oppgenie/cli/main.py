"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="oppgenie",
        description="Find jobs, internships, volunteer roles and open-source opportunities",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress at INFO level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # list
    list_parser = subparsers.add_parser("list", help="Aggregate opportunities from all sources")
    _add_fetch_arguments(list_parser)
    _add_output_argument(list_parser)

    # search
    search_parser = subparsers.add_parser("search", help="Search aggregated opportunities by keyword")
    search_parser.add_argument("query", help="Substring to look for in title, description, organization, tags")
    _add_output_argument(search_parser)

    # trending
    trending_parser = subparsers.add_parser("trending", help="Random selection of aggregated opportunities")
    trending_parser.add_argument("--limit", type=int, default=10, help="Max opportunities, at most 10 (default: 10)")
    trending_parser.add_argument("--seed", type=int, default=None, help="Seed for a repeatable selection")
    _add_output_argument(trending_parser)

    # latest
    latest_parser = subparsers.add_parser("latest", help="Latest postings board")
    latest_parser.add_argument("--type", default=None, help="e.g. Internship, Volunteer, Job, Research")
    latest_parser.add_argument("--query", default="", help="Search term")
    _add_output_argument(latest_parser)

    # tags
    subparsers.add_parser("tags", help="Show trending topic tags")

    # filter
    filter_parser = subparsers.add_parser("filter", help="Filter opportunities by criteria")
    filter_parser.add_argument(
        "--criteria",
        type=Path,
        default=None,
        help="Path to criteria YAML (query, location, type, category)",
    )
    filter_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read opportunities from JSON file (default: fetch from sources)",
    )
    filter_parser.add_argument("--query", default=None, help="Override criteria query")
    filter_parser.add_argument("--location", default=None, help="Override criteria location")
    filter_parser.add_argument("--type", default=None, help="Override criteria type")
    filter_parser.add_argument("--category", default=None, help="Override criteria category")
    filter_parser.add_argument(
        "--show-explanations",
        action="store_true",
        help="Include filter explanations in output",
    )
    filter_parser.add_argument(
        "--stats",
        action="store_true",
        help="Show exclusion breakdown (location, query, type, category)",
    )
    _add_output_argument(filter_parser)

    # sources
    subparsers.add_parser("sources", help="List available sources")

    # chat
    chat_parser = subparsers.add_parser("chat", help="Ask the opportunity assistant")
    chat_parser.add_argument("message", help="Your message")
    chat_parser.add_argument(
        "--history",
        type=Path,
        default=None,
        help="JSON file with prior messages [{role, content}, ...]; updated with the new turn",
    )
    chat_parser.add_argument("--mode", choices=["prompt", "chat"], default=None, help="Endpoint style")
    chat_parser.add_argument("--persona", choices=["default", "detailed"], default="default")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "list":
        _run_list(args)
    elif args.command == "search":
        _run_search(args)
    elif args.command == "trending":
        _run_trending(args)
    elif args.command == "latest":
        _run_latest(args)
    elif args.command == "tags":
        _run_tags(args)
    elif args.command == "filter":
        _run_filter(args)
    elif args.command == "sources":
        _run_sources(args)
    elif args.command == "chat":
        _run_chat(args)
    else:
        parser.print_help()


def _add_fetch_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--query", default="", help="Free-text search passed to each source")
    parser.add_argument("--location", default="", help="Location substring; Remote always matches")
    parser.add_argument(
        "--source",
        action="append",
        default=None,
        dest="sources",
        help="Source to query (repeatable; default: all live sources)",
    )
    parser.add_argument(
        "--placeholders",
        type=int,
        default=0,
        help="Append N synthetic placeholder listings",
    )


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON to file (default: stdout)",
    )


def _emit(items: list, output: Path | None, label: str = "opportunities") -> None:
    """Print JSON to stdout or write to file."""
    output_text = json.dumps(
        [i.model_dump(mode="json") if hasattr(i, "model_dump") else i for i in items],
        indent=2,
        default=str,
    )
    if output:
        output.write_text(output_text, encoding="utf-8")
        print(f"Wrote {len(items)} {label} to {output}")
    else:
        print(output_text)


def _run_list(args: argparse.Namespace) -> None:
    """Run list command."""
    from oppgenie.aggregation import fetch_all_opportunities
    from oppgenie.connectors.registry import ConnectorRegistry

    connectors = None
    if args.sources:
        try:
            connectors = [ConnectorRegistry.get(s) for s in args.sources]
        except ValueError as e:
            raise SystemExit(str(e))

    opportunities = fetch_all_opportunities(
        args.query,
        args.location,
        connectors=connectors,
        include_placeholders=args.placeholders,
    )
    _emit(opportunities, args.output)


def _run_search(args: argparse.Namespace) -> None:
    """Run search command."""
    from oppgenie.aggregation import search_opportunities

    _emit(search_opportunities(args.query), args.output)


def _run_trending(args: argparse.Namespace) -> None:
    """Run trending command."""
    import random

    from oppgenie.aggregation import get_trending

    rng = random.Random(args.seed) if args.seed is not None else None
    _emit(get_trending(args.limit, rng=rng), args.output)


def _run_latest(args: argparse.Namespace) -> None:
    """Run latest command."""
    from oppgenie.aggregation import latest_opportunities

    _emit(latest_opportunities(type=args.type, query=args.query), args.output)


def _run_tags(args: argparse.Namespace) -> None:
    """Run tags command."""
    from oppgenie.aggregation import trending_tags

    for tag in trending_tags():
        print(f"  {tag.name:<20} {tag.count:>6}  +{tag.trend}%  [{tag.category}]")


def _run_filter(args: argparse.Namespace) -> None:
    """Run filter command."""
    from oppgenie.aggregation import fetch_all_opportunities
    from oppgenie.filtering import FilterEngine
    from oppgenie.models.criteria import SearchCriteria
    from oppgenie.models.opportunity import Opportunity

    criteria = SearchCriteria.from_yaml(args.criteria) if args.criteria else SearchCriteria()
    overrides = {
        k: getattr(args, k)
        for k in ("query", "location", "type", "category")
        if getattr(args, k) is not None
    }
    if overrides:
        criteria = criteria.model_copy(update=overrides)

    if args.input:
        data = json.loads(args.input.read_text())
        opportunities = [Opportunity.model_validate(o) for o in data]
    else:
        opportunities = fetch_all_opportunities()

    if not opportunities:
        print("No opportunities to filter.", file=sys.stderr)
        raise SystemExit(1)

    engine = FilterEngine(criteria)
    results = engine.filter_many(opportunities)
    passed = [r for r in results if r.passed]

    if args.stats:
        _print_filter_stats(results)

    if args.show_explanations:
        output_data = [
            {
                "opportunity": r.opportunity.model_dump(mode="json"),
                "passed": r.passed,
                "excluded_by_rule": r.excluded_by_rule,
                "explanations": r.explanations,
            }
            for r in results
        ]
        _emit(output_data, args.output, label="results")
    else:
        _emit([r.opportunity for r in passed], args.output)


def _print_filter_stats(results: list) -> None:
    """Print exclusion breakdown by first-failing rule."""
    from collections import Counter

    passed = sum(1 for r in results if r.passed)
    reasons: Counter[str] = Counter(r.excluded_by_rule for r in results if not r.passed)
    total = len(results)
    print(f"\n--- Filter stats: {passed}/{total} passed ---", file=sys.stderr)
    for rule, count in reasons.most_common():
        pct = 100 * count / total
        print(f"  Excluded by {rule}: {count} ({pct:.1f}%)", file=sys.stderr)


def _run_sources(args: argparse.Namespace) -> None:
    """Run sources command."""
    from oppgenie.connectors.registry import ConnectorRegistry

    defaults = set(ConnectorRegistry.default_sources())
    for source in ConnectorRegistry.available_sources():
        print(f"  {source}{'' if source in defaults else ' (opt-in)'}")


def _run_chat(args: argparse.Namespace) -> None:
    """Run chat command. With --history, the file is extended with both turns."""
    from oppgenie.chat import generate_response
    from oppgenie.errors import OppGenieError
    from oppgenie.models.chat import ChatMessage

    history: list[ChatMessage] = []
    if args.history and args.history.exists():
        history = [ChatMessage.model_validate(m) for m in json.loads(args.history.read_text())]
    history.append(ChatMessage(role="user", content=args.message))

    try:
        reply = generate_response(history, mode=args.mode, persona=args.persona)
    except OppGenieError as e:
        raise SystemExit(str(e))

    print(reply)
    if args.history:
        history.append(ChatMessage(role="assistant", content=reply))
        args.history.write_text(
            json.dumps([m.model_dump() for m in history], indent=2),
            encoding="utf-8",
        )


if __name__ == "__main__":
    main()
