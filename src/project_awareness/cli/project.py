"""Current-project CLI commands."""

import argparse
import sys

import yaml


def _load_table(args: argparse.Namespace, path: str | None = None) -> list | None:
    from project_awareness.suggest.keywords import load_keyword_table

    try:
        return load_keyword_table(path, home=args.home)
    except (yaml.YAMLError, ValueError) as e:
        print(f"Cannot load project keywords: {e}")
        return None


def cmd_project_current(args: argparse.Namespace) -> int:
    from project_awareness.state.pointer import read_current_project

    current = read_current_project(args.home)
    print(current or "none")
    return 0


def cmd_project_switch(args: argparse.Namespace) -> int:
    from project_awareness.state.activity import log_switch
    from project_awareness.state.pointer import (
        NO_PROJECT,
        read_current_project,
        write_current_project,
    )
    from project_awareness.state.stats import known_projects

    table = _load_table(args)
    if table is None:
        return 1
    known = known_projects(args.home, table)
    if args.name not in known and not args.force:
        print(f"Unknown project: {args.name}")
        print("Use --force to switch anyway. Known projects:")
        for name in known:
            print(f"  - {name}")
        return 1

    previous = read_current_project(args.home) or NO_PROJECT
    write_current_project(args.name, args.home)
    log_switch(previous, args.name, "cli", home=args.home)
    print(f"Switched to project: {args.name}")
    return 0


def cmd_project_stats(args: argparse.Namespace) -> int:
    from project_awareness.state.stats import load_stats

    stats = load_stats(args.home)
    if not stats:
        print("No project statistics recorded.")
        return 0

    print("Project Usage")
    print("─" * 60)
    ranked = sorted(stats.items(), key=lambda kv: kv[1].get("tool_uses", 0), reverse=True)
    for name, entry in ranked:
        print(f"  {name:<24} {entry.get('tool_uses', 0):>5} tool uses  last {entry.get('last_used') or '-'}")
        print(
            f"    {len(entry.get('directories', []))} directories, "
            f"agents: {', '.join(entry.get('agents_used', [])) or '-'}"
        )
    return 0


def cmd_project_skip_prompts(args: argparse.Namespace) -> int:
    from project_awareness.paths import skip_prompts_path

    path = skip_prompts_path(args.home)
    if args.enable:
        path.unlink(missing_ok=True)
        print("Project prompts enabled")
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("true\n")
        print("Project prompts disabled")
    return 0


def cmd_project_suggest(args: argparse.Namespace) -> int:
    from project_awareness.state.pointer import read_current_project
    from project_awareness.suggest.scoring import best_match, score_projects

    table = _load_table(args, args.keywords)
    if table is None:
        return 1
    text = sys.stdin.read()
    matches = score_projects(text, table)
    if not matches:
        print("No project keywords found.")
        return 0

    for m in matches:
        print(f"  {m.project:<24} {m.matches} keyword(s)  {m.percent}%")

    best = best_match(text, table, args.threshold)
    current = read_current_project(args.home)
    if best and best.project != current:
        print(f"\nSuggested project: {best.project} ({best.percent}% confidence)")
    elif best:
        print(f"\nAlready on the best matching project: {best.project}")
    return 0
