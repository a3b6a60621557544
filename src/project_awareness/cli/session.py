"""Smart session CLI commands."""

import argparse


def cmd_start(args: argparse.Namespace) -> int:
    from project_awareness.logs import configure_logging
    from project_awareness.restore.smart_start import start_smart_session

    configure_logging(args.home)
    ok = start_smart_session(
        args.project,
        home=args.home,
        script_dir=args.script_dir,
        working_directory=args.workdir,
    )
    return 0 if ok else 1


def cmd_list(args: argparse.Namespace) -> int:
    from project_awareness.sessions.loader import list_smart_sessions

    sessions = list_smart_sessions(args.home)
    if not sessions:
        print("No smart sessions found.")
        return 0

    print("Available Smart Sessions:\n")
    for i, s in enumerate(sessions, start=1):
        generated = f"  generated {s.generated_at}" if s.generated_at else ""
        print(f"  {i}. {s.project} ({s.consolidated_sessions} sessions){generated}")
    return 0


def cmd_consolidate(args: argparse.Namespace) -> int:
    from project_awareness.logs import configure_logging
    from project_awareness.sessions.consolidator import consolidate_all, consolidate_project
    from project_awareness.sessions.loader import list_projects

    configure_logging(args.home)

    if args.all:
        results = consolidate_all(args.home)
        print(f"Consolidated {len(results)} project(s):")
        for r in results:
            print(f"  - {r.project} ({r.session_count} sessions)")
        return 0

    if not args.project:
        print("Usage: project-awareness consolidate <project> | --all")
        projects = list_projects(args.home)
        if projects:
            print("\nAvailable projects:")
            for name in projects:
                print(f"  - {name}")
        return 0

    result = consolidate_project(args.project, args.home)
    if result is None:
        print(f"Nothing to consolidate for {args.project} (no project directory or sessions)")
        return 1

    print(f"Smart session created: {result.project}")
    print(f"  Path:  {result.path}")
    print(f"  Based on {result.session_count} sessions")
    return 0
